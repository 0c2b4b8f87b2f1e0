"""
Storage Package - Entity persistence behind a single contract.

- base.py   : the abstract Storage contract
- memory.py : MemoryStorage, the process-local implementation

Example:
    >>> from astramind.storage import MemoryStorage
    >>> store = MemoryStorage()
    >>> store.list_goals()
    []
"""
from astramind.storage.base import Storage
from astramind.storage.memory import MemoryStorage

__all__ = [
    "Storage",
    "MemoryStorage",
]
