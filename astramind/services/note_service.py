"""
Note Service - CRUD for notes with activity logging.
"""
from typing import List

from astramind.core.exceptions import NotFoundError
from astramind.models.entities import Note
from astramind.models.schemas import NoteCreate, NoteUpdate
from astramind.services.activity_service import (
    NOTE_CREATED,
    NOTE_DELETED,
    NOTE_UPDATED,
    ActivityService,
)
from astramind.storage.base import Storage


class NoteService:

    def __init__(self, storage: Storage, activities: ActivityService):
        self.storage = storage
        self.activities = activities

    def list(self) -> List[Note]:
        return self.storage.list_notes()

    def get(self, note_id: str) -> Note:
        note = self.storage.get_note(note_id)
        if note is None:
            raise NotFoundError("Note", note_id)
        return note

    def create(self, data: NoteCreate) -> Note:
        note = self.storage.create_note(data)
        self.activities.log(NOTE_CREATED, f"Created note: {note.title}")
        return note

    def update(self, note_id: str, data: NoteUpdate) -> Note:
        note = self.storage.update_note(note_id, data.to_patch())
        if note is None:
            raise NotFoundError("Note", note_id)
        self.activities.log(NOTE_UPDATED, f"Updated note: {note.title}")
        return note

    def delete(self, note_id: str) -> None:
        note = self.get(note_id)
        if not self.storage.delete_note(note_id):
            raise NotFoundError("Note", note_id)
        self.activities.log(NOTE_DELETED, f"Deleted note: {note.title}")
