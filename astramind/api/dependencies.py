"""
Request dependencies.

The service container lives on ``app.state`` (set by create_app), so
routes never reach for a global store.
"""
from fastapi import Request

from astramind.services.container import ServiceContainer


def get_services(request: Request) -> ServiceContainer:
    """Return the service container of the running application."""
    return request.app.state.services
