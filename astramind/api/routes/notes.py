"""
Note Routes - note CRUD. Every mutation is written to the activity log.
"""
from typing import List

from fastapi import APIRouter, Depends

from astramind.api.dependencies import get_services
from astramind.models import DeleteResponse, ErrorResponse, Note, NoteCreate, NoteUpdate
from astramind.services.container import ServiceContainer

router = APIRouter(
    prefix="/api/notes",
    tags=["Notes"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid note data"},
        404: {"model": ErrorResponse, "description": "Note not found"},
    },
)


@router.get("", response_model=List[Note], summary="List notes, newest first")
async def list_notes(services: ServiceContainer = Depends(get_services)):
    return services.notes.list()


@router.get("/{note_id}", response_model=Note, summary="Get a note")
async def get_note(note_id: str, services: ServiceContainer = Depends(get_services)):
    return services.notes.get(note_id)


@router.post("", response_model=Note, summary="Create a note")
async def create_note(data: NoteCreate, services: ServiceContainer = Depends(get_services)):
    return services.notes.create(data)


@router.patch("/{note_id}", response_model=Note, summary="Update a note")
async def update_note(note_id: str, data: NoteUpdate, services: ServiceContainer = Depends(get_services)):
    return services.notes.update(note_id, data)


@router.delete("/{note_id}", response_model=DeleteResponse, summary="Delete a note")
async def delete_note(note_id: str, services: ServiceContainer = Depends(get_services)):
    services.notes.delete(note_id)
    return DeleteResponse(success=True)
