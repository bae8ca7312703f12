"""
Standup Notes Backend - Notes Route Handlers
============================================

What:  /notes CRUD plus the today/yesterday listings.
How:   Each handler pulls its inputs from the request and delegates to
       NoteService. Errors are raised, never formatted here; the handlers
       registered in main.py turn them into JSON bodies.

Update and delete answer 204 whether or not the id exists.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from standup_notes.database import get_db_session
from standup_notes.schemas.common import ErrorResponse
from standup_notes.schemas.note import (
    DayNotesResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)
from standup_notes.services.note_service import note_service

router = APIRouter(prefix="/notes", tags=["Notes"])

_ERRORS = {500: {"description": "Store error", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[NoteResponse],
    responses=_ERRORS,
    summary="List all notes",
)
async def list_notes(db: AsyncSession = Depends(get_db_session)) -> List[NoteResponse]:
    return await note_service.list_notes(db)


@router.post(
    "",
    status_code=201,
    response_model=NoteResponse,
    responses=_ERRORS,
    summary="Create a note",
)
async def create_note(
    payload: Optional[NoteCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Insert a note. A body without `content` is still sent to the store,
    which rejects it (→ 500).
    """
    payload = payload or NoteCreate()
    return await note_service.create_note(db, content=payload.content)


@router.get(
    "/today",
    response_model=DayNotesResponse,
    responses=_ERRORS,
    summary="Notes created today (UTC)",
)
async def list_today(db: AsyncSession = Depends(get_db_session)) -> DayNotesResponse:
    return await note_service.list_today(db)


@router.get(
    "/yesterday",
    response_model=DayNotesResponse,
    responses=_ERRORS,
    summary="Notes created yesterday (UTC)",
)
async def list_yesterday(db: AsyncSession = Depends(get_db_session)) -> DayNotesResponse:
    return await note_service.list_yesterday(db)


@router.put(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses=_ERRORS,
    summary="Replace a note's content",
)
async def update_note(
    note_id: int,
    payload: Optional[NoteUpdate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    payload = payload or NoteUpdate()
    await note_service.update_note(db, note_id, content=payload.content)
    return Response(status_code=204)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses=_ERRORS,
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete_note(db, note_id)
    return Response(status_code=204)
