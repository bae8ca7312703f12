"""
Standup Notes Backend - Note Service
====================================

What:  Store operations behind the /notes endpoints.
How:   Each method runs one statement on the request's AsyncSession and
       commits writes itself. SQLAlchemy failures are wrapped in
       DatabaseError (→ 500).
Who:   Called by routes/notes.py; notes_between() is also used by the
       standup flow in SummaryService.

Pass-through semantics:
    - create: no local presence check; the table's NOT NULL constraint is
      the only guard on `content`
    - update/delete: a statement matching zero rows is a success
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional

from sqlalchemy import delete, desc, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from standup_notes.dates import day_window, utc_today
from standup_notes.exceptions import DatabaseError
from standup_notes.models.note import Note
from standup_notes.schemas.note import DayNotesResponse, NoteResponse

logger = logging.getLogger(__name__)


class NoteService:
    """
    CRUD and day-window reads over the `notes` table.

    Stateless: the session is passed into every call.
    """

    async def list_notes(self, db: AsyncSession) -> List[NoteResponse]:
        """Every note, in the order the store returns them."""
        try:
            result = await db.execute(select(Note))
            notes = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e))
            raise DatabaseError.wrap(e, "list notes")
        return [NoteResponse.model_validate(note) for note in notes]

    async def create_note(self, db: AsyncSession, content: Optional[str]) -> NoteResponse:
        """
        Insert a note and return the stored row, including the id and
        created_at the store assigned.
        """
        note = Note(content=content)
        try:
            db.add(note)
            await db.flush()
            await db.commit()
            await db.refresh(note)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error creating note: %s", str(e))
            raise DatabaseError.wrap(e, "create note")

        logger.info("Note %s created", note.id)
        return NoteResponse.model_validate(note)

    async def update_note(self, db: AsyncSession, note_id: int, content: Optional[str]) -> None:
        """Overwrite `content` of the note with `note_id`, if there is one."""
        try:
            result = await db.execute(
                update(Note).where(Note.id == note_id).values(content=content)
            )
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error updating note %s: %s", note_id, str(e))
            raise DatabaseError.wrap(e, "update note")

        logger.info("Note %s updated (%d row(s) matched)", note_id, result.rowcount)

    async def delete_note(self, db: AsyncSession, note_id: int) -> None:
        """Delete the note with `note_id`, if there is one."""
        try:
            result = await db.execute(delete(Note).where(Note.id == note_id))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error deleting note %s: %s", note_id, str(e))
            raise DatabaseError.wrap(e, "delete note")

        logger.info("Note %s deleted (%d row(s) matched)", note_id, result.rowcount)

    async def notes_between(
        self,
        db: AsyncSession,
        start: datetime,
        end: datetime,
        newest_first: bool = False,
    ) -> List[Note]:
        """
        Notes with start <= created_at < end.

        Rows come back in insertion order (ascending id), or by created_at
        descending with `newest_first`.
        """
        query = select(Note).where(Note.created_at >= start, Note.created_at < end)
        if newest_first:
            query = query.order_by(desc(Note.created_at), desc(Note.id))
        else:
            query = query.order_by(Note.id)
        try:
            result = await db.execute(query)
        except SQLAlchemyError as e:
            logger.error(
                "Database error fetching notes between %s and %s: %s",
                start.isoformat(),
                end.isoformat(),
                str(e),
            )
            raise DatabaseError.wrap(e, "fetch notes in range")
        return list(result.scalars().all())

    async def list_notes_for_day(self, db: AsyncSession, day: date) -> DayNotesResponse:
        """Notes of one UTC day (see dates.day_window), newest first."""
        start, end = day_window(day)
        notes = await self.notes_between(db, start, end, newest_first=True)
        items = [NoteResponse.model_validate(note) for note in notes]
        return DayNotesResponse(date=day.isoformat(), notes=items, count=len(items))

    async def list_today(self, db: AsyncSession) -> DayNotesResponse:
        return await self.list_notes_for_day(db, utc_today())

    async def list_yesterday(self, db: AsyncSession) -> DayNotesResponse:
        return await self.list_notes_for_day(db, utc_today() - timedelta(days=1))


note_service = NoteService()
