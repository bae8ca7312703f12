"""
Standup Notes Backend - Summary Service
=======================================

What:  Store operations behind the /summaries endpoints, plus standup
       summary generation.
Who:   Called by routes/summaries.py.

Standup Flow (POST /summaries/standup-summary?date=D):
    ┌──────────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────────┐
    │ Parse date D │───▶│ Notes in     │───▶│ Completion   │───▶│ Save summary │
    │ (400 if bad) │    │ D+1 .. D+3   │    │ provider     │    │ (best effort)│
    └──────────────┘    └──────────────┘    └──────────────┘    └──────────────┘
                               │ none
                               ▼
                        "No notes found ..." (no provider call)

    Errors from the notes query or the provider propagate (→ 500). A failed
    save is logged and reported as savedSummary = null.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from standup_notes.dates import parse_calendar_date, standup_window
from standup_notes.exceptions import DatabaseError, InvalidInputError
from standup_notes.models.note import Note
from standup_notes.models.summary import Summary
from standup_notes.schemas.summary import StandupSummaryResponse, SummaryResponse
from standup_notes.services.gemini_service import gemini_service
from standup_notes.services.llm_base import CompletionService, Message
from standup_notes.services.note_service import note_service

logger = logging.getLogger(__name__)

NO_NOTES_MESSAGE = "No notes found for the specified date."

STANDUP_SYSTEM_PROMPT = (
    "You are a helpful assistant that generates concise standup meeting summaries. "
    "Format the response in a clear, professional manner."
)

STANDUP_USER_TEMPLATE = """Based on these notes from {date}, generate a standup meeting summary following this format:

What I Did Yesterday:
- Summarize key accomplishments and work completed (if any, otherwise state that nothing was found in the notes)

What I Will Do Today:
- Outline planned tasks and objectives (if any, otherwise state that nothing was found in the notes)

Obstacles/Blockers:
- Identify any challenges or impediments (if any, otherwise state that nothing was found in the notes)

Notes used for summary:
{notes}"""


def join_note_contents(notes: List[Note]) -> str:
    """Note contents in the given order, separated by a blank line."""
    return "\n\n".join(note.content for note in notes)


def build_standup_messages(date: str, notes_content: str) -> List[Message]:
    """System + user messages asking for the three-section standup summary."""
    return [
        {"role": "system", "content": STANDUP_SYSTEM_PROMPT},
        {
            "role": "user",
            "content": STANDUP_USER_TEMPLATE.format(date=date, notes=notes_content),
        },
    ]


class SummaryService:
    """
    CRUD over the `summaries` table and standup generation.

    The completion provider defaults to the shared Gemini client; tests and
    alternative deployments can pass another CompletionService.
    """

    def __init__(self, completion: Optional[CompletionService] = None):
        self.completion = completion or gemini_service

    async def list_summaries(self, db: AsyncSession) -> List[SummaryResponse]:
        """Every summary, in the order the store returns them."""
        try:
            result = await db.execute(select(Summary))
            summaries = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing summaries: %s", str(e))
            raise DatabaseError.wrap(e, "list summaries")
        return [SummaryResponse.model_validate(summary) for summary in summaries]

    async def create_summary(
        self,
        db: AsyncSession,
        summary_date: Optional[str],
        content: Optional[str],
    ) -> SummaryResponse:
        """Insert a summary and return the stored row."""
        summary = Summary(summary_date=summary_date, content=content)
        try:
            db.add(summary)
            await db.flush()
            await db.commit()
            await db.refresh(summary)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error creating summary: %s", str(e))
            raise DatabaseError.wrap(e, "create summary")

        logger.info("Summary %s created for %s", summary.id, summary_date)
        return SummaryResponse.model_validate(summary)

    async def update_summary(
        self,
        db: AsyncSession,
        summary_id: int,
        summary_date: Optional[str],
        content: Optional[str],
    ) -> None:
        """Overwrite both fields of the summary with `summary_id`, if there is one."""
        try:
            result = await db.execute(
                update(Summary)
                .where(Summary.id == summary_id)
                .values(summary_date=summary_date, content=content)
            )
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error updating summary %s: %s", summary_id, str(e))
            raise DatabaseError.wrap(e, "update summary")

        logger.info("Summary %s updated (%d row(s) matched)", summary_id, result.rowcount)

    async def delete_summary(self, db: AsyncSession, summary_id: int) -> None:
        """Delete the summary with `summary_id`, if there is one."""
        try:
            result = await db.execute(delete(Summary).where(Summary.id == summary_id))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error deleting summary %s: %s", summary_id, str(e))
            raise DatabaseError.wrap(e, "delete summary")

        logger.info("Summary %s deleted (%d row(s) matched)", summary_id, result.rowcount)

    async def generate_standup_summary(
        self,
        db: AsyncSession,
        date: Optional[str],
    ) -> StandupSummaryResponse:
        """
        Generate, save and return a standup summary for `date`.

        Args:
            db: Request session
            date: Raw `date` query parameter (YYYY-MM-DD)

        Returns:
            StandupSummaryResponse. With no notes in the window only `summary`
            is set; otherwise `saved_summary` is set explicitly (row or None).

        Raises:
            InvalidInputError: `date` missing or not a date (→ 400)
            DatabaseError: Notes query failed (→ 500)
            LLMServiceError: Provider failed (→ 500)
        """
        if not date:
            raise InvalidInputError(message="Date is required", field="date")
        day = parse_calendar_date(date)

        start, end = standup_window(day)
        logger.info(
            "Standup summary for %s: querying notes in [%s, %s)",
            date,
            start.isoformat(),
            end.isoformat(),
        )

        notes = await note_service.notes_between(db, start, end)
        logger.info("Standup summary for %s: %d note(s) found", date, len(notes))

        if not notes:
            logger.warning("No notes found for date: %s", date)
            return StandupSummaryResponse(summary=NO_NOTES_MESSAGE)

        notes_content = join_note_contents(notes)
        logger.debug("Notes content for summarization: %s", notes_content)

        standup_summary = await self.completion.complete(
            build_standup_messages(date, notes_content)
        )

        saved_summary = await self._save_generated_summary(db, date, standup_summary)
        return StandupSummaryResponse(summary=standup_summary, saved_summary=saved_summary)

    async def _save_generated_summary(
        self,
        db: AsyncSession,
        date: str,
        content: str,
    ) -> Optional[SummaryResponse]:
        """Persist a generated summary; None (logged) if the store refuses it."""
        try:
            return await self.create_summary(db, summary_date=date, content=content)
        except DatabaseError as e:
            logger.error(
                "Error saving generated summary for %s: %s | Context: %s",
                date,
                e.message,
                e.context,
            )
            return None


summary_service = SummaryService()
