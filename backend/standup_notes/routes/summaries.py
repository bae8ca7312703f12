"""
Standup Notes Backend - Summaries Route Handlers
================================================

What:  /summaries CRUD and POST /summaries/standup-summary.
How:   Thin handlers over SummaryService, mirroring routes/notes.py.

Standup responses:
    200 {"summary": "No notes found for the specified date."}
    200 {"summary": "<generated>", "savedSummary": {...} | null}
    400 {"error": "Date is required", ...}
    500 {"error": "<upstream message>", "details": {"type": ...}, ...}
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from standup_notes.database import get_db_session
from standup_notes.exceptions import UpstreamError
from standup_notes.schemas.common import ErrorResponse
from standup_notes.schemas.summary import (
    StandupSummaryResponse,
    SummaryCreate,
    SummaryResponse,
    SummaryUpdate,
)
from standup_notes.services.summary_service import summary_service

router = APIRouter(prefix="/summaries", tags=["Summaries"])

_ERRORS = {500: {"description": "Store error", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[SummaryResponse],
    responses=_ERRORS,
    summary="List all summaries",
)
async def list_summaries(db: AsyncSession = Depends(get_db_session)) -> List[SummaryResponse]:
    return await summary_service.list_summaries(db)


@router.post(
    "",
    status_code=201,
    response_model=SummaryResponse,
    responses=_ERRORS,
    summary="Create a summary",
)
async def create_summary(
    payload: Optional[SummaryCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> SummaryResponse:
    payload = payload or SummaryCreate()
    return await summary_service.create_summary(
        db,
        summary_date=payload.summary_date,
        content=payload.content,
    )


@router.post(
    "/standup-summary",
    response_model=StandupSummaryResponse,
    response_model_exclude_unset=True,
    responses={
        400: {"description": "Missing or malformed date", "model": ErrorResponse},
        500: {"description": "Store or completion provider error", "model": ErrorResponse},
    },
    summary="Generate a standup summary from notes",
    description=(
        "Collects the notes of the two UTC days following `date`, asks the "
        "completion provider for a three-section standup summary and saves it. "
        "Saving is best effort: on failure `savedSummary` is null."
    ),
)
async def generate_standup_summary(
    date: Optional[str] = Query(default=None, description="Day to summarize, YYYY-MM-DD"),
    db: AsyncSession = Depends(get_db_session),
) -> StandupSummaryResponse:
    try:
        return await summary_service.generate_standup_summary(db, date)
    except UpstreamError as e:
        # this endpoint reports what failed, not just the message
        if e.details is None:
            e.details = {"type": type(e).__name__, **e.context}
        raise


@router.put(
    "/{summary_id}",
    status_code=204,
    response_class=Response,
    responses=_ERRORS,
    summary="Replace a summary",
)
async def update_summary(
    summary_id: int,
    payload: Optional[SummaryUpdate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    payload = payload or SummaryUpdate()
    await summary_service.update_summary(
        db,
        summary_id,
        summary_date=payload.summary_date,
        content=payload.content,
    )
    return Response(status_code=204)


@router.delete(
    "/{summary_id}",
    status_code=204,
    response_class=Response,
    responses=_ERRORS,
    summary="Delete a summary",
)
async def delete_summary(
    summary_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await summary_service.delete_summary(db, summary_id)
    return Response(status_code=204)
