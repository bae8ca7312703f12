"""
Standup Notes Backend - Summary Schemas
=======================================

What:  Pydantic models for the /summaries endpoints, including the
       standup generation response.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SummaryCreate(BaseModel):
    """Body of POST /summaries."""
    summary_date: Optional[str] = Field(default=None, description="Day the summary covers")
    content: Optional[str] = Field(default=None, description="Summary text")

    model_config = {"coerce_numbers_to_str": True}


class SummaryUpdate(BaseModel):
    """Body of PUT /summaries/{id}. Both fields overwrite the stored values."""
    summary_date: Optional[str] = Field(default=None, description="Day the summary covers")
    content: Optional[str] = Field(default=None, description="Summary text")

    model_config = {"coerce_numbers_to_str": True}


class SummaryResponse(BaseModel):
    """A summary row as stored."""
    id: int = Field(description="Store-assigned identifier")
    summary_date: Optional[str] = Field(default=None, description="Day the summary covers")
    content: str = Field(description="Summary text")

    model_config = {"from_attributes": True}


class StandupSummaryResponse(BaseModel):
    """
    Result of POST /summaries/standup-summary.

    When no notes fall in the window only `summary` is set and the route
    leaves `savedSummary` out of the body. After a generation it is always
    present: the persisted row, or null when saving failed.
    """
    summary: str = Field(description="Generated standup text, or the no-notes message")
    saved_summary: Optional[SummaryResponse] = Field(
        default=None,
        alias="savedSummary",
        description="Row written for this summary; null if it could not be saved",
    )

    model_config = {"populate_by_name": True}
