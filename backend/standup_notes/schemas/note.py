"""
Standup Notes Backend - Note Schemas
====================================

What:  Pydantic models for the /notes endpoints.

Request bodies carry optional fields only, and numbers are taken as text the
way the store would convert them. A body without `content` still reaches the
store, which is the one that refuses it; the API adds no checks of its own on
top of the table's constraints.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    """Body of POST /notes."""
    content: Optional[str] = Field(default=None, description="Note text")

    model_config = {"coerce_numbers_to_str": True}


class NoteUpdate(BaseModel):
    """Body of PUT /notes/{id}. `content` overwrites the stored value, even when null."""
    content: Optional[str] = Field(default=None, description="Replacement note text")

    model_config = {"coerce_numbers_to_str": True}


class NoteResponse(BaseModel):
    """A note row as stored."""
    id: int = Field(description="Store-assigned identifier")
    content: str = Field(description="Note text")
    created_at: datetime = Field(description="Store-assigned creation time")

    model_config = {"from_attributes": True}


class DayNotesResponse(BaseModel):
    """
    Notes created on one UTC calendar day.

    Returned by GET /notes/today and GET /notes/yesterday, newest first.
    """
    date: str = Field(description="The day, YYYY-MM-DD")
    notes: List[NoteResponse] = Field(description="Notes in the day window, newest first")
    count: int = Field(description="len(notes)")
