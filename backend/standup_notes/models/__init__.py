"""ORM models for the store's tables."""

from standup_notes.models.note import Note
from standup_notes.models.summary import Summary

__all__ = ["Note", "Summary"]
