"""
Standup Notes Backend - Note SQLAlchemy Model
=============================================

What:  ORM mapping of the `notes` table.
Who:   Used by NoteService for CRUD and day-window queries, and by the
       standup flow in SummaryService.

Table shape (owned by the hosted database):
    - id: identity column assigned by the store
    - content: free text, NOT NULL
    - created_at: TIMESTAMPTZ defaulting to now(); the only ordering and
      filtering key

Index on created_at DESC:
    Serves both "today"/"yesterday" listings (range + ORDER BY DESC) and the
    standup window scan.
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from standup_notes.database import Base


class Note(Base):
    """A free-text work note, timestamped by the store on insert."""

    __tablename__ = "notes"

    # BIGINT identity on Postgres; SQLite only autoincrements INTEGER keys
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_notes_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, created_at='{self.created_at}')>"
