"""
Standup Notes Backend - Summary SQLAlchemy Model
================================================

What:  ORM mapping of the `summaries` table.

summary_date is whatever string the caller supplied (the standup flow stores
its `date` query parameter verbatim). No foreign key links a summary to the
notes it was generated from.
"""

from typing import Optional

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from standup_notes.database import Base


class Summary(Base):
    """A standup summary for one day, manual or generated."""

    __tablename__ = "summaries"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    summary_date: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Summary(id={self.id}, summary_date='{self.summary_date}')>"
