"""
Deciservice — Note SQLAlchemy Model
=====================================

What:  ORM model representing the `notes` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads it for migrations.
Who:   Used by SqlNotesResource for CRUD operations.

Table Design:
    - BIGINT autoincrement primary key: ids are positive, so 0 is free to mean
      "not yet created" in the browser form
    - title: short single-line text, defaults to ''
    - body: free text of any length, defaults to ''
"""

from sqlalchemy import BigInteger, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from deciservice.database import Base
from deciservice.schemas.note import TITLE_MAX_LENGTH


class NoteRecord(Base):
    """
    A stored note.

    Lifecycle:
        1. Inserted by create_all(); the database assigns the id
        2. Title and body overwritten by update_all()
        3. Removed by delete_note()
    """

    __tablename__ = "notes"

    # SQLite only autoincrements INTEGER PRIMARY KEY, so BIGINT maps to it there
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer(), "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier assigned on insert",
    )

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
        default="",
        server_default=text("''"),
        comment="Single-line note title",
    )

    body: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default=text("''"),
        comment="Note body",
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<NoteRecord(id={self.id}, title='{self.title}')>"
