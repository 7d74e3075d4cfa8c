"""
Deciservice — SQL Notes Resource
==================================

What:  NotesResource backed by the `notes` table through async SQLAlchemy.
How:   Wraps one AsyncSession. Writes are flushed, not committed; the
       get_db_session dependency commits when the request succeeds.
Who:   Built per request by deciservice.dependencies.get_notes_resource.

Error Handling Strategy:
    SQLAlchemy errors are logged and wrapped in DatabaseError (hides internal
    details). NotFoundError from update_all propagates as-is.
"""

import logging
from typing import List, Optional, Sequence

from sqlalchemy import delete, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from deciservice.exceptions import DatabaseError, NotFoundError
from deciservice.models.note import NoteRecord
from deciservice.schemas.note import Note, note_uri
from deciservice.services.notes_resource import NotesResource

logger = logging.getLogger(__name__)


def to_note(record: NoteRecord) -> Note:
    """Converts a stored row into the immutable Note value object."""
    return Note(
        id=record.id,
        uri=note_uri(record.id),
        title=record.title,
        body=record.body,
    )


class SqlNotesResource(NotesResource):
    """
    Notes persisted in a relational database.

    Query patterns:
        - List:   SELECT ... FROM notes ORDER BY id
        - Get:    SELECT ... WHERE id = :id (primary key lookup)
        - Update: one SELECT ... WHERE id IN (...) to check every target first
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_notes(self) -> List[Note]:
        try:
            result = await self.db.execute(select(NoteRecord).order_by(NoteRecord.id))
            return [to_note(record) for record in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_note(self, note_id: int) -> Optional[Note]:
        try:
            result = await self.db.execute(
                select(NoteRecord).where(NoteRecord.id == note_id)
            )
            record = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": note_id},
            )
        return to_note(record) if record is not None else None

    async def create_all(self, notes: Sequence[Note]) -> List[Note]:
        records = [NoteRecord(title=note.title, body=note.body) for note in notes]
        try:
            self.db.add_all(records)
            # Flush assigns ids without committing the transaction
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the notes. Please try again.",
                context={"count": len(records), "error_type": type(e).__name__},
            )
        logger.info("Created %d note(s): %s", len(records), [r.id for r in records])
        return [to_note(record) for record in records]

    async def update_all(self, notes: Sequence[Note]) -> List[Note]:
        ids = [note.id for note in notes]
        try:
            result = await self.db.execute(
                select(NoteRecord).where(NoteRecord.id.in_(ids))
            )
            found = {record.id: record for record in result.scalars().all()}
        except SQLAlchemyError as e:
            logger.error("Database error loading notes %s: %s", ids, str(e))
            raise DatabaseError(
                message="Could not update the notes. Please try again.",
                context={"note_ids": ids},
            )

        missing = [note_id for note_id in ids if note_id not in found]
        if missing:
            # Checked before any write so a partial update never happens
            raise NotFoundError(resource="note", resource_id=str(missing[0]),
                                context={"missing_ids": missing})

        for note in notes:
            record = found[note.id]
            record.title = note.title
            record.body = note.body

        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating notes %s: %s", ids, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the notes. Please try again.",
                context={"note_ids": ids},
            )
        logger.info("Updated %d note(s): %s", len(ids), ids)
        return [to_note(found[note.id]) for note in notes]

    async def delete_note(self, note_id: int) -> None:
        try:
            result = await self.db.execute(
                delete(NoteRecord).where(NoteRecord.id == note_id)
            )
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": note_id},
            )
        if result.rowcount:
            logger.info("Deleted note %s", note_id)
        else:
            logger.debug("Delete of unknown note %s ignored", note_id)

    async def health_check(self) -> bool:
        try:
            await self.db.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning("Health check: database unreachable: %s", str(e))
            return False
        return True
