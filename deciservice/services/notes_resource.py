"""
Deciservice — Abstract Notes Resource Interface
=================================================

What:  Abstract base class defining the contract for note persistence.
How:   Concrete implementations inherit from NotesResource and implement the
       five CRUD operations. Controllers depend on this interface only.
Who:   Called by the browser and REST notes controllers.

Implementations:
    - SqlNotesResource: async SQLAlchemy, one session per request
    - Tests substitute an AsyncMock with this class as its spec
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from deciservice.schemas.note import Note


class NotesResource(ABC):
    """
    Abstract interface for reading and writing notes.

    Contract:
        - Every returned Note carries its stored id and uri
        - Ids passed to create_all() are ignored; the resource assigns new ones
        - Implementation-specific storage failures are wrapped in DatabaseError
    """

    @abstractmethod
    async def get_notes(self) -> List[Note]:
        """
        All stored notes, ordered by id ascending.

        Returns an empty list when nothing is stored.
        """
        ...

    @abstractmethod
    async def get_note(self, note_id: int) -> Optional[Note]:
        """
        One note by id.

        Returns:
            The note, or None when no note has that id.
        """
        ...

    @abstractmethod
    async def create_all(self, notes: Sequence[Note]) -> List[Note]:
        """
        Store each note under a freshly assigned id.

        Returns:
            The created notes, in input order, with id and uri filled in.
        """
        ...

    @abstractmethod
    async def update_all(self, notes: Sequence[Note]) -> List[Note]:
        """
        Overwrite title and body of each note, addressed by its id.

        Returns:
            The updated notes, in input order.

        Raises:
            NotFoundError: Some id is not stored. Nothing is written.
        """
        ...

    @abstractmethod
    async def delete_note(self, note_id: int) -> None:
        """Remove a note. Deleting an id that is not stored does nothing."""
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check that the backing store is reachable.

        Who:     Called by the health check endpoint.
        Returns: True if the store answered, False otherwise.
        """
        ...
