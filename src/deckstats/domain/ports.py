"""
Ports (interfaces) for record retrieval.

These define the contract that infrastructure adapters must implement.
Application services depend on these abstractions, not concrete implementations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from .models import RawRecord


class RecordSource(ABC):
    """
    Port for reading raw card rows for a deck.

    Implementations:
        - SqliteRecordSource: Queries Anki's SQLite collection read-only.
    """

    @abstractmethod
    def iter_records(self, group_id: str) -> Iterator[RawRecord]:
        """
        Yield the raw rows of every card in the given deck.

        Args:
            group_id: Anki deck ID. Opaque; not validated.

        Returns:
            A lazy, non-restartable iterator ordered by note ID.

        Raises:
            DataAccessError: If the collection cannot be queried or a row
                cannot be decoded.
        """
        pass
