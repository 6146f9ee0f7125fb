"""
SQLite Record Source: infrastructure adapter for Anki's collection database.

Implements RecordSource by querying the collection file directly, read-only.
"""

import logging
import sqlite3
from collections.abc import Iterator
from pathlib import Path

from deckstats.domain.exceptions import DataAccessError
from deckstats.domain.models import RawRecord
from deckstats.domain.ports import RecordSource

logger = logging.getLogger(__name__)

# notes.flds holds all note fields joined with 0x1f; cards.queue is the scheduling queue
CARDS_QUERY = (
    "SELECT notes.flds, cards.queue, cards.reps, cards.lapses "
    "FROM cards "
    "INNER JOIN notes ON notes.id = cards.nid "
    "WHERE cards.did = ? "
    "ORDER BY notes.id"
)


class SqliteRecordSource(RecordSource):
    """
    Reads card rows from an Anki collection (collection.anki2).

    Use as a context manager; the connection is opened read-only on enter and
    closed on exit, including when an error propagates.
    """

    def __init__(self, collection_path: Path):
        self.collection_path = collection_path
        self.conn: sqlite3.Connection | None = None

    def __enter__(self) -> "SqliteRecordSource":
        self.conn = self._connect()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def _connect(self) -> sqlite3.Connection:
        path = Path(self.collection_path).expanduser().resolve()
        uri = f"{path.as_uri()}?mode=ro"
        logger.debug(f"Opening collection {uri}")
        try:
            return sqlite3.connect(uri, uri=True)
        except sqlite3.Error as e:
            raise DataAccessError(f"Cannot open Anki collection {path}: {e}") from e

    def iter_records(self, group_id: str) -> Iterator[RawRecord]:
        if self.conn is None:
            raise DataAccessError("Collection is not open; use SqliteRecordSource in a with block")

        try:
            cursor = self.conn.execute(CARDS_QUERY, (group_id,))
        except sqlite3.Error as e:
            raise DataAccessError(f"Failed to query cards for deck {group_id}: {e}") from e

        count = 0
        while True:
            try:
                row = cursor.fetchone()
            except sqlite3.Error as e:
                raise DataAccessError(f"Failed to read cards for deck {group_id}: {e}") from e
            if row is None:
                break
            count += 1
            yield self._decode_row(row)

        logger.debug(f"Read {count} card rows for deck {group_id}")

    def _decode_row(self, row: tuple) -> RawRecord:
        flds, queue, reps, lapses = row
        if not isinstance(flds, str):
            raise DataAccessError(f"Invalid note fields value: {flds!r}")
        for name, value in (("queue", queue), ("reps", reps), ("lapses", lapses)):
            if not isinstance(value, int):
                raise DataAccessError(f"Invalid card {name} value: {value!r}")
        for name, value in (("reps", reps), ("lapses", lapses)):
            if value < 0:
                raise DataAccessError(f"Invalid card {name} value: {value!r}")
        return RawRecord(fields=flds, state_code=queue, reps=reps, lapses=lapses)
