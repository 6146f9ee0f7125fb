"""
Record extraction: raw collection rows to normalized Cards.

This is a pure transformation module with no I/O.
"""

from collections.abc import Iterable, Iterator

from deckstats.domain.constants import FIELD_SEPARATOR
from deckstats.domain.models import Card, LearningState, RawRecord


def split_fields(blob: str) -> tuple[str, ...]:
    """Split a note's field blob on the unit separator. Fields are kept verbatim."""
    return tuple(blob.split(FIELD_SEPARATOR))


def classify_state(code: int) -> LearningState:
    return LearningState.from_code(code)


def extract_card(raw: RawRecord) -> Card:
    """
    Build a Card from one raw row.

    Raises:
        InvalidStateCode: If the queue code is not one of 0, 1, 2, 3.
        MalformedRecord: If the note has fewer than three fields.
    """
    return Card(
        fields=split_fields(raw.fields),
        state=classify_state(raw.state_code),
        reps=raw.reps,
        lapses=raw.lapses,
    )


def extract_cards(records: Iterable[RawRecord]) -> Iterator[Card]:
    """Lazily extract cards in input order. The first bad record aborts iteration."""
    for raw in records:
        yield extract_card(raw)
