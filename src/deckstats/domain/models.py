"""
Domain models for deck statistics.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import MIN_CARD_FIELDS
from .exceptions import InvalidStateCode, MalformedRecord

TokenMap = dict[str, str]


@dataclass(frozen=True)
class RawRecord:
    """
    One row as stored in the Anki collection.

    Attributes:
        fields: The note's fields joined with the 0x1f unit separator.
        state_code: The card's queue code (0=new, 1/3=learning, 2=review).
        reps: Total review count.
        lapses: Number of times the card was forgotten.
    """

    fields: str
    state_code: int
    reps: int
    lapses: int


class LearningState(Enum):
    NEW = "new"
    LEARNING = "learning"
    REVIEW = "review"

    @property
    def css_class(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: int) -> "LearningState":
        """
        Map an Anki queue code to a LearningState.

        Raises:
            InvalidStateCode: For any code other than 0, 1, 2 or 3. Suspended
                and buried cards (negative queues) fall in this category too.
        """
        # bool is an int subclass but never a valid queue value
        if isinstance(code, bool) or not isinstance(code, int):
            raise InvalidStateCode(code)
        if code == 0:
            return cls.NEW
        if code in (1, 3):
            return cls.LEARNING
        if code == 2:
            return cls.REVIEW
        raise InvalidStateCode(code)


@dataclass(frozen=True)
class Card:
    """
    A normalized card.

    The first three fields carry fixed roles: term, annotation (e.g. the
    reading) and translation. Any further fields are kept but unused.
    """

    fields: tuple[str, ...]
    state: LearningState
    reps: int
    lapses: int

    def __post_init__(self):
        if len(self.fields) < MIN_CARD_FIELDS:
            raise MalformedRecord(tuple(self.fields), MIN_CARD_FIELDS)

    @property
    def term(self) -> str:
        return self.fields[0]

    @property
    def annotation(self) -> str:
        return self.fields[1]

    @property
    def translation(self) -> str:
        return self.fields[2]


@dataclass(frozen=True)
class AggregateStats:
    """
    Summary counts for a deck.

    Attributes:
        total: Number of cards.
        learned: Number of cards in the review queue.
        learned_percentage: learned / total * 100, or None for an empty deck.
    """

    total: int
    learned: int
    learned_percentage: float | None
