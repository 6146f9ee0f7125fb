# Domain Package
from .exceptions import (
    ConfigurationError,
    DataAccessError,
    DeckStatsError,
    InvalidStateCode,
    MalformedRecord,
    OutputIOError,
    TemplateIOError,
)
from .models import AggregateStats, Card, LearningState, RawRecord, TokenMap
from .ports import RecordSource

__all__ = [
    "AggregateStats",
    "Card",
    "ConfigurationError",
    "DataAccessError",
    "DeckStatsError",
    "InvalidStateCode",
    "LearningState",
    "MalformedRecord",
    "OutputIOError",
    "RawRecord",
    "RecordSource",
    "TemplateIOError",
    "TokenMap",
]
