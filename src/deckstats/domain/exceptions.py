"""
Error taxonomy for a report run.

Every error is fatal: the run aborts and no output file is written.
"""

from pathlib import Path


class DeckStatsError(Exception):
    """Base class for all errors surfaced to the operator."""


class ConfigurationError(DeckStatsError):
    """A required setting (collection path, deck id) was not provided."""


class DataAccessError(DeckStatsError):
    """The Anki collection could not be opened, queried, or a row decoded."""


class InvalidStateCode(DeckStatsError):
    """A card's queue code is outside the known mapping."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Unexpected card queue value: {code!r}")


class MalformedRecord(DeckStatsError):
    """A note has fewer fields than the term/annotation/translation roles need."""

    def __init__(self, fields: tuple[str, ...], minimum: int = 3):
        self.fields = fields
        super().__init__(
            f"Note has {len(fields)} field(s), expected at least {minimum}: {fields!r}"
        )


class TemplateIOError(DeckStatsError):
    """The template file could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot read template {path}: {reason}")


class OutputIOError(DeckStatsError):
    """The rendered report could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot write output {path}: {reason}")
