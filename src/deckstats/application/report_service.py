"""
Report Service: application layer orchestrator.

Coordinates reading records, aggregating, rendering and writing one report.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from deckstats.domain.exceptions import DeckStatsError
from deckstats.domain.models import AggregateStats
from deckstats.domain.ports import RecordSource
from deckstats.infrastructure.files import read_template, write_output

from .aggregator import StatsAggregator
from .extractor import extract_cards
from .fragments import render_fragments
from .template import build_token_map, format_percentage, render_template

logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class ReportResult:
    stats: AggregateStats
    output_path: Path
    rendered: str


def summary_line(stats: AggregateStats) -> str:
    """Human-readable one-line summary, e.g. 'learned 1/2 (50.00%)'."""
    pct = format_percentage(stats.learned_percentage)
    return f"learned {stats.learned}/{stats.total} ({pct})"


class ReportService:
    """
    Application service for generating a deck report.

    Follows Dependency Inversion: depends on the RecordSource abstraction,
    with file access and the clock injectable for tests.
    """

    def __init__(
        self,
        source: RecordSource,
        aggregator: StatsAggregator | None = None,
        template_reader: Callable[[Path], str] = read_template,
        output_writer: Callable[[Path, str], None] = write_output,
        clock: Callable[[], datetime] = _local_now,
    ):
        self._source = source
        self._aggregator = aggregator or StatsAggregator()
        self._read_template = template_reader
        self._write_output = output_writer
        self._clock = clock

    def render(self, deck_id: str, template_path: Path) -> tuple[AggregateStats, str]:
        """
        Render the report for a deck without writing it.

        Every record is extracted before the template is touched, so a bad
        record aborts the run before any file I/O.
        """
        cards = list(extract_cards(self._source.iter_records(deck_id)))
        stats = self._aggregator.aggregate(cards)
        logger.debug(f"Deck {deck_id}: {stats.learned}/{stats.total} learned")

        tokens = build_token_map(stats, render_fragments(cards), self._clock())
        template = self._read_template(template_path)
        return stats, render_template(template, tokens)

    def generate(self, deck_id: str, template_path: Path, output_path: Path) -> ReportResult:
        """
        Render the report and write it to output_path.

        Raises:
            DeckStatsError: On any failure; nothing is written in that case.
        """
        try:
            stats, rendered = self.render(deck_id, template_path)
            self._write_output(output_path, rendered)
        except DeckStatsError as e:
            logger.debug(f"Report for deck {deck_id} failed: {e}")
            raise

        logger.info(f"Wrote report for deck {deck_id} to {output_path}")
        return ReportResult(stats=stats, output_path=output_path, rendered=rendered)
