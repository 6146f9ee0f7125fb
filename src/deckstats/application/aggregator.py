"""
Aggregate statistics over a deck's cards.

This is a pure computation module with no I/O.
"""

from collections.abc import Iterable

from deckstats.domain.models import AggregateStats, Card, LearningState


class StatsAggregator:
    """
    Computes AggregateStats from a sequence of Cards.

    Only cards in the review queue count as learned; learning and new cards
    do not, even though they represent partial progress.

    Stateless and side-effect free.
    """

    def aggregate(self, cards: Iterable[Card]) -> AggregateStats:
        total = 0
        learned = 0
        for card in cards:
            total += 1
            if card.state is LearningState.REVIEW:
                learned += 1

        return AggregateStats(
            total=total,
            learned=learned,
            learned_percentage=self._compute_percentage(learned, total),
        )

    def _compute_percentage(self, learned: int, total: int) -> float | None:
        """
        Compute learned / total as a percentage.

        An empty deck has no meaningful ratio, so None is returned instead of
        dividing by zero.
        """
        if total == 0:
            return None
        return learned / total * 100.0
