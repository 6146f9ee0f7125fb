"""
Literal {token} substitution into a template document.

Substitution policy: every known placeholder is matched by a single
simultaneous scan of the template and replaced exactly once. Replacement
values are never scanned again, so a value containing text such as
"{n_cards}" is emitted literally and the result does not depend on the
order of the token map. Placeholders with no entry in the map are left
untouched.
"""

import re
from datetime import datetime

from deckstats.domain.constants import UNDEFINED_PERCENTAGE
from deckstats.domain.models import AggregateStats, TokenMap


def _placeholder_pattern(names) -> re.Pattern:
    # Longest first; token names may themselves contain braces
    ordered = sorted(names, key=len, reverse=True)
    return re.compile("|".join(re.escape("{" + name + "}") for name in ordered))


def render_template(template: str, tokens: TokenMap) -> str:
    if not tokens:
        return template

    pattern = _placeholder_pattern(tokens)

    def substitute(match: re.Match) -> str:
        return tokens[match.group(0)[1:-1]]

    return pattern.sub(substitute, template)


def format_count(n: int) -> str:
    """Format an integer with comma thousands separators (1234 -> '1,234')."""
    return f"{n:,}"


def format_percentage(value: float | None) -> str:
    if value is None:
        return UNDEFINED_PERCENTAGE
    return f"{value:.2f}%"


def build_token_map(stats: AggregateStats, cards_html: str, now: datetime) -> TokenMap:
    """
    Build the tokens available to report templates.

    Tokens:
        n_learned: Learned card count, thousands-separated.
        n_cards: Total card count, thousands-separated.
        learned_percentage_pretty: Percentage to 2 decimals with a % sign, or 'n/a'.
        cards: Concatenated card fragments.
        now: Generation time as an RFC 3339 timestamp.
    """
    return {
        "n_learned": format_count(stats.learned),
        "n_cards": format_count(stats.total),
        "learned_percentage_pretty": format_percentage(stats.learned_percentage),
        "cards": cards_html,
        "now": now.isoformat(),
    }
