"""
Per-card HTML fragments for the report listing.

Field contents are inserted verbatim: no HTML escaping and no URL encoding
of the lookup term. Note fields in Anki are already HTML, so markup such as
<b> or <ruby> in a field is rendered as markup.
"""

from collections.abc import Iterable

from deckstats.domain.constants import LOOKUP_URL
from deckstats.domain.models import Card

_FRAGMENT = (
    "<a href='{url}{term}' class='card-link'>"
    "<div class='card card-{state_class}'>{term}"
    "<div class='card-hover'>"
    "<div class='card-meaning'>{annotation}; {translation}</div>\n"
    "reviews: {reps}<br/>\n"
    "lapses: {lapses}<br/>\n"
    "</div>"
    "</div>"
    "</a>\n"
)


def render_fragment(card: Card) -> str:
    return _FRAGMENT.format(
        url=LOOKUP_URL,
        term=card.term,
        state_class=card.state.css_class,
        annotation=card.annotation,
        translation=card.translation,
        reps=card.reps,
        lapses=card.lapses,
    )


def render_fragments(cards: Iterable[Card]) -> str:
    """Concatenate one fragment per card, preserving input order."""
    return "".join(render_fragment(card) for card in cards)
