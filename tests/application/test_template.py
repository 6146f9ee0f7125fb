from datetime import datetime, timedelta, timezone

import pytest

from deckstats.application.template import (
    build_token_map,
    format_count,
    format_percentage,
    render_template,
)
from deckstats.domain.models import AggregateStats


def test_unknown_tokens_are_left_literal():
    assert render_template("{n_cards} and {unknown_token}", {"n_cards": "2"}) == (
        "2 and {unknown_token}"
    )


@pytest.mark.parametrize(
    "template",
    ["", "plain text", "<style>.a { color: red; }</style>", "{ spaced }", "{{double}}"],
)
def test_template_without_known_placeholders_is_unchanged(template):
    assert render_template(template, {"n_cards": "2", "cards": "x"}) == template


def test_every_occurrence_is_replaced():
    assert render_template("{a}-{a}-{b}", {"a": "1", "b": "2"}) == "1-1-2"


def test_empty_token_map():
    assert render_template("{a}", {}) == "{a}"


def test_values_are_not_rescanned():
    tokens = {"cards": "<div>{n_cards}</div>", "n_cards": "2"}
    assert render_template("{cards} {n_cards}", tokens) == "<div>{n_cards}</div> 2"


def test_result_does_not_depend_on_token_order():
    forward = {"a": "{b}", "b": "{a}"}
    backward = {"b": "{a}", "a": "{b}"}
    assert render_template("{a}{b}", forward) == render_template("{a}{b}", backward) == "{b}{a}"


def test_names_sharing_a_prefix():
    tokens = {"n": "short", "n_cards": "long"}
    assert render_template("{n} {n_cards}", tokens) == "short long"


def test_names_with_regex_characters():
    assert render_template("{a.b} {a+b}", {"a.b": "1", "a+b": "2"}) == "1 2"


def test_format_count():
    assert format_count(0) == "0"
    assert format_count(999) == "999"
    assert format_count(2300) == "2,300"
    assert format_count(1234567) == "1,234,567"


def test_format_percentage():
    assert format_percentage(50.0) == "50.00%"
    assert format_percentage(100 / 3) == "33.33%"
    assert format_percentage(None) == "n/a"


def test_build_token_map():
    now = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone(timedelta(hours=9)))
    tokens = build_token_map(
        AggregateStats(total=2300, learned=1150, learned_percentage=50.0), "<a/>", now
    )
    assert tokens == {
        "n_learned": "1,150",
        "n_cards": "2,300",
        "learned_percentage_pretty": "50.00%",
        "cards": "<a/>",
        "now": "2024-05-01T12:30:00+09:00",
    }


def test_build_token_map_for_empty_deck():
    tokens = build_token_map(
        AggregateStats(total=0, learned=0, learned_percentage=None),
        "",
        datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    assert tokens["n_cards"] == "0"
    assert tokens["learned_percentage_pretty"] == "n/a"
    assert tokens["cards"] == ""
