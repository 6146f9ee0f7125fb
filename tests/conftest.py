import sqlite3

import pytest


def _build_collection(path, notes, cards):
    """
    Create a minimal Anki-shaped collection.

    notes: list of (note_id, flds)
    cards: list of (card_id, note_id, deck_id, queue, reps, lapses)
    """
    conn = sqlite3.connect(path)
    conn.executescript(
        """
        CREATE TABLE notes (id INTEGER PRIMARY KEY, flds TEXT NOT NULL);
        CREATE TABLE cards (
            id INTEGER PRIMARY KEY,
            nid INTEGER NOT NULL,
            did INTEGER NOT NULL,
            queue INTEGER,
            reps INTEGER,
            lapses INTEGER
        );
        """
    )
    conn.executemany("INSERT INTO notes (id, flds) VALUES (?, ?)", notes)
    conn.executemany(
        "INSERT INTO cards (id, nid, did, queue, reps, lapses) VALUES (?, ?, ?, ?, ?, ?)",
        cards,
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def make_collection(tmp_path):
    """Factory for ad-hoc collections: make_collection(notes, cards)."""

    def factory(notes, cards, name="collection.anki2"):
        return _build_collection(tmp_path / name, notes, cards)

    return factory


@pytest.fixture
def collection(tmp_path):
    """A collection with two cards in deck 1 and one card in deck 2."""
    return _build_collection(
        tmp_path / "collection.anki2",
        notes=[
            (20, "猫\x1fねこ\x1fcat"),
            (10, "日本\x1fにほん\x1fJapan"),
            (30, "犬\x1fいぬ\x1fdog"),
        ],
        cards=[
            (1, 20, 1, 0, 0, 0),
            (2, 10, 1, 2, 5, 0),
            (3, 30, 2, 1, 3, 1),
        ],
    )


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "template.html"
    path.write_text(
        "<p>{n_learned}/{n_cards} ({learned_percentage_pretty})</p>\n{cards}<i>{now}</i>",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Mocks Path.home() to point to a temp dir."""
    home = tmp_path / "home"
    home.mkdir()

    # Isolate config from the developer's real ~/.config and environment
    monkeypatch.setenv("HOME", str(home))
    for var in ("COLLECTION_PATH", "DECK_ID", "TEMPLATE_PATH", "OUTPUT_PATH", "VERBOSE"):
        monkeypatch.delenv(f"DECKSTATS_{var}", raising=False)
    return home
