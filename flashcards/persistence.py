"""Snapshots: the card store as a JSON list of {term, definition, mistakes}."""

import dataclasses
import json
import pathlib

from flashcards.models import Card


def dump_cards(cards: list[Card]) -> str:
    return json.dumps([dataclasses.asdict(c) for c in cards], indent=2, ensure_ascii=False)


def _field(item: dict, name: str, default=None):
    """Look up a snapshot field, ignoring key case ("Term" reads as "term")."""
    if name in item:
        return item[name]
    for key, value in item.items():
        if key.lower() == name:
            return value
    return default


def parse_cards(text: str) -> list[Card]:
    """Parse snapshot text into cards.

    Raises ValueError (json.JSONDecodeError included) if the text is not a
    list of card objects. Only the shape is checked; duplicate terms are
    accepted as-is. Field names match regardless of case and a missing
    "mistakes" field counts as 0.
    """
    try:
        data = json.loads(text)
    except RecursionError:
        raise ValueError("snapshot is nested too deeply") from None
    if not isinstance(data, list):
        raise ValueError(f"snapshot must be a list of cards, got {type(data).__name__}")

    cards = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"card {i}: expected an object, got {type(item).__name__}")
        term = _field(item, "term")
        definition = _field(item, "definition")
        for key, value in (("term", term), ("definition", definition)):
            if not isinstance(value, str):
                raise ValueError(f"card {i}: '{key}' must be a string")
        mistakes = _field(item, "mistakes", 0)
        if isinstance(mistakes, bool) or not isinstance(mistakes, int) or mistakes < 0:
            raise ValueError(f"card {i}: 'mistakes' must be a non-negative integer")
        cards.append(Card(term=term, definition=definition, mistakes=mistakes))
    return cards


def save_snapshot(cards: list[Card], path: pathlib.Path | str) -> int:
    """Write cards to path and return how many were written. Raises OSError."""
    pathlib.Path(path).write_text(dump_cards(cards), encoding="utf-8")
    return len(cards)


def load_snapshot(path: pathlib.Path | str) -> list[Card]:
    """Read cards from path. Raises OSError if unreadable, ValueError if malformed."""
    return parse_cards(pathlib.Path(path).read_text(encoding="utf-8"))
