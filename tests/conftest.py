"""Shared test fixtures."""

import pytest

from flashcards.app import App
from flashcards.models import Card


class FakeRng:
    """Stands in for random.Random: returns the given indexes in order."""

    def __init__(self, picks):
        self.picks = list(picks)
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return self.picks.pop(0)


def scripted(lines):
    """Input function that replays lines, then raises EOFError like input()."""
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None
    return read


@pytest.fixture
def make_app():
    """Build an App fed by scripted input, optionally preloaded with cards."""
    def _make(lines=(), cards=None, picks=(), **kwargs):
        app = App(rng=FakeRng(picks), input_fn=scripted(lines), **kwargs)
        if cards:
            app.store.replace_all(cards)
        return app
    return _make


@pytest.fixture
def sample_cards():
    return [
        Card("cat", "meow"),
        Card("dog", "bark"),
        Card("cow", "moo"),
    ]
