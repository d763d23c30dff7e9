"""Card record shared by the store, the quiz and snapshots."""

from dataclasses import dataclass


@dataclass
class Card:
    term: str
    definition: str
    mistakes: int = 0
