"""CardStore: ordered in-memory collection of cards."""

import dataclasses

from flashcards.models import Card


class CardStore:
    """Ordered cards, looked up by value.

    Terms and definitions are kept unique by the add flow, which checks
    find_by_term / find_by_definition before calling add(). Positions are
    only used internally (remove, mistake updates).
    """

    def __init__(self, cards: list[Card] | None = None):
        self._cards: list[Card] = []
        if cards:
            self.replace_all(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def find_by_term(self, term: str) -> int | None:
        for i, card in enumerate(self._cards):
            if card.term == term:
                return i
        return None

    def find_by_definition(self, definition: str) -> int | None:
        for i, card in enumerate(self._cards):
            if card.definition == definition:
                return i
        return None

    def add(self, term: str, definition: str) -> Card:
        card = Card(term=term, definition=definition)
        self._cards.append(card)
        return card

    def remove(self, index: int) -> Card:
        return self._cards.pop(index)

    def increment_mistakes(self, index: int):
        self._cards[index].mistakes += 1

    def reset_stats(self):
        for card in self._cards:
            card.mistakes = 0

    def replace_all(self, cards: list[Card]):
        # copy each card so callers can't mutate the store through their list
        self._cards = [dataclasses.replace(c) for c in cards]

    def snapshot(self) -> list[Card]:
        return [dataclasses.replace(c) for c in self._cards]

    def hardest(self) -> tuple[int, list[str]]:
        """Return the highest mistake count and every term that reaches it.

        Returns (0, []) when no card has any mistakes.
        """
        top = max((c.mistakes for c in self._cards), default=0)
        if top == 0:
            return 0, []
        return top, [c.term for c in self._cards if c.mistakes == top]
