"""Quiz rounds: random card selection, answer checking, mistake tracking."""

import random
from dataclasses import dataclass

from flashcards.store import CardStore


@dataclass
class Verdict:
    term: str
    definition: str
    answer: str
    correct: bool
    match_term: str | None = None


class QuizEngine:
    """Asks about cards of a store, sampled uniformly with replacement.

    rng only needs a randrange(n) method; pass a seeded random.Random or a
    stub to get a fixed question order.
    """

    def __init__(self, store: CardStore, rng=None):
        self.store = store
        self.rng = rng or random.Random()

    def pick(self) -> int:
        if not len(self.store):
            raise ValueError("No cards to ask about")
        return self.rng.randrange(len(self.store))

    def check(self, index: int, answer: str) -> Verdict:
        card = self.store[index]
        if answer == card.definition:
            return Verdict(card.term, card.definition, answer, True)

        self.store.increment_mistakes(index)
        other = self.store.find_by_definition(answer)
        match_term = self.store[other].term if other is not None else None
        return Verdict(card.term, card.definition, answer, False, match_term)


def format_verdict(verdict: Verdict) -> str:
    if verdict.correct:
        return "Correct!"
    if verdict.match_term is not None:
        return (f'Wrong. The right answer is "{verdict.definition}", '
                f'but your definition is correct for "{verdict.match_term}".')
    return f'Wrong. The right answer is "{verdict.definition}".'
