"""flashcards — interactive flashcard manager."""

__version__ = "0.1.0"

from flashcards.models import Card
from flashcards.store import CardStore
from flashcards.app import App

__all__ = ["App", "Card", "CardStore"]
