"""App: the interactive session, its command handlers and the REPL loop."""

import sys
from typing import Callable

from flashcards.console import Console
from flashcards.persistence import load_snapshot, save_snapshot
from flashcards.quiz import QuizEngine, format_verdict
from flashcards.session_log import SessionLog
from flashcards.store import CardStore


class App:
    """Holds all state for one flashcard session.

    Usage:
        app = App(import_from="cards.json", export_to="cards.json")
        app.run()                        # returns only through SystemExit

    For testing:
        answers = iter(["add", "cat", "meow", "exit"])
        app = App(rng=random.Random(0), input_fn=lambda: next(answers))
    """

    def __init__(self, import_from: str | None = None, export_to: str | None = None,
                 rng=None, input_fn: Callable[[], str] | None = None, out=None):
        self.store = CardStore()
        self.log = SessionLog()
        self.console = Console(self.log, input_fn, out)
        self.quiz = QuizEngine(self.store, rng)
        self.import_from = import_from
        self.export_to = export_to
        self.menu: dict[str, Callable[[], None]] = {
            "add": self.add,
            "remove": self.remove,
            "import": self.import_cards,
            "export": self.export_cards,
            "ask": self.ask,
            "exit": self.exit,
            "log": self.save_log,
            "hardest card": self.hardest_card,
            "reset stats": self.reset_stats,
        }

    @property
    def menu_prompt(self) -> str:
        return f"Input the action ({', '.join(self.menu)}):"

    def run(self):
        if self.import_from:
            self.do_import(self.import_from)

        while True:
            try:
                action = self.console.ask(self.menu_prompt)
                handler = self.menu.get(action)
                if handler:
                    handler()
            except EOFError:
                # stdin closed: leave the same way the exit command does
                self.exit()

    # ─── Card editing ───────────────────────────────────────────────────

    def add(self):
        term = self.console.ask("The card:")
        while self.store.find_by_term(term) is not None:
            term = self.console.ask(f'The term "{term}" already exists. Try again:')

        definition = self.console.ask("The definition of the card:")
        while self.store.find_by_definition(definition) is not None:
            definition = self.console.ask(
                f'The definition "{definition}" already exists. Try again:')

        self.store.add(term, definition)
        self.console.say(f'The pair ("{term}":"{definition}") has been added.')

    def remove(self):
        # the whole line is the term, so multi-word terms can be removed
        term = self.console.ask("Which card?")
        index = self.store.find_by_term(term)
        if index is None:
            self.console.say(f'Can\'t remove "{term}": there is no such card.')
            return
        self.store.remove(index)
        self.console.say("The card has been removed.")

    # ─── Snapshots ──────────────────────────────────────────────────────

    def import_cards(self):
        self.do_import(self.console.ask("File name:"))

    def do_import(self, path: str):
        try:
            cards = load_snapshot(path)
        except OSError:
            self.console.say("File not found.")
            return
        except ValueError as e:
            self.console.say(str(e))
            return
        self.store.replace_all(cards)
        self.console.say(f"{len(cards)} cards have been loaded.")

    def export_cards(self):
        self.do_export(self.console.ask("File name:"))

    def do_export(self, path: str):
        try:
            count = save_snapshot(self.store.snapshot(), path)
        except OSError as e:
            self.console.say(str(e))
            return
        self.console.say(f"{count} cards have been saved.")

    # ─── Quiz and stats ─────────────────────────────────────────────────

    def ask(self):
        if not len(self.store):
            self.console.say("There are no cards to ask about.")
            return

        raw = self.console.ask("How many times to ask?")
        try:
            rounds = int(raw)
        except ValueError:
            self.console.say(f'"{raw}" is not a number.')
            return

        for _ in range(rounds):
            index = self.quiz.pick()
            answer = self.console.ask(f'Print the definition of "{self.store[index].term}"')
            self.console.say(format_verdict(self.quiz.check(index, answer)))

    def hardest_card(self):
        top, terms = self.store.hardest()
        if top == 0:
            self.console.say("There are no cards with errors.")
        elif len(terms) == 1:
            noun = "error" if top == 1 else "errors"
            self.console.say(f'The hardest card is "{terms[0]}". You have {top} {noun} answering it.')
        else:
            quoted = ", ".join(f'"{t}"' for t in terms)
            self.console.say(f"The hardest cards are {quoted}.")

    def reset_stats(self):
        self.store.reset_stats()
        self.console.say("Card statistics have been reset.")

    # ─── Session ────────────────────────────────────────────────────────

    def save_log(self):
        path = self.console.ask("File name:")
        try:
            self.log.dump(path)
        except OSError as e:
            self.console.say(str(e))
            return
        self.console.say("The log has been saved.")

    def exit(self):
        if self.export_to:
            self.do_export(self.export_to)
        self.console.say("Bye bye!")
        sys.exit(0)
