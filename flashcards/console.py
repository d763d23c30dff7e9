"""Console: print/input pair that records both sides in the session log."""

from typing import Callable

from flashcards.session_log import SessionLog


class Console:
    def __init__(self, log: SessionLog, input_fn: Callable[[], str] | None = None, out=None):
        self.log = log
        self._input = input_fn or input
        self.out = out

    def say(self, line: str):
        print(line, file=self.out)
        self.log.append(line)

    def ask(self, prompt: str | None = None) -> str:
        """Optionally print a prompt, then read one line.

        The raw line goes to the log; the caller gets it stripped.
        EOFError from the input function is not caught here.
        """
        if prompt is not None:
            self.say(prompt)
        line = self._input()
        self.log.append(line)
        return line.strip()
