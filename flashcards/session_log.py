"""SessionLog: everything printed or read during a session."""

import pathlib


class SessionLog:
    def __init__(self):
        self.entries: list[str] = []

    def __len__(self) -> int:
        return len(self.entries)

    def append(self, line: str):
        if not line.endswith("\n"):
            line += "\n"
        self.entries.append(line)

    def text(self) -> str:
        return "".join(self.entries)

    def dump(self, path: pathlib.Path | str):
        """Write the whole log to path. Raises OSError if it can't be written."""
        pathlib.Path(path).write_text(self.text(), encoding="utf-8")
