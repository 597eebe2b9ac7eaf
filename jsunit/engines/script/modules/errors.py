"""
Errors module for the script engine: the harness's diagnostic log.

Scripts see it as ``errors`` with log, clear and toString. The same ErrorLog
instance backs every scope of a harness, so lines accumulate across evaluations
until clear() is called.
"""

from typing import Any


class ErrorLog:
    """Append-only text buffer; each append adds exactly one newline-terminated line."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def append(self, message: Any) -> None:
        self._lines.append(f"{message}\n")

    def clear(self) -> None:
        self._lines = []

    def render(self) -> str:
        return "".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __str__(self) -> str:
        return self.render()
