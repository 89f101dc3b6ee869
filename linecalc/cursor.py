# cursor.py

"""Scan position over an immutable input string."""

from typing import Optional


class Cursor:
    """
    Owns the input text and the current scan position.

    Out-of-range requests are clamped; no method raises.
    """

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = max(0, min(position, len(text)))

    def __repr__(self):
        return f"Cursor({self.text!r}, position={self.position})"

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    @property
    def remaining(self) -> str:
        return self.text[self.position:]

    def peek(self) -> Optional[str]:
        """Returns the next character without consuming it, or None at the end."""
        if self.at_end:
            return None
        return self.text[self.position]

    def advance(self) -> None:
        if not self.at_end:
            self.position += 1

    def advance_by(self, n: int) -> None:
        n = max(0, min(n, len(self.text) - self.position))
        self.position += n

    def remaining_starts_with(self, literal: str) -> bool:
        return self.text.startswith(literal, self.position)

    def skip_whitespace(self) -> None:
        while not self.at_end and self.text[self.position].isspace():
            self.position += 1
