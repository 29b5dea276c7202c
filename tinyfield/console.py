"""In-game command console: comma-separated commands."""

from __future__ import annotations

from dataclasses import dataclass

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
MAX_WORDS = 10
MAX_WORD_LENGTH = 9
MAX_COMMAND_LENGTH = 800


@dataclass(frozen=True)
class Command:
    id: int
    bitmask: int


def parse_int(text: str, base: int = 10) -> int:
    """Parse a whole string as a 32-bit signed integer.

    Empty strings, leading whitespace and trailing garbage are rejected
    with ValueError; out-of-range values raise OverflowError.
    """
    if not text or text[0].isspace() or text != text.rstrip() or "_" in text:
        raise ValueError(f"inconvertible integer: {text!r}")
    try:
        value = int(text, base)
    except ValueError:
        raise ValueError(f"inconvertible integer: {text!r}") from None
    if value > INT_MAX:
        raise OverflowError(f"integer overflow: {text!r}")
    if value < INT_MIN:
        raise OverflowError(f"integer underflow: {text!r}")
    return value


def split_command(text: str) -> list[str]:
    """Split a command on commas; its final character always ends the last word."""
    if len(text) >= MAX_COMMAND_LENGTH:
        raise ValueError("command is too long")
    words: list[str] = []
    start = 0
    last = len(text) - 1
    for position, char in enumerate(text):
        if char == "," or position == last:
            word = text[start:position]
            if len(word) > MAX_WORD_LENGTH:
                raise ValueError(f"word too long: {word!r}")
            words.append(word)
            start = position + 1
    if len(words) > MAX_WORDS:
        raise ValueError("too many words in command")
    return words


class Console:
    """Turns command lines into numbered commands."""

    def __init__(self) -> None:
        self.last_id = 0

    def interpret(self, text: str) -> Command:
        """Parse a command whose first word is a component bitmask."""
        words = split_command(text)
        if not words:
            raise ValueError("empty command")
        bitmask = parse_int(words[0], 10)
        self.last_id += 1
        return Command(self.last_id, bitmask)