"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

from typing import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\r\f\v"
_DIGITS = "0123456789"


class InputError(ValueError):
    """The input holds a malformed, out-of-range or duplicate number."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


class EmptyInput(ValueError):
    """There are no numbers to sort."""


def is_valid_number(text: str) -> bool:
    """True for an optional sign followed by one or more decimal digits."""
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    return bool(body) and all(char in _DIGITS for char in body)


def parse_long(text: str) -> int:
    """Read leading whitespace, an optional sign and the digits that follow."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-") and stripped:
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        result = result * 10 + int(char)
    return sign * result


def split_words(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on runs of ``delimiter``; raise EmptyInput when no word remains."""
    words = [word for word in text.split(delimiter) if word]
    if not words:
        raise EmptyInput("no numbers given")
    return words


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the numbers of stack ``a``, top first."""
    if not args or (len(args) == 1 and not args[0]):
        raise EmptyInput("no numbers given")
    words = split_words(args[0], " ") if len(args) == 1 else list(args)
    numbers: list[int] = []
    seen: set[int] = set()
    for word in words:
        if not is_valid_number(word):
            raise InputError()
        number = parse_long(word)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError()
        if number in seen:
            raise InputError()
        seen.add(number)
        numbers.append(number)
    return numbers