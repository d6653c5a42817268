"""Reading the list of integers given on the command line."""

from __future__ import annotations

from collections.abc import Sequence

INT_MAX = 2147483647
INT_MIN = -2147483648
_MAX_TOKEN_LENGTH = 12
_WHITESPACE = " \n\t\v\f\r"


class InputError(ValueError):
    """The arguments do not describe a list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def check_argument(text: str) -> bool:
    """Accept only digits, spaces and signs that start a number.

    A sign must be followed by a digit and preceded by a space or the
    start of the argument. Raises InputError otherwise.
    """
    for i, ch in enumerate(text):
        if ch in "+-":
            following = text[i + 1] if i + 1 < len(text) else ""
            if not following.isascii() or not following.isdigit():
                raise InputError()
            if i > 0 and text[i - 1] != " ":
                raise InputError()
        elif ch != " " and not ("0" <= ch <= "9"):
            raise InputError()
    return True


def parse_int(token: str) -> int:
    """Convert a token to an integer that fits in 32 bits.

    Leading whitespace and one sign are accepted; conversion stops at the
    first non-digit. Tokens longer than 12 characters and values outside
    the 32-bit range raise InputError.
    """
    if len(token) > _MAX_TOKEN_LENGTH:
        raise InputError()
    rest = token.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits += ch
    value = int(digits) if digits else 0
    if negative:
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def count_total_args(args: Sequence[str]) -> int:
    """Count the space-separated words across all arguments."""
    return sum(len(split_words(arg, " ")) for arg in args)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the arguments (without the program name) into distinct integers.

    Each argument may hold several space-separated numbers. Raises
    InputError for an empty argument, a malformed number, a value out of
    range or a repeated value.
    """
    if any(arg == "" for arg in args):
        raise InputError()
    values: list[int] = []
    for arg in args:
        check_argument(arg)
        values.extend(parse_int(word) for word in split_words(arg, " "))
    if len(set(values)) != len(values):
        raise InputError()
    return values