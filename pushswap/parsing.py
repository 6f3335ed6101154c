"""Reading the numbers given on the command line."""

from __future__ import annotations

from typing import Iterable, List, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised when the input is not a list of distinct 32-bit integers."""


def split_words(text: str) -> List[str]:
    """Split ``text`` on spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def is_valid_token(token: str) -> bool:
    """Return whether ``token`` is an optional sign followed by digits."""
    body = token[1:] if token[:1] in ("-", "+") and len(token) > 1 else token
    return all(ch in _DIGITS for ch in body)


def parse_int(token: str) -> int:
    """Read an optional sign and the leading decimal digits of ``token``."""
    sign = 1
    rest = token
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        number = number * 10 + _DIGITS.index(ch)
    return sign * number


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Turn command-line arguments into integers, in order.

    Each argument may hold several space-separated numbers. Raises
    :class:`InputError` for a malformed token or one outside the 32-bit range.
    """
    values: List[int] = []
    for arg in args:
        for token in split_words(arg):
            if not is_valid_token(token):
                raise InputError(f"not an integer: {token!r}")
            number = parse_int(token)
            if not INT_MIN <= number <= INT_MAX:
                raise InputError(f"out of range: {token!r}")
            values.append(number)
    return values


def has_duplicates(values: Sequence[int]) -> bool:
    """Return whether any value occurs more than once."""
    return len(set(values)) != len(values)


def assign_indices(values: Sequence[int]) -> List[int]:
    """Replace each value by its rank, 1 for the smallest.

    Among equal values the earlier one gets the higher rank.
    """
    order = sorted(range(len(values)), key=lambda pos: (values[pos], -pos))
    ranks = [0] * len(values)
    for rank, pos in enumerate(order, start=1):
        ranks[pos] = rank
    return ranks