"""Validation and conversion of command-line number arguments."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence


class InputError(ValueError):
    """Raised when the arguments cannot form a stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def is_valid_token(token: str) -> bool:
    """True for an optional single '-' followed by digits, or an empty token."""
    body = token
    if body.startswith("-") and body[1:2].isdigit():
        body = body[1:]
    return all(ch in "0123456789" for ch in body) and not body.startswith("-")


def parse_number(token: str) -> int:
    """Convert a valid token to an integer reduced to 32-bit signed range.

    An empty token reads as zero.
    """
    if not is_valid_token(token):
        raise InputError()
    sign = -1 if token.startswith("-") else 1
    digits = token.lstrip("-")
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def check_input(args: Sequence[str]) -> bool:
    """True when every argument is a well-formed number."""
    return all(is_valid_token(arg) for arg in args)


def check_duplicate(args: Sequence[str]) -> bool:
    """True when no two arguments convert to the same number."""
    values = [parse_number(arg) for arg in args]
    return all(a != b for a, b in combinations(values, 2))


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the arguments and return their numbers in order."""
    if not check_input(args) or not check_duplicate(args):
        raise InputError()
    return [parse_number(arg) for arg in args]