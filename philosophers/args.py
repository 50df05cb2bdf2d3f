"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INT_MAX = 2**31 - 1
INVALID_ARGUMENTS = "Error: Invalid arguments passed."

_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset("\t\n\v\f\r ")


class ArgumentError(ValueError):
    """Raised when the simulation is given invalid arguments."""

    def __init__(self, message: str = INVALID_ARGUMENTS) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int | None = None


def is_numeric(text: str) -> bool:
    """Return True if every character of ``text`` is an ASCII digit."""
    return all(char in _DIGITS for char in text)


def parse_long(text: str) -> int:
    """Read a leading signed integer, ignoring leading whitespace and trailing junk."""
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return sign * value


def parse_positive(text: str | None) -> int:
    """Parse a strictly positive integer that fits a signed 32-bit int.

    An optional leading '+' is allowed; anything else but digits is rejected.
    """
    if not text:
        raise ArgumentError()
    body = text[1:] if text.startswith("+") else text
    if not body or not is_numeric(body):
        raise ArgumentError()
    value = parse_long(text)
    if value <= 0 or value > INT_MAX:
        raise ArgumentError()
    return value


def parse_args(args: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name.

    Expects: number_of_philosophers time_to_die time_to_eat time_to_sleep
    [number_of_times_each_philosopher_must_eat].
    """
    if len(args) not in (4, 5):
        raise ArgumentError()
    philosophers, time_to_die, time_to_eat, time_to_sleep = (
        parse_positive(arg) for arg in args[:4]
    )
    meals = parse_positive(args[4]) if len(args) == 5 else None
    return Settings(
        philosophers=philosophers,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meals=meals,
    )