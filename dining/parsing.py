"""Command-line argument validation for the dining simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

INT_MAX = 2147483647
THREADS_LIMIT = 62250
_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable."""


class NoMealsRequired(Exception):
    """Raised when the meal limit is zero, so there is nothing to simulate."""


@dataclass(frozen=True)
class Config:
    """Settings of one simulation run; times are in milliseconds."""

    count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    max_meals: Optional[int] = None


def parse_int(text: str) -> int:
    """Read a non-negative integer prefix, skipping leading whitespace and one '+'."""
    rest = text.lstrip(_WHITESPACE)
    if rest.startswith("+"):
        rest = rest[1:]
    result = 0
    position = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = result * 10 + int(char)
        if result > INT_MAX:
            raise ArgumentError("you passed int_max limit")
        position += 1
    if rest[position:position + 1] == "+":
        raise ArgumentError("error in atoi")
    return result


def check_characters(args: Sequence[str]) -> None:
    """Reject any argument holding something other than digits, spaces and '+'."""
    for arg in args:
        if any(char not in " +" and not "0" <= char <= "9" for char in arg):
            raise ArgumentError("invalid input")


def parse_args(args: Sequence[str]) -> Config:
    """Build a Config from the arguments that follow the program name."""
    if len(args) not in (4, 5):
        raise ArgumentError("args are more or less than required")
    check_characters(args)
    count, time_to_die, time_to_eat, time_to_sleep = (parse_int(a) for a in args[:4])
    max_meals: Optional[int] = None
    if len(args) == 5:
        max_meals = parse_int(args[4])
        if max_meals == 0:
            raise NoMealsRequired()
    if count <= 0 or time_to_die <= 0 or time_to_eat <= 0 or time_to_sleep <= 0:
        raise ArgumentError("Please enter positive numbers")
    if count > THREADS_LIMIT:
        raise ArgumentError("your device cannot handle such a number of threads")
    return Config(count, time_to_die, time_to_eat, time_to_sleep, max_meals)