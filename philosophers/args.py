"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass

_WHITESPACE = " \n\t\v\f\r"

USAGE = (
    "Usage: <number_of_philosophers> "
    "<time_to_die> <time_to_eat> <time_to_sleep> "
    "[number_of_times_each_philosopher_must_eat]"
)
POSITIVE_REQUIRED = "Please provide a positive integer."


class UsageError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    n_philos: int
    t_die: int
    t_eat: int
    t_sleep: int
    n_must_eat: int | None = None


def atoi(text: str) -> int:
    """Read a leading integer the way C's atoi does, yielding 0 if there is none.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit character.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def parse_args(argv: list[str]) -> Settings:
    """Build Settings from the arguments that follow the program name.

    Four or five arguments are required, and every one must read as a
    positive integer.
    """
    if len(argv) not in (4, 5):
        raise UsageError(USAGE)
    values = [atoi(arg) for arg in argv]
    if any(value <= 0 for value in values):
        raise UsageError(POSITIVE_REQUIRED)
    n_philos, t_die, t_eat, t_sleep, *must_eat = values
    return Settings(
        n_philos=n_philos,
        t_die=t_die,
        t_eat=t_eat,
        t_sleep=t_sleep,
        n_must_eat=must_eat[0] if must_eat else None,
    )