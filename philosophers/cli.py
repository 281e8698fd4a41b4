"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys

from philosophers.args import UsageError, parse_args
from philosophers.simulation import Simulation

EXIT_FAILURE = -1


def main(argv: list[str] | None = None) -> int:
    """Parse the arguments, run one simulation and return the exit status.

    The arguments are number_of_philosophers, time_to_die, time_to_eat,
    time_to_sleep and optionally number_of_times_each_philosopher_must_eat,
    all positive integers with times in milliseconds.
    """
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_args(list(argv))
    except UsageError as error:
        print(error, flush=True)
        return EXIT_FAILURE
    Simulation(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())