# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and shares a fork with each of its two neighbours. A
philosopher has to hold both forks to eat. After eating it sleeps, then
thinks, and then tries to eat again. A monitor watches all of them. It stops
the simulation when a philosopher has gone too long without a meal, or when
every philosopher has eaten enough times.

## Installation

```
pip install .
```

## Usage

```
philosophers <number_of_philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [number_of_times_each_philosopher_must_eat]
```

The same command can be started as `python -m philosophers.cli`.

All times are in milliseconds. Every argument must be a positive integer.
Arguments are read like C's `atoi`: leading whitespace and one sign are
accepted, and reading stops at the first non-digit, so `"12abc"` counts as
12 and `"abc"` counts as 0 (and is rejected).

Example:

```
philosophers 5 800 200 200 7
```

Each event is printed on its own line. The line gives the milliseconds since
the start, the philosopher's number and what happened:

```
0ms 1 has taken a fork
0ms 1 has taken a fork
0ms 1 is eating
200ms 1 is sleeping
400ms 1 is thinking
...
```

The events are:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

After the simulation stops, nothing more is printed.

With a single philosopher there is only one fork. The philosopher takes it,
waits until the time to die has passed, and the monitor reports the death.

If you give the wrong number of arguments, the program prints a usage line.
If an argument is not a positive integer, it prints
`Please provide a positive integer.` In both cases the exit status is
non-zero.

## Library use

The same pieces can be used from Python:

```python
import io

from philosophers.args import Settings, parse_args
from philosophers.simulation import Simulation

settings = parse_args(["4", "410", "200", "200", "3"])
Simulation(settings).run()

# Or build the settings directly and capture the output.
buffer = io.StringIO()
Simulation(Settings(n_philos=2, t_die=400, t_eat=100, t_sleep=100, n_must_eat=2), output=buffer).run()
print(buffer.getvalue())
```

- `philosophers.args.parse_args(argv)` takes the arguments that follow the
  program name and returns a `Settings` with `n_philos`, `t_die`, `t_eat`,
  `t_sleep` and `n_must_eat` (`None` when not given).
- `philosophers.args.atoi(text)` reads a leading integer as described above.
- `philosophers.args.UsageError` (a `ValueError`) is raised when the
  arguments are invalid.
- `philosophers.simulation.Simulation(settings, output=None)` holds the
  forks, the philosophers and the running state; events go to `output`, or
  to standard output when it is `None`.
- `Simulation.run()` starts one thread per philosopher, runs the monitor,
  and waits for every thread to finish.
- `philosophers.cli.main(argv=None)` runs the command and returns its exit
  status.

## Running the tests

```
pip install .[test]
pytest
```