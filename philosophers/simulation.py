"""The dining philosophers simulation: one thread per philosopher plus a monitor."""

from __future__ import annotations

import enum
import sys
import threading
import time
from typing import TextIO

from philosophers.args import Settings

_NAP_STEP = 0.0005
_MONITOR_STEP = 0.0001


class State(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


def elapsed_ms(since: int) -> int:
    """Whole milliseconds elapsed since a time.monotonic_ns() reading."""
    return (time.monotonic_ns() - since) // 1_000_000


class Philosopher:
    """A philosopher who eats with two forks, sleeps and thinks in turn."""

    def __init__(self, sim: Simulation, id: int) -> None:
        self.sim = sim
        self.id = id
        n = sim.settings.n_philos
        # Forks are numbered from 1; the lower-numbered fork is always taken first.
        self.forks = (1, n) if id == 1 else (id - 1, id)
        self.meals = 0
        self.last_meal = sim.start
        self._meal_lock = threading.Lock()

    def meal_status(self) -> tuple[int, int]:
        """Return (meals eaten, time of the last meal) consistently."""
        with self._meal_lock:
            return self.meals, self.last_meal

    def eat(self) -> None:
        """Take both forks, eat for t_eat milliseconds, then put them back."""
        first, second = (self.sim.forks[number - 1] for number in self.forks)
        with first:
            self.sim.log(self, "has taken a fork")
            with second:
                self.sim.log(self, "has taken a fork")
                self.sim.log(self, "is eating")
                with self._meal_lock:
                    self.meals += 1
                    self.last_meal = time.monotonic_ns()
                self.sim.nap(self.sim.settings.t_eat)

    def sleep(self) -> None:
        self.sim.log(self, "is sleeping")
        self.sim.nap(self.sim.settings.t_sleep)

    def think(self) -> None:
        self.sim.log(self, "is thinking")

    def run(self) -> None:
        """Loop through eating, sleeping and thinking until the simulation stops."""
        sim = self.sim
        while sim.is_running():
            if sim.settings.n_philos == 1:
                with sim.forks[0]:
                    sim.log(self, "has taken a fork")
                    sim.nap(sim.settings.t_die)
                return
            self.eat()
            self.sleep()
            self.think()


class Simulation:
    """Shared state of one run: forks, philosophers, state and output."""

    def __init__(self, settings: Settings, output: TextIO | None = None) -> None:
        self.settings = settings
        self.output = output
        self.start = time.monotonic_ns()
        self.state = State.RUNNING
        self._state_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(settings.n_philos)]
        self.philosophers = [
            Philosopher(self, id) for id in range(1, settings.n_philos + 1)
        ]

    def is_running(self) -> bool:
        with self._state_lock:
            return self.state is State.RUNNING

    def stop(self) -> None:
        with self._state_lock:
            self.state = State.STOPPED

    def log(self, philosopher: Philosopher, activity: str) -> None:
        """Print a timestamped activity line, but only while running."""
        timestamp = elapsed_ms(self.start)
        with self._state_lock:
            if self.state is not State.RUNNING:
                return
            with self._print_lock:
                out = self.output if self.output is not None else sys.stdout
                print(f"{timestamp}ms {philosopher.id} {activity}", file=out, flush=True)

    def nap(self, ms: int) -> None:
        """Sleep for ms milliseconds in short steps, waking early if stopped."""
        started = time.monotonic_ns()
        while elapsed_ms(started) < ms:
            time.sleep(_NAP_STEP)
            if not self.is_running():
                break

    def any_dead(self) -> bool:
        """Report the first philosopher who has starved, if any."""
        for philosopher in self.philosophers:
            _, last_meal = philosopher.meal_status()
            if elapsed_ms(last_meal) >= self.settings.t_die:
                self.log(philosopher, "died")
                return True
        return False

    def enough_eating(self) -> bool:
        """True once every philosopher has eaten the required number of meals."""
        required = self.settings.n_must_eat
        if required is None:
            return False
        return all(p.meal_status()[0] >= required for p in self.philosophers)

    def monitor(self) -> None:
        """Watch for death or satiety; the only place the simulation is stopped."""
        while not (self.any_dead() or self.enough_eating()):
            time.sleep(_MONITOR_STEP)
        self.stop()

    def run(self) -> None:
        """Start every philosopher, monitor them, and wait for them to finish."""
        threads = [
            threading.Thread(target=p.run, name=f"philosopher-{p.id}")
            for p in self.philosophers
        ]
        started = []
        try:
            for thread in threads:
                thread.start()
                started.append(thread)
            self.monitor()
        finally:
            self.stop()
            for thread in started:
                thread.join()