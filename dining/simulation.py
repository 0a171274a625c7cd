"""The dining philosophers table: philosophers, forks and a death monitor."""

from __future__ import annotations

import enum
import itertools
import sys
import threading
import time
from dataclasses import dataclass, field
from typing import Optional, Sequence, TextIO

from .parsing import Config
from .sync import LockedValue
from .timing import now_ms, precise_sleep


class Status(enum.Enum):
    """What a philosopher reports doing."""

    FORK = "has taken a fork"
    EATING = "is eating"
    SLEEPING = "is sleeping"
    THINKING = "is thinking"
    DIED = "died"

    @property
    def message(self) -> str:
        return self.value


@dataclass
class Fork:
    """A fork lying between two philosophers."""

    id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


@dataclass
class Philosopher:
    """One philosopher and the forks it reaches for."""

    id: int
    left_fork: Optional[Fork] = None
    right_fork: Optional[Fork] = None
    last_meal_time: int = 0
    meals_count: int = 0


def assign_forks(philosopher: Philosopher, forks: Sequence[Fork], index: int) -> None:
    """Give the philosopher at a seat its two forks, odd and even ids in opposite order."""
    own, next_one = forks[index], forks[(index + 1) % len(forks)]
    if philosopher.id % 2:
        philosopher.right_fork, philosopher.left_fork = next_one, own
    else:
        philosopher.right_fork, philosopher.left_fork = own, next_one


class Table:
    """Runs the simulation for one Config, writing status lines to a stream."""

    def __init__(self, config: Config, output: Optional[TextIO] = None) -> None:
        self.config = config
        self._output = output
        self.forks = [Fork(i) for i in range(config.count)]
        self.philosophers = [Philosopher(i + 1) for i in range(config.count)]
        for index, philosopher in enumerate(self.philosophers):
            assign_forks(philosopher, self.forks, index)
        self.death_flag = LockedValue(False)
        self.full_count = LockedValue(0)
        self.threads_started = LockedValue(0)
        self.all_full = LockedValue(False)
        self._clock_lock = threading.Lock()
        self.start_time = now_ms()

    def write_message(self, philosopher: Philosopher, status: Status) -> None:
        """Print a status line unless someone has died; deaths are always printed."""
        with self._clock_lock:
            elapsed = now_ms() - self.start_time
            if status is not Status.DIED and self.death_flag.get():
                return
            print(f"{elapsed} {philosopher.id} {status.message}",
                  file=self._output or sys.stdout, flush=True)
            if status is Status.EATING:
                philosopher.last_meal_time = elapsed

    def eat(self, philosopher: Philosopher) -> None:
        """Take both forks, eat, and put them back."""
        if self.config.count == 3 and philosopher.id % 2:
            precise_sleep(50)
        with philosopher.right_fork.lock:
            self.write_message(philosopher, Status.FORK)
            with philosopher.left_fork.lock:
                self.write_message(philosopher, Status.FORK)
                self.write_message(philosopher, Status.EATING)
                precise_sleep(self.config.time_to_eat)

    def dine(self, philosopher: Philosopher) -> None:
        """The life of one philosopher: eat, sleep, think until the meal ends."""
        self.threads_started.increment()
        while not self.death_flag.get() and not self.all_full.get():
            if self.config.count == 1:
                with philosopher.right_fork.lock:
                    self.write_message(philosopher, Status.FORK)
                    precise_sleep(self.config.time_to_eat)
                break
            self.eat(philosopher)
            philosopher.meals_count += 1
            if philosopher.meals_count == self.config.max_meals:
                self.full_count.increment()
            self.write_message(philosopher, Status.SLEEPING)
            precise_sleep(self.config.time_to_sleep)
            self.write_message(philosopher, Status.THINKING)

    def elapsed_since_meal(self, philosopher: Philosopher) -> int:
        """Milliseconds since the philosopher last started eating."""
        with self._clock_lock:
            return now_ms() - self.start_time - philosopher.last_meal_time

    def check_death(self, philosopher: Philosopher, elapsed: int) -> bool:
        """Mark a death if the philosopher starved; report whether anyone is dead."""
        if elapsed > self.config.time_to_die:
            self.death_flag.set(True)
        if self.death_flag.get():
            self.write_message(philosopher, Status.DIED)
            return True
        return False

    def monitor(self) -> None:
        """Watch every philosopher in turn until one dies or all are full."""
        while self.threads_started.get() < self.config.count:
            time.sleep(0.0001)
        for philosopher in itertools.cycle(self.philosophers):
            if self.full_count.get() == self.config.count:
                self.all_full.set(True)
                break
            if self.check_death(philosopher, self.elapsed_since_meal(philosopher)):
                break
            time.sleep(0.0002)

    def run(self) -> None:
        """Start every philosopher and the monitor, and wait for them all."""
        self.start_time = now_ms()
        threads = [
            threading.Thread(target=self.dine, args=(philosopher,), daemon=True)
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        observer = threading.Thread(target=self.monitor, daemon=True)
        observer.start()
        for thread in threads:
            thread.join()
        observer.join()