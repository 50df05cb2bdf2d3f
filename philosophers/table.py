"""The dining table: forks, philosophers and the monitor that watches them."""

from __future__ import annotations

import enum
import sys
import threading
import time
from typing import TextIO

from .args import Settings
from .clock import bounded_wait, sleep_ms, time_since, timestamp

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
MAGENTA = "\033[35m"
RESET = "\033[0m"

LEFT = 0
RIGHT = 1

_PAUSE = 0.0001


class Action(enum.Enum):
    """Something a philosopher does, with the text and colour used to report it."""

    FORK = ("has taken a fork", GREEN)
    SLEEP = ("is sleeping", CYAN)
    THINK = ("is thinking", CYAN)
    EAT = ("is eating", MAGENTA)
    DIE = ("died", RED)

    def __init__(self, message: str, color: str) -> None:
        self.message = message
        self.color = color

    @property
    def colored(self) -> str:
        """The message wrapped in its ANSI colour."""
        return f"{self.color}{self.message}{RESET}"


def format_line(elapsed: int, ident: int, message: str) -> str:
    """Format one log line: elapsed ms, philosopher number and message."""
    return f"{elapsed:8d}\t{ident:4d} {message}"


class Philosopher:
    """One diner, sharing a fork with each neighbour."""

    def __init__(
        self,
        table: Table,
        ident: int,
        left: threading.Lock,
        right: threading.Lock,
    ) -> None:
        self.table = table
        self.ident = ident
        self.forks = (left, right)
        self.lock = threading.Lock()
        now = timestamp()
        self.start = now
        self.last_meal = now
        self.meals_left = table.settings.meals
        self.full = False
        self.thread: threading.Thread | None = None

    def pickup_fork(self, side: int) -> bool:
        """Take the fork on ``side``; return False if the simulation must end."""
        left, right = self.forks
        if left is right:
            self.table.report(self, Action.FORK)
            sleep_ms(self.table.settings.time_to_die)
            return False
        fork = self.forks[side]
        fork.acquire()
        if not self.table.report(self, Action.FORK):
            fork.release()
            return False
        return True

    def eat(self) -> bool:
        """Take both forks, eat, and put them back."""
        settings = self.table.settings
        first = self.ident % 2
        second = (self.ident + 1) % 2
        if not self.pickup_fork(first):
            return False
        if not self.pickup_fork(second):
            self.forks[first].release()
            return False
        try:
            if not self.table.report(self, Action.EAT):
                return False
            with self.lock:
                self.last_meal = timestamp()
            bounded_wait(settings.time_to_eat, settings.time_to_die)
        finally:
            self.forks[LEFT].release()
            self.forks[RIGHT].release()
        with self.lock:
            if self.meals_left is not None:
                self.meals_left -= 1
                if self.meals_left == 0:
                    self.full = True
        return True

    def sleep(self) -> bool:
        """Report sleeping and sleep; False if the simulation ended or sleep is fatal."""
        if not self.table.report(self, Action.SLEEP):
            return False
        settings = self.table.settings
        return bounded_wait(settings.time_to_sleep, settings.time_to_die)

    def think(self) -> bool:
        """Report thinking and pause briefly."""
        if not self.table.report(self, Action.THINK):
            return False
        time.sleep(_PAUSE)
        return True

    def live(self) -> None:
        """Thread body: wait for the start signal, then eat, sleep and think."""
        self.table._gate.wait()
        with self.lock:
            self.start = timestamp()
            self.last_meal = self.start
            if self.ident % 2:
                sleep_ms(1)
        while self.eat() and self.sleep() and self.think():
            pass


class Table:
    """Holds the forks and philosophers and runs the simulation."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        count = settings.philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(self, index + 1, self.forks[index], self.forks[(index + 1) % count])
            for index in range(count)
        ]
        self.casualty: int | None = None
        self._print_lock = threading.Lock()
        self._stop_lock = threading.Lock()
        self._stopped = False
        self._gate = threading.Event()

    def _stop(self) -> None:
        with self._stop_lock:
            self._stopped = True

    def _write(self, elapsed: int, ident: int, action: Action) -> None:
        self.out.write(format_line(elapsed, ident, action.colored) + "\n")
        self.out.flush()

    def still_running(self) -> bool:
        """True until a death or full bellies stop the simulation."""
        with self._stop_lock:
            return not self._stopped

    def report(self, philosopher: Philosopher, action: Action) -> bool:
        """Print an action unless the simulation has stopped; return whether printed."""
        elapsed = time_since(philosopher.start)
        with self._print_lock:
            if not self.still_running():
                return False
            self._write(elapsed, philosopher.ident, action)
        return True

    def check_death(self, philosopher: Philosopher) -> bool:
        """Stop and announce the death if ``philosopher`` has starved."""
        with philosopher.lock:
            starving = time_since(philosopher.last_meal) > self.settings.time_to_die
        if not starving:
            return False
        with self._print_lock, self._stop_lock:
            self._stopped = True
            self.casualty = philosopher.ident
            self._write(time_since(philosopher.start), philosopher.ident, Action.DIE)
        return True

    def _is_full(self, philosopher: Philosopher) -> bool:
        with philosopher.lock:
            return philosopher.full

    def check_meals(self, index: int) -> bool:
        """Stop the simulation if every philosopher has eaten enough."""
        if not self._is_full(self.philosophers[index]):
            return False
        if not all(self._is_full(philosopher) for philosopher in self.philosophers):
            return False
        self._stop()
        return True

    def monitor(self) -> None:
        """Thread body: watch for starvation or everyone being full."""
        self._gate.wait()
        sleep_ms(1)
        while True:
            for index, philosopher in enumerate(self.philosophers):
                if self.check_death(philosopher) or self.check_meals(index):
                    return
                time.sleep(_PAUSE)

    def run(self) -> None:
        """Start every thread, release them together and wait for them all."""
        threads: list[threading.Thread] = []
        try:
            for philosopher in self.philosophers:
                thread = threading.Thread(
                    target=philosopher.live, name=f"philosopher-{philosopher.ident}"
                )
                thread.start()
                philosopher.thread = thread
                threads.append(thread)
            watcher = threading.Thread(target=self.monitor, name="monitor")
            watcher.start()
            threads.append(watcher)
        except RuntimeError:
            self._stop()
            raise
        finally:
            self._gate.set()
            for thread in threads:
                thread.join()