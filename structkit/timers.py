"""A hashed timing wheel and a sorted timer list driven by explicit ticks."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

WHEEL_BIN_NUMBER = 10
GRANULARITY = 1_000_000
NUM_TIMERS = 10


class DeadlineTooFarError(Exception):
    """Raised when a deadline does not fit within one turn of the wheel."""


class TimingWheel:
    """Wheel of ``bins`` slots, each ``granularity`` time units wide."""

    def __init__(self, granularity: int = GRANULARITY, bins: int = WHEEL_BIN_NUMBER) -> None:
        if granularity < 1 or bins < 1:
            raise ValueError("granularity and bins must be positive")
        self.granularity = granularity
        self.bins = bins
        self.cur_slot = 0
        self._slots: list[list[tuple[int, Callable[[], Any]]]] = [[] for _ in range(bins)]

    def install(self, deadline: int, callback: Callable[[], Any]) -> None:
        """Schedule ``callback`` ``deadline`` time units from the current slot."""
        deadline = int(deadline)
        if deadline < 0:
            raise ValueError("deadline must not be negative")
        offset = deadline // self.granularity
        if offset >= self.bins:
            raise DeadlineTooFarError("deadline exceeds timing wheel size")
        index = (self.cur_slot + offset) % self.bins
        self._slots[index].append((deadline, callback))

    def tick(self) -> list[int]:
        """Run the callbacks of the current slot, advance, return their deadlines."""
        slot = self._slots[self.cur_slot]
        fired: list[int] = []
        while slot:
            deadline, callback = slot.pop(0)
            callback()
            fired.append(deadline)
        self.cur_slot = (self.cur_slot + 1) % self.bins
        return fired


class TimerType(IntEnum):
    RELATIVE = 0
    ABSOLUTE = 1
    INVALID = 2


class CallbackResult(IntEnum):
    NORMAL = 0
    FREE_TIMER = 1
    INVALID = 2


@dataclass(eq=False)
class Timer:
    """A timer: absolute fire tick, callback and the data passed to it."""

    fire: int = 0
    callback: Optional[Callable[[Any], Any]] = None
    user_data: Any = None


class TimerPoolExhaustedError(Exception):
    """Raised when no free timer is left in the pool."""


class TimerList:
    """Fixed pool of timers; armed timers are kept sorted by fire tick."""

    def __init__(self, num_timers: int = NUM_TIMERS) -> None:
        if num_timers < 0:
            raise ValueError("num_timers must not be negative")
        self.tick_count = 0
        self._free: deque[Timer] = deque()
        self._active: list[Timer] = []
        for _ in range(num_timers):
            self._free.appendleft(Timer())

    def allocate(self) -> Timer:
        """Take a timer from the free pool."""
        if not self._free:
            raise TimerPoolExhaustedError("no free timers left")
        return self._free.popleft()

    def set_timer(
        self,
        timer: Timer,
        timer_type: TimerType,
        fire: int,
        callback: Callable[[Any], Any],
        user_data: Any = None,
    ) -> None:
        """Configure ``timer``; a relative fire time is counted from the current tick."""
        try:
            kind = TimerType(timer_type)
        except ValueError:
            raise ValueError(f"invalid timer type {timer_type!r}") from None
        if kind is TimerType.RELATIVE:
            fire += self.tick_count
        elif kind is not TimerType.ABSOLUTE:
            raise ValueError(f"invalid timer type {timer_type!r}")
        timer.fire = fire
        timer.callback = callback
        timer.user_data = user_data

    def arm(self, timer: Timer) -> None:
        """Insert ``timer`` into the active list after timers firing no later."""
        for position, other in enumerate(self._active):
            if timer.fire < other.fire:
                self._active.insert(position, timer)
                return
        self._active.append(timer)

    def disarm(self, timer: Timer) -> None:
        """Remove ``timer`` from the active list; ValueError if it is not armed."""
        self._active.remove(timer)

    def tick(self) -> list[Timer]:
        """Advance one tick and fire every due timer; return the fired timers.

        A timer whose callback returns CallbackResult.FREE_TIMER goes back
        to the free pool.
        """
        self.tick_count += 1
        fired: list[Timer] = []
        while self._active and self._active[0].fire <= self.tick_count:
            timer = self._active.pop(0)
            fired.append(timer)
            result = timer.callback(timer.user_data) if timer.callback else None
            if result == CallbackResult.FREE_TIMER:
                self._free.appendleft(timer)
        return fired

    def active(self) -> list[Timer]:
        """Return the armed timers in firing order."""
        return list(self._active)