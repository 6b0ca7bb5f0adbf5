"""A sorted queue of one-shot and periodic timers driven by the caller's loop."""

from __future__ import annotations

import bisect
import time
from dataclasses import dataclass, field
from typing import Any, Callable

TimerProc = Callable[[Any, float], None]


def _time_key(timer: "Timer") -> float:
    return timer.time


@dataclass(eq=False)
class Timer:
    """A scheduled callback; ``time`` is its expiry, in clock seconds."""

    proc: TimerProc
    client_data: Any
    usecs: int
    periodic: bool
    time: float
    active: bool = field(default=True)


class TimerQueue:
    """Timers kept in expiry order; equal expiries run in creation order."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._timers: list[Timer] = []

    def _now(self, now: float | None) -> float:
        return self._clock() if now is None else now

    def _insert(self, timer: Timer) -> None:
        bisect.insort_right(self._timers, timer, key=_time_key)

    def create(
        self,
        proc: TimerProc,
        client_data: Any = None,
        usecs: int = 0,
        periodic: bool = False,
        now: float | None = None,
    ) -> Timer:
        """Schedule ``proc`` to run ``usecs`` microseconds from now."""
        timer = Timer(
            proc=proc,
            client_data=client_data,
            usecs=usecs,
            periodic=bool(periodic),
            time=self._now(now) + usecs / 1_000_000,
        )
        self._insert(timer)
        return timer

    def timeout(self, now: float | None = None) -> float | None:
        """Seconds until the next timer fires, 0 if overdue, None if none pending."""
        if not self._timers:
            return None
        diff = self._timers[0].time - self._now(now)
        if diff <= 0:
            return 0.0
        usecs = int(diff * 1_000_000)
        return usecs / 1_000_000

    def run(self, now: float | None = None) -> None:
        """Fire every timer whose expiry has been reached."""
        now = self._now(now)
        current = self._timers[0] if self._timers else None
        while current is not None:
            position = self._timers.index(current)
            following = self._timers[position + 1] if position + 1 < len(self._timers) else None
            if current.time > now:
                break
            current.proc(current.client_data, now)
            if current.active:
                if current.periodic:
                    self._timers.remove(current)
                    current.time += current.usecs / 1_000_000
                    self._insert(current)
                else:
                    self.cancel(current)
            if following is not None and not following.active:
                break
            current = following

    def reset(self, timer: Timer, now: float | None = None) -> None:
        """Restart ``timer`` so it expires its full interval after now."""
        if not timer.active:
            raise ValueError("timer is not scheduled")
        self._timers.remove(timer)
        timer.time = self._now(now) + timer.usecs / 1_000_000
        self._insert(timer)

    def cancel(self, timer: Timer) -> None:
        """Remove ``timer`` from the queue."""
        if not timer.active:
            raise ValueError("timer is not scheduled")
        self._timers.remove(timer)
        timer.active = False

    def destroy(self) -> None:
        """Cancel every pending timer."""
        for timer in self._timers:
            timer.active = False
        self._timers.clear()

    def __len__(self) -> int:
        return len(self._timers)