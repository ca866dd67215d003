"""Tick-based timer scheduler.

The simulation never reads a wall clock. A host advances the scheduler once
per frame (the pygame launcher) or as fast as it likes (the console runner and
tests), and due callbacks run serially in the caller's thread.
"""

import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Timer:
    """Handle returned by the scheduler for a started timer."""

    callback: Callable[[], None]
    due: int
    interval: Optional[int] = None          # None for one-shot timers
    seq: int = 0
    active: bool = field(default=True)

    @property
    def periodic(self) -> bool:
        return self.interval is not None


class TickScheduler:
    """Runs periodic and one-shot callbacks against a tick counter.

    Timers due on the same tick fire in the order they were started.
    """

    def __init__(self) -> None:
        self.now = 0
        self._timers: list[Timer] = []
        self._seq = itertools.count()

    def _start(self, delay: int, callback: Callable[[], None], interval: Optional[int]) -> Timer:
        if delay <= 0:
            raise ValueError(f"Timer delay must be positive, got {delay}")
        timer = Timer(callback=callback, due=self.now + delay, interval=interval, seq=next(self._seq))
        self._timers.append(timer)
        return timer

    def start_periodic(self, interval: int, callback: Callable[[], None]) -> Timer:
        """Call ``callback`` every ``interval`` ticks until cancelled."""
        timer = self._start(interval, callback, interval)
        logger.debug("Periodic timer every %d ticks started at tick %d", interval, self.now)
        return timer

    def start_one_shot(self, delay: int, callback: Callable[[], None]) -> Timer:
        """Call ``callback`` once, ``delay`` ticks from now."""
        timer = self._start(delay, callback, None)
        logger.debug("One-shot timer due at tick %d", timer.due)
        return timer

    def cancel(self, timer: Timer) -> None:
        """Stop a timer. Cancelling an inactive timer does nothing."""
        if not timer.active:
            return
        timer.active = False
        self._timers.remove(timer)

    def pending(self) -> int:
        return len(self._timers)

    def advance(self, ticks: int = 1) -> None:
        """Move time forward, firing every callback that comes due."""
        for _ in range(ticks):
            self.now += 1
            due = sorted(
                (t for t in self._timers if t.due <= self.now),
                key=lambda t: (t.due, t.seq),
            )
            for timer in due:
                # an earlier callback on this tick may have cancelled it
                if not timer.active:
                    continue
                if timer.periodic:
                    timer.due += timer.interval
                else:
                    timer.active = False
                    self._timers.remove(timer)
                timer.callback()
