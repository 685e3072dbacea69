"""
Virtual-clock scheduler for delayed bot effects.

Several turns answer immediately and then, after a pause, send a follow-up
message and move the conversation on. Those follow-ups are queued here
instead of on a real timer so the caller decides when time passes: the
console demo sleeps and then advances, tests jump straight ahead.

Usage:
    scheduler = EffectScheduler()
    scheduler.schedule(2.5, lambda: print("later"), description="menu")
    scheduler.advance(2.5)  # prints "later"
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledEffect:
    """A pending callback and the virtual time it fires at."""
    timer_id: int
    fire_at: float
    callback: Callable[[], None]
    description: str = ""


class EffectScheduler:
    """
    Single-threaded queue of delayed callbacks.

    Effects fire in (fire_at, timer_id) order, so two effects due at the
    same instant run in the order they were scheduled. New input never
    preempts a pending effect; only an explicit cancel removes one.
    """

    def __init__(self, start_time: float = 0.0) -> None:
        self._now = start_time
        self._next_id = 1
        self._effects: dict[int, ScheduledEffect] = {}

    @property
    def now(self) -> float:
        return self._now

    @property
    def has_pending(self) -> bool:
        return bool(self._effects)

    def schedule(
        self, delay: float, callback: Callable[[], None], description: str = ""
    ) -> int:
        """
        Queue a callback to run ``delay`` seconds from the current virtual time.

        Returns:
            The timer id, usable with ``cancel``.

        Raises:
            ValueError: If the delay is negative.
        """
        if delay < 0:
            raise ValueError(f"Delay must be >= 0, got {delay}")
        timer_id = self._next_id
        self._next_id += 1
        self._effects[timer_id] = ScheduledEffect(
            timer_id=timer_id,
            fire_at=self._now + delay,
            callback=callback,
            description=description,
        )
        logger.debug("Scheduled effect %d (%s) at t=%.2f", timer_id, description, self._now + delay)
        return timer_id

    def cancel(self, timer_id: int) -> bool:
        """Remove a pending effect. Returns False if it already fired or never existed."""
        return self._effects.pop(timer_id, None) is not None

    def pending(self) -> list[ScheduledEffect]:
        """Return pending effects in firing order."""
        return sorted(self._effects.values(), key=lambda e: (e.fire_at, e.timer_id))

    def seconds_until_next(self) -> Optional[float]:
        """Time left before the next effect fires, or None when idle."""
        upcoming = self.pending()
        if not upcoming:
            return None
        return max(0.0, upcoming[0].fire_at - self._now)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and fire every effect that falls due.

        Effects scheduled by a firing callback also run if they fall inside
        the window.

        Returns:
            Number of effects fired.
        """
        if seconds < 0:
            raise ValueError(f"Cannot move time backwards: {seconds}")
        target = self._now + seconds
        fired = 0
        while True:
            upcoming = self.pending()
            if not upcoming or upcoming[0].fire_at > target:
                break
            effect = upcoming[0]
            del self._effects[effect.timer_id]
            self._now = effect.fire_at
            logger.debug("Firing effect %d (%s)", effect.timer_id, effect.description)
            effect.callback()
            fired += 1
        self._now = target
        return fired

    def run_until_idle(self) -> int:
        """Advance exactly as far as needed to drain the queue."""
        fired = 0
        while True:
            remaining = self.seconds_until_next()
            if remaining is None:
                return fired
            fired += self.advance(remaining)
