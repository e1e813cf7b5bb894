"""
Scheduling collaborator - repeating tick callbacks.

The game never owns a loop. It asks a Scheduler to call its tick function
every ``interval_ms`` and cancels that schedule when the session ends.

IntervalScheduler is driven from the outside: the display loop calls
``pump(now_ms)`` with the current time (e.g. pygame.time.get_ticks()) and
every due callback runs on that same thread.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List

from .logging import get_logger

log = get_logger('scheduler')

TickFn = Callable[[], None]


@dataclass(frozen=True)
class ScheduleHandle:
    """Opaque token returned by schedule_repeating()."""
    id: int


class Scheduler(ABC):
    """Repeating-callback scheduler interface."""

    @abstractmethod
    def schedule_repeating(self, tick_fn: TickFn, interval_ms: int) -> ScheduleHandle:
        """Call tick_fn every interval_ms until cancelled."""
        pass

    @abstractmethod
    def cancel(self, handle: ScheduleHandle) -> None:
        """Stop a schedule. Unknown or already cancelled handles are ignored."""
        pass


class _Entry:
    __slots__ = ('fn', 'interval_ms', 'next_due')

    def __init__(self, fn: TickFn, interval_ms: int, next_due: float):
        self.fn = fn
        self.interval_ms = interval_ms
        self.next_due = next_due


class IntervalScheduler(Scheduler):
    """Fires due callbacks whenever pump() is called.

    A callback that fell behind runs once per missed interval, up to
    ``max_catch_up`` times per pump; older backlog is dropped.

    Args:
        start_ms: Time that the first interval counts from
        max_catch_up: Most runs of a single callback per pump()
    """

    def __init__(self, start_ms: float = 0.0, max_catch_up: int = 5):
        if max_catch_up < 1:
            raise ValueError("max_catch_up must be at least 1")
        self._now = start_ms
        self._max_catch_up = max_catch_up
        self._entries: Dict[int, _Entry] = {}
        self._next_id = 0

    @property
    def active_count(self) -> int:
        return len(self._entries)

    def is_active(self, handle: ScheduleHandle) -> bool:
        return handle.id in self._entries

    def schedule_repeating(self, tick_fn: TickFn, interval_ms: int) -> ScheduleHandle:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        handle = ScheduleHandle(self._next_id)
        self._next_id += 1
        self._entries[handle.id] = _Entry(tick_fn, interval_ms, self._now + interval_ms)
        log.debug("Scheduled #%d every %dms", handle.id, interval_ms)
        return handle

    def cancel(self, handle: ScheduleHandle) -> None:
        if self._entries.pop(handle.id, None) is not None:
            log.debug("Cancelled #%d", handle.id)

    def pump(self, now_ms: float) -> int:
        """Run every callback that is due at now_ms.

        Callbacks may schedule or cancel during the pump; a cancelled
        entry stops immediately, a new one waits for its first interval.

        Args:
            now_ms: Current time in milliseconds

        Returns:
            Number of callback invocations
        """
        self._now = now_ms
        runs = 0
        for entry_id in list(self._entries):
            entry = self._entries.get(entry_id)
            fired = 0
            while entry is not None and entry.next_due <= now_ms:
                if fired >= self._max_catch_up:
                    entry.next_due = now_ms + entry.interval_ms
                    break
                entry.next_due += entry.interval_ms
                entry.fn()
                fired += 1
                entry = self._entries.get(entry_id)
            runs += fired
        return runs

    def clear(self) -> None:
        """Cancel everything."""
        self._entries.clear()


class ManualScheduler(Scheduler):
    """Records schedules without a clock; ``fire()`` runs them once.

    Useful for headless runs and tests that step the game by hand.
    """

    def __init__(self):
        self._entries: Dict[int, TickFn] = {}
        self._next_id = 0
        self.cancelled: List[ScheduleHandle] = []

    def schedule_repeating(self, tick_fn: TickFn, interval_ms: int) -> ScheduleHandle:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        handle = ScheduleHandle(self._next_id)
        self._next_id += 1
        self._entries[handle.id] = tick_fn
        return handle

    def cancel(self, handle: ScheduleHandle) -> None:
        if self._entries.pop(handle.id, None) is not None:
            self.cancelled.append(handle)

    def is_active(self, handle: ScheduleHandle) -> bool:
        return handle.id in self._entries

    @property
    def active_count(self) -> int:
        return len(self._entries)

    def fire(self, times: int = 1) -> None:
        """Invoke every active callback ``times`` times."""
        for _ in range(times):
            for entry_id in list(self._entries):
                fn = self._entries.get(entry_id)
                if fn is not None:
                    fn()
