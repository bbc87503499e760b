"""Timers that call back into game objects after a delay."""

from __future__ import annotations

import itertools
import weakref
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Optional

_timer_keys = itertools.count(1)


@dataclass(frozen=True)
class TimerHandle:
    """Identifies a timer; each new handle gets the next key."""

    key: int = field(default_factory=lambda: next(_timer_keys))


class Timer:
    """Calls ``callback(target)`` once ``duration`` seconds have accumulated."""

    def __init__(
        self,
        obj: Any,
        callback: Callable[[Any], Any],
        duration: float,
        repeat: bool,
    ) -> None:
        self._target = obj if isinstance(obj, weakref.ref) else weakref.ref(obj)
        self._callback = callback
        self._duration = duration
        self._repeat = repeat
        self._counter = 0.0
        self._expired = False

    def tick_time(self, delta_time: float) -> None:
        if self.expired():
            return
        self._counter += delta_time
        if self._counter >= self._duration:
            target = self._target()
            if target is not None:
                self._callback(target)
            if self._repeat:
                self._counter = 0.0
            else:
                self.set_expired()

    def expired(self) -> bool:
        if self._expired:
            return True
        target = self._target()
        return target is None or target.pending_destroy

    def set_expired(self) -> None:
        self._expired = True


class TimerManager:
    """Owns all running timers; use :meth:`get` for the shared instance."""

    _instance: ClassVar[Optional[TimerManager]] = None

    def __init__(self) -> None:
        self._timers: dict[TimerHandle, Timer] = {}

    @classmethod
    def get(cls) -> TimerManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def set_timer(
        self,
        obj: Any,
        callback: Callable[[Any], Any],
        duration: float,
        repeat: bool,
    ) -> TimerHandle:
        handle = TimerHandle()
        self._timers[handle] = Timer(obj, callback, duration, repeat)
        return handle

    def update_timer(self, delta_time: float) -> None:
        """Drop expired timers and advance the rest."""
        for handle, timer in list(self._timers.items()):
            if timer.expired():
                del self._timers[handle]
            else:
                timer.tick_time(delta_time)

    def clear_timer(self, handle: TimerHandle) -> None:
        timer = self._timers.get(handle)
        if timer is not None:
            timer.set_expired()

    def __len__(self) -> int:
        return len(self._timers)