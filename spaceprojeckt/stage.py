"""A stage of a level that runs until it declares itself finished."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .delegate import Delegate
from .gameobject import GameObject
from .mathutil import log

if TYPE_CHECKING:
    from .world import World


class GameStage(GameObject):
    """Base stage; subclasses override the hooks and call :meth:`finish_stage`."""

    def __init__(self, world: World) -> None:
        super().__init__()
        self.world = world
        self.on_stage_finished = Delegate()
        self._finished = False
        self._running = False
        self._elapsed = 0.0

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def is_running(self) -> bool:
        """True between :meth:`start_stage` and :meth:`stage_finished`."""
        return self._running

    @property
    def elapsed_time(self) -> float:
        """Time ticked while the stage was not finished."""
        return self._elapsed

    def start_stage(self) -> None:
        self._running = True
        log("started stage")

    def tick_stage(self, delta_time: float) -> None:
        if not self._finished:
            self._elapsed += delta_time

    def finish_stage(self) -> None:
        """Notify listeners, mark the stage done, then run the finish hook."""
        self.on_stage_finished.broadcast()
        self._finished = True
        self.stage_finished()

    def stage_finished(self) -> None:
        self._running = False
        log("finished stage")