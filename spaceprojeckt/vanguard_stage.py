"""A stage that sends rows of vanguards in from alternating sides."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .enemy import Vanguard
from .mathutil import Vector2D
from .stage import GameStage
from .timers import TimerHandle, TimerManager

if TYPE_CHECKING:
    from .world import World


class VanguardStage(GameStage):
    """Spawns ``rows_to_spawn`` rows of ``vanguard_per_row`` vanguards each."""

    def __init__(self, world: World) -> None:
        super().__init__(world)
        self.spawn_interval = 3.0
        self.switch_interval = 5.0
        self.spawn_distance_to_edge = 100.0
        self.left_spawn_location = Vector2D()
        self.right_spawn_location = Vector2D()
        self.spawn_location = Vector2D()
        self._spawn_timer = TimerHandle()
        self._switch_timer = TimerHandle()
        self.rows_to_spawn = 5
        self.row_spawn_count = 0
        self.vanguard_per_row = 3
        self.current_row_vanguard_count = 0

    def start_stage(self) -> None:
        width, _ = self.world.window_size()
        self.left_spawn_location = Vector2D(self.spawn_distance_to_edge, -100.0)
        self.right_spawn_location = Vector2D(width - self.spawn_distance_to_edge, -100.0)
        self.switch_row()

    def switch_row(self) -> None:
        """Start the next row on the other side, or finish once all rows are out."""
        if self.row_spawn_count == self.rows_to_spawn:
            self.finish_stage()
            return

        if self.spawn_location == self.left_spawn_location:
            self.spawn_location = self.right_spawn_location
        else:
            self.spawn_location = self.left_spawn_location

        self._spawn_timer = TimerManager.get().set_timer(
            self, lambda stage: stage.spawn_vanguard(), self.spawn_interval, True
        )
        self.row_spawn_count += 1

    def spawn_vanguard(self) -> None:
        """Spawn one vanguard; after a full row, wait and then switch sides."""
        vanguard = self.world.spawn_actor(Vanguard)
        vanguard.set_actor_position(self.spawn_location)
        self.current_row_vanguard_count += 1
        if self.current_row_vanguard_count == self.vanguard_per_row:
            timers = TimerManager.get()
            timers.clear_timer(self._spawn_timer)
            self._switch_timer = timers.set_timer(
                self, lambda stage: stage.switch_row(), self.switch_interval, False
            )
            self.current_row_vanguard_count = 0

    def stage_finished(self) -> None:
        super().stage_finished()
        timers = TimerManager.get()
        timers.clear_timer(self._spawn_timer)
        timers.clear_timer(self._switch_timer)