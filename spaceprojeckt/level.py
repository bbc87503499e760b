"""The first level: the player against waves of vanguards."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .mathutil import Vector2D
from .player import Player
from .vanguard_stage import VanguardStage
from .world import World

if TYPE_CHECKING:
    from .application import Application


class GameLevelOne(World):
    """Spawns the player and runs a single vanguard stage."""

    def __init__(self, application: Application) -> None:
        super().__init__(application)
        self.player = self.spawn_actor(Player)
        self.player.set_actor_position(Vector2D(300.0, 490.0))

    def init_game_stage(self) -> None:
        self.add_stage(VanguardStage(self))

    def begin_play(self) -> None:
        pass

    def tick(self, delta_time: float) -> None:
        pass