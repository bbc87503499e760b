"""A world holds the actors and the sequence of stages of one level."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, TypeVar

import pygame

from .actor import Actor
from .gameobject import GameObject

if TYPE_CHECKING:
    from .application import Application
    from .stage import GameStage

ActorT = TypeVar("ActorT", bound=Actor)


class World(GameObject):
    """Owns actors and stages; subclasses override the play and stage hooks."""

    def __init__(self, application: Application) -> None:
        super().__init__()
        self._application = application
        self._begun_play = False
        self._actors: list[Actor] = []
        self._pending_actors: list[Actor] = []
        self._stages: list[GameStage] = []
        self._current_stage_index = -1
        self._elapsed_time = 0.0
        self._all_stages_finished = False

    @property
    def application(self) -> Application:
        return self._application

    @property
    def has_begun_play(self) -> bool:
        return self._begun_play

    @property
    def actors(self) -> tuple[Actor, ...]:
        return tuple(self._actors)

    @property
    def pending_actors(self) -> tuple[Actor, ...]:
        return tuple(self._pending_actors)

    @property
    def stages(self) -> tuple[GameStage, ...]:
        return tuple(self._stages)

    @property
    def current_stage_index(self) -> int:
        return self._current_stage_index

    @property
    def elapsed_time(self) -> float:
        """Time ticked since play began."""
        return self._elapsed_time

    @property
    def all_stages_finished(self) -> bool:
        return self._all_stages_finished

    def _current_stage(self) -> Optional[GameStage]:
        if 0 <= self._current_stage_index < len(self._stages):
            return self._stages[self._current_stage_index]
        return None

    def begin_play_internal(self) -> None:
        """Start play once: run the hook, set up the stages and start the first."""
        if not self._begun_play:
            self.begin_play()
            self._begun_play = True
            self.init_game_stage()
            self.next_game_stage()

    def tick_internal(self, delta_time: float) -> None:
        """Admit newly spawned actors, tick actors and the current stage."""
        pending, self._pending_actors = self._pending_actors, []
        for actor in pending:
            self._actors.append(actor)
            actor.begin_play_internal()

        for actor in list(self._actors):
            actor.tick_internal(delta_time)

        stage = self._current_stage()
        if stage is not None:
            stage.tick_stage(delta_time)

        self.tick(delta_time)

    def render(self, surface: pygame.Surface) -> None:
        for actor in self._actors:
            actor.render(surface)

    def spawn_actor(self, actor_type: type[ActorT], *args: Any, **kwargs: Any) -> ActorT:
        """Create an actor in this world; it joins play on the next tick."""
        actor = actor_type(self, *args, **kwargs)
        self._pending_actors.append(actor)
        return actor

    def window_size(self) -> tuple[int, int]:
        return self._application.window_size()

    def run_clean_cycle(self) -> None:
        """Drop destroyed actors and finished stages."""
        self._actors = [actor for actor in self._actors if not actor.pending_destroy]
        self._stages = [stage for stage in self._stages if not stage.is_finished]

    def add_stage(self, stage: GameStage) -> None:
        self._stages.append(stage)

    def begin_play(self) -> None:
        self._elapsed_time = 0.0

    def tick(self, delta_time: float) -> None:
        self._elapsed_time += delta_time

    def init_game_stage(self) -> None:
        self._current_stage_index = -1

    def all_game_stage_finished(self) -> None:
        self._all_stages_finished = True

    def next_game_stage(self) -> None:
        """Advance to the next stage, or report that all stages are done."""
        self._current_stage_index += 1
        stage = self._current_stage()
        if stage is not None:
            stage.on_stage_finished.bind_action(self, lambda world: world.next_game_stage())
            stage.start_stage()
        else:
            self.all_game_stage_finished()