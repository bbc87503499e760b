"""The window and fixed-rate game loop that drives the current world."""

from __future__ import annotations

import time
from typing import Callable, Optional, TypeVar

import pygame

from .assets import AssetManager
from .physics import PhysicsSystem
from .timers import TimerManager
from .world import World

WorldT = TypeVar("WorldT", bound=World)


class Application:
    """Opens a window and ticks and renders the current world at a fixed rate."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        flags: int = 0,
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        pygame.display.init()
        self._surface = pygame.display.set_mode((width, height), flags)
        pygame.display.set_caption(title)
        self._size = self._surface.get_size()
        self._open = True
        self._clock = clock
        self.target_frame_rate = 60.0
        self.clean_interval = 2.0
        self._last_tick = clock()
        self._cleaner_start = clock()
        self._elapsed_time = 0.0
        self.current_world: Optional[World] = None

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def elapsed_time(self) -> float:
        """Total game time ticked so far."""
        return self._elapsed_time

    def close(self) -> None:
        """Close the window; the game loop stops at its next check."""
        if self._open:
            self._open = False
            pygame.display.quit()

    def run(self) -> None:
        """Run the game loop until the window is closed."""
        self._last_tick = self._clock()
        elapsed = 0.0
        target_delta = 1.0 / self.target_frame_rate

        while self._open:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.close()
            if not self._open:
                break

            now = self._clock()
            elapsed += now - self._last_tick
            self._last_tick = now

            while elapsed > target_delta and self._open:
                elapsed -= target_delta
                self.tick_internal(target_delta)
                self.render_internal()

    def load_world(self, world_type: type[WorldT]) -> WorldT:
        """Create a world of ``world_type``, make it current and start it."""
        world = world_type(self)
        self.current_world = world
        world.begin_play_internal()
        return world

    def window_size(self) -> tuple[int, int]:
        return self._size

    def tick_internal(self, delta_time: float) -> None:
        self.tick(delta_time)
        if self.current_world is not None:
            self.current_world.tick_internal(delta_time)
        TimerManager.get().update_timer(delta_time)
        PhysicsSystem.get().step(delta_time)

        if self._clock() - self._cleaner_start >= self.clean_interval:
            self._cleaner_start = self._clock()
            AssetManager.get().clean_assets()
            if self.current_world is not None:
                self.current_world.run_clean_cycle()

    def render_internal(self) -> None:
        if not self._open:
            return
        self._surface.fill((0, 0, 0))
        self.render()
        pygame.display.flip()

    def tick(self, delta_time: float) -> None:
        self._elapsed_time += delta_time

    def render(self) -> None:
        if self.current_world is not None:
            self.current_world.render(self._surface)