"""The game application and the command that starts it."""

from __future__ import annotations

from typing import Optional, Sequence

import pygame

from .application import Application
from .assets import AssetManager
from .level import GameLevelOne

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 980
WINDOW_TITLE = "SpaceProjeckt"


def resource_dir() -> str:
    """Directory, relative to the working directory, that holds the game's assets."""
    return "assets/"


class GameApplication(Application):
    """Opens the game window and loads the first level."""

    def __init__(self) -> None:
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        AssetManager.get().set_root_directory(resource_dir())
        self.load_world(GameLevelOne)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game until its window is closed."""
    app = GameApplication()
    try:
        app.run()
    finally:
        app.close()
        pygame.quit()
    return 0