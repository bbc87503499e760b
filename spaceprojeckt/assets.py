"""Texture loading with a shared cache that can drop unused textures."""

from __future__ import annotations

import os
import weakref
from dataclasses import dataclass
from typing import ClassVar, Optional

import pygame

from .mathutil import log


@dataclass(eq=False)
class Texture:
    """An image loaded into memory."""

    surface: pygame.Surface
    path: str = ""

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()


class AssetManager:
    """Loads textures once and hands out the cached copy afterwards."""

    _instance: ClassVar[Optional[AssetManager]] = None

    def __init__(self) -> None:
        self._textures: dict[str, Texture] = {}
        self._root = ""

    @classmethod
    def get(cls) -> AssetManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def root_directory(self) -> str:
        return self._root

    def load_texture(self, path: str) -> Optional[Texture]:
        """Return the texture at ``path`` under the root, or None if it cannot load."""
        cached = self._textures.get(path)
        if cached is not None:
            return cached
        full_path = self._root + path
        if not os.path.isfile(full_path):
            return None
        try:
            surface = pygame.image.load(full_path)
        except (pygame.error, OSError, ValueError):
            return None
        texture = Texture(surface, path)
        self._textures[path] = texture
        return texture

    def clean_assets(self) -> None:
        """Forget every texture that nothing outside the cache still uses."""
        paths = list(self._textures)
        survivors = weakref.WeakValueDictionary(self._textures)
        self._textures.clear()
        for path in paths:
            texture = survivors.get(path)
            if texture is None:
                log("asset cleaned")
            else:
                self._textures[path] = texture

    def set_root_directory(self, path: str | os.PathLike[str]) -> None:
        self._root = os.fspath(path)

    def __contains__(self, path: object) -> bool:
        return path in self._textures

    def __len__(self) -> int:
        return len(self._textures)