import gc
import os
import weakref

import pygame
import pytest

from spaceprojeckt.assets import AssetManager, Texture


@pytest.fixture
def texture_name(tmp_path):
    name = f"{tmp_path.name}.png"
    surface = pygame.Surface((40, 20))
    surface.fill((0, 255, 0))
    pygame.image.save(surface, str(tmp_path / name))
    return name


@pytest.fixture
def manager(tmp_path, texture_name):
    mgr = AssetManager.get()
    mgr.set_root_directory(str(tmp_path) + os.sep)
    return mgr


def test_get_returns_shared_instance(manager, texture_name):
    texture = manager.load_texture(texture_name)
    assert AssetManager.get().load_texture(texture_name) is texture


def test_load_texture_reads_file(manager, texture_name):
    texture = manager.load_texture(texture_name)
    assert texture.size == (40, 20)
    assert texture.path == texture_name


def test_load_texture_is_cached(manager, texture_name):
    before = len(manager)
    first = manager.load_texture(texture_name)
    second = manager.load_texture(texture_name)
    assert first is second
    assert len(manager) == before + 1


def test_missing_texture_returns_none(manager):
    assert manager.load_texture("nothing.png") is None
    assert "nothing.png" not in manager


def test_empty_path_returns_none(manager):
    assert manager.load_texture("") is None


def test_root_directory_is_stored(manager, tmp_path):
    assert manager.root_directory == str(tmp_path) + os.sep


def test_clean_drops_unused_textures(manager, texture_name, capsys):
    texture = manager.load_texture(texture_name)
    ref = weakref.ref(texture)
    del texture
    manager.clean_assets()
    assert ref() is None
    assert texture_name not in manager
    assert "asset cleaned" in capsys.readouterr().out


def test_clean_keeps_textures_in_use(manager, texture_name, capsys):
    gc.collect()
    manager.clean_assets()
    capsys.readouterr()
    texture = manager.load_texture(texture_name)
    manager.clean_assets()
    assert texture_name in manager
    assert manager.load_texture(texture_name) is texture
    assert capsys.readouterr().out == ""


def test_texture_size_from_surface():
    texture = Texture(pygame.Surface((3, 7)))
    assert texture.size == (3, 7)