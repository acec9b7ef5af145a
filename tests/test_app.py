import pygame
import pytest

from cardslot.app import SceneError, SceneManager, main
from cardslot.mouse import Mouse
from cardslot.resources import ResourceManager
from cardslot.scenes import GameMainScene, SceneType


def fake_loader(path):
    if "CoinAnimation" in path:
        return pygame.Surface((1200, 1440))
    return pygame.Surface((4, 4))


def make_manager():
    return SceneManager(resources=ResourceManager(loader=fake_loader),
                        mouse=Mouse(), sound_loader=lambda path: None)


def test_create_scene_main_shares_mouse():
    manager = make_manager()
    scene = manager.create_scene(SceneType.MAIN)
    assert isinstance(scene, GameMainScene)
    assert scene.now_scene() is SceneType.MAIN
    assert scene.mouse is manager.mouse


@pytest.mark.parametrize("scene_type", [SceneType.TITLE, SceneType.HELP, SceneType.END])
def test_create_scene_without_scene_returns_none(scene_type):
    assert make_manager().create_scene(scene_type) is None


@pytest.mark.parametrize("scene_type", [SceneType.TITLE, SceneType.END])
def test_change_scene_to_unknown_raises(scene_type):
    with pytest.raises(SceneError):
        make_manager().change_scene(scene_type)


def test_change_scene_initializes_and_replaces():
    manager = make_manager()
    manager.change_scene(SceneType.MAIN)
    first = manager.current_scene
    assert first.active is True
    manager.change_scene(SceneType.MAIN)
    assert first.active is False
    assert manager.current_scene.active is True
    assert manager.current_scene is not first


def test_finalize_clears_scene():
    manager = make_manager()
    manager.change_scene(SceneType.MAIN)
    scene = manager.current_scene
    manager.finalize()
    assert manager.current_scene is None
    assert scene.active is False


def test_run_before_initialize_raises():
    with pytest.raises(SceneError):
        make_manager().run()


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0