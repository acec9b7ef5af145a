"""Scene manager, main loop and command entry point."""

import argparse
import random
import sys

import pygame

from .mouse import Mouse
from .resources import ResourceError, ResourceManager
from .scenes import GameMainScene, SceneType
from .utility import SCREEN_HEIGHT, SCREEN_WIDTH

TARGET_FRAME_RATE = 60
DELTA_SECOND = 1_000_000 // TARGET_FRAME_RATE  # microseconds per frame
WINDOW_TITLE = "GAME"


class SceneError(Exception):
    """Raised when the window or a scene cannot be set up."""


class SceneManager:
    """Owns the window and runs the current scene at a fixed frame rate."""

    def __init__(self, resources=None, mouse=None, sound_loader=None, rng=None):
        self.resources = resources if resources is not None else ResourceManager()
        self.mouse = mouse if mouse is not None else Mouse()
        self._sound_loader = sound_loader
        self._rng = rng if rng is not None else random.Random()
        self.current_scene = None
        self.screen = None

    def initialize(self):
        """Open the window and start on the main scene."""
        try:
            pygame.init()
            pygame.display.set_caption(WINDOW_TITLE)
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), 0, 32)
            pygame.mouse.set_visible(True)
        except pygame.error as exc:
            raise SceneError(f"could not open the game window: {exc}") from exc
        self.change_scene(SceneType.MAIN)

    def run(self):
        """Run frames until the window closes, Escape is pressed or a scene ends."""
        if self.screen is None or self.current_scene is None:
            raise SceneError("the scene manager has not been initialized")
        clock = pygame.time.Clock()
        while True:
            if self._quit_requested():
                break
            next_scene = self.current_scene.update()
            self._draw()
            if next_scene is SceneType.END:
                break
            if next_scene != self.current_scene.now_scene():
                self.change_scene(next_scene)
            clock.tick(TARGET_FRAME_RATE)

    @staticmethod
    def _quit_requested():
        quit_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                quit_requested = True
        return quit_requested

    def _draw(self):
        self.screen.fill((0, 0, 0))
        self.current_scene.draw(self.screen)
        pygame.display.flip()

    def finalize(self):
        """Finish the current scene and close the window."""
        if self.current_scene is not None:
            self.current_scene.finalize()
            self.current_scene = None
        self.screen = None
        pygame.quit()

    def change_scene(self, scene_type):
        """Replace the current scene with a new, initialized one."""
        new_scene = self.create_scene(scene_type)
        if new_scene is None:
            raise SceneError(f"no scene can be created for {scene_type.name}")
        if self.current_scene is not None:
            self.current_scene.finalize()
        new_scene.initialize()
        self.current_scene = new_scene

    def create_scene(self, scene_type):
        """Build the scene for ``scene_type``, or None if there is none."""
        if scene_type is SceneType.MAIN:
            return GameMainScene(
                mouse=self.mouse,
                resources=self.resources,
                rng=self._rng,
                sound_loader=self._sound_loader,
            )
        return None


def main(argv=None):
    """Run the game; return 0 on a normal exit and -1 on a setup failure."""
    parser = argparse.ArgumentParser(prog="cardslot", description="Card slot game.")
    parser.parse_args(argv)

    manager = SceneManager()
    try:
        manager.initialize()
        manager.run()
    except (SceneError, ResourceError) as exc:
        print(exc, file=sys.stderr)
        return -1
    finally:
        manager.finalize()
    return 0