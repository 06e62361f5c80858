"""Scenes with start/update/draw/unload hooks and a manager that switches them."""

from __future__ import annotations


class Scene:
    """A screen of the game; subclasses override the hooks they need."""

    def start(self) -> None:
        """Called when the scene becomes the current one."""

    def update(self, dt: float) -> None:
        """Advance the scene by dt seconds."""

    def draw(self) -> None:
        """Render the scene."""

    def unload(self) -> None:
        """Release whatever the scene holds when it stops being current."""


class SceneManager:
    """Holds the current scene and forwards the frame hooks to it."""

    def __init__(self) -> None:
        self.current: Scene | None = None

    def set_scene(self, scene: Scene | None) -> None:
        """Unload the current scene, then make scene current and start it."""
        if self.current is not None:
            self.current.unload()
        self.current = scene
        if scene is not None:
            scene.start()

    def update(self, dt: float) -> None:
        """Update the current scene, if there is one."""
        if self.current is not None:
            self.current.update(dt)

    def draw(self) -> None:
        """Draw the current scene, if there is one."""
        if self.current is not None:
            self.current.draw()

    def unload_current(self) -> None:
        """Unload the current scene and leave no scene current."""
        if self.current is not None:
            self.current.unload()
        self.current = None