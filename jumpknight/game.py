"""The playable level scene and the window's main loop."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Any

import pygame

from jumpknight.animation import AnimPlayer, AnimState, Animation
from jumpknight.camera import Camera, update_camera
from jumpknight.geometry import Rect, Vector2
from jumpknight.level import Level, load_map
from jumpknight.player import Controls, Player
from jumpknight.scene import Scene, SceneManager

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
TITLE = "Jumping Knight"
TARGET_FPS = 60
CAMERA_ZOOM = 1.5

MAP_FILE = "map1.csv"
BACKGROUND_FILE = "bg.png"
PLATFORM_FILE = "stone.png"
IDLE_FILE = "idle.png"
WALK_FILE = "walk.png"

IDLE_FRAMES = 4
IDLE_FRAME_TIME = 0.15
WALK_FRAMES = 4
WALK_FRAME_TIME = 0.10

CLEAR_COLOR = (245, 245, 245)
SPIKE_COLOR = (230, 41, 55)


def _load_texture(path: Path) -> pygame.Surface:
    image = pygame.image.load(os.fspath(path))
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def _strip_animation(texture: pygame.Surface, frames: int, frame_time: float) -> Animation:
    width, height = texture.get_size()
    anim = Animation.from_strip(width, height, frames, frame_time, True)
    anim.texture = texture
    return anim


class GameScene(Scene):
    """The level: player, platforms, spikes and a following camera."""

    def __init__(self, screen: pygame.Surface, assets_dir: str | os.PathLike[str]) -> None:
        self.screen = screen
        self.assets_dir = Path(assets_dir)
        self.controls = Controls()
        self.level: Level | None = None
        self.player: Player | None = None
        self.camera: Camera | None = None
        self._background: pygame.Surface | None = None
        self._platform_texture: pygame.Surface | None = None

    @property
    def map_path(self) -> Path:
        return self.assets_dir / MAP_FILE

    def _require_started(self) -> tuple[Level, Player, Camera]:
        if self.level is None or self.player is None or self.camera is None:
            raise RuntimeError("the game scene has not been started")
        return self.level, self.player, self.camera

    def start(self) -> None:
        """Load the map and assets and place the player at the spawn point."""
        self.level = load_map(self.map_path)
        background = _load_texture(self.assets_dir / BACKGROUND_FILE)
        self._background = pygame.transform.scale(background, self.screen.get_size())
        self._platform_texture = _load_texture(self.assets_dir / PLATFORM_FILE)

        idle = _strip_animation(
            _load_texture(self.assets_dir / IDLE_FILE), IDLE_FRAMES, IDLE_FRAME_TIME
        )
        walk = _strip_animation(
            _load_texture(self.assets_dir / WALK_FILE), WALK_FRAMES, WALK_FRAME_TIME
        )
        anim = AnimPlayer(anims={AnimState.IDLE: idle, AnimState.WALK: walk})
        spawn = self.level.spawn
        self.player = Player(pos=Vector2(spawn.x, spawn.y), anim=anim)

        width, height = self.screen.get_size()
        self.camera = Camera(
            offset=Vector2(float(width // 2), float(height // 2)), zoom=CAMERA_ZOOM
        )

    def update(self, dt: float) -> None:
        """Move the player with the current controls and follow it with the camera."""
        level, player, camera = self._require_started()
        player.update(dt, self.controls, level)
        width, height = self.screen.get_size()
        update_camera(camera, dt, player.pos, self.controls.walking, width, height)

    def reset(self) -> None:
        """Put the player back at the spawn point and reload the map."""
        level, player, _ = self._require_started()
        player.pos = Vector2(level.spawn.x, level.spawn.y)
        self.level = load_map(self.map_path)

    def _to_screen(self, rect: Rect) -> pygame.Rect:
        camera = self.camera
        assert camera is not None
        zoom = camera.zoom
        x = (rect.x - camera.target.x) * zoom + camera.offset.x
        y = (rect.y - camera.target.y) * zoom + camera.offset.y
        return pygame.Rect(round(x), round(y), round(rect.width * zoom), round(rect.height * zoom))

    def _blit_region(self, texture: Any, src: Rect, dst: Rect) -> None:
        area = pygame.Rect(
            round(src.x), round(src.y), round(abs(src.width)), round(src.height)
        ).clip(texture.get_rect())
        target = self._to_screen(dst)
        if area.width <= 0 or area.height <= 0 or target.width <= 0 or target.height <= 0:
            return
        piece = texture.subsurface(area)
        if src.width < 0:
            piece = pygame.transform.flip(piece, True, False)
        self.screen.blit(pygame.transform.scale(piece, target.size), target.topleft)

    def draw(self) -> None:
        """Draw the background, then platforms, player and spikes through the camera."""
        level, player, _ = self._require_started()
        self.screen.fill(CLEAR_COLOR)
        if self._background is not None:
            self.screen.blit(self._background, (0, 0))

        texture = self._platform_texture
        if texture is not None:
            tile_w, tile_h = texture.get_size()
            for src, dst in level.platform_tiles(tile_w, tile_h):
                self._blit_region(texture, src, dst)

        anim = player.anim
        if anim is not None and anim.animation.texture is not None:
            src = anim.source_rect(player.is_moving_left)
            dst = Rect(player.pos.x, player.pos.y, abs(src.width), src.height)
            self._blit_region(anim.animation.texture, src, dst)

        for spike in level.spikes:
            pygame.draw.rect(self.screen, SPIKE_COLOR, self._to_screen(spike))

    def unload(self) -> None:
        """Drop the level, player and textures."""
        self.level = None
        self.player = None
        self.camera = None
        self._background = None
        self._platform_texture = None


def _held_controls(pressed: Any, jump: bool) -> Controls:
    return Controls(
        left=bool(pressed[pygame.K_LEFT]),
        right=bool(pressed[pygame.K_RIGHT]),
        run=bool(pressed[pygame.K_LSHIFT]),
        jump=jump,
    )


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="jumpknight", description="Play Jumping Knight.")
    parser.add_argument("--assets", default="assets", help="directory with the map and images")
    parser.add_argument(
        "--frames", type=int, default=0, help="stop after this many frames (0 runs until closed)"
    )
    args = parser.parse_args(argv)

    pygame.display.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        manager = SceneManager()
        game = GameScene(screen, args.assets)
        manager.set_scene(game)

        frames = 0
        running = True
        while running:
            dt = clock.tick(TARGET_FPS) / 1000.0
            jump = False
            reset = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_c:
                        jump = True
                    elif event.key == pygame.K_r:
                        reset = True
            if not running:
                break
            game.controls = _held_controls(pygame.key.get_pressed(), jump)
            manager.update(dt)
            if reset:
                game.reset()
            manager.draw()
            pygame.display.flip()
            frames += 1
            if args.frames and frames >= args.frames:
                break
        manager.unload_current()
    finally:
        pygame.display.quit()
    return 0