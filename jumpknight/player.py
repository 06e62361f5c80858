"""The player character: movement, gravity, platform and spike collisions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from jumpknight.animation import AnimPlayer
from jumpknight.geometry import Rect, Vector2
from jumpknight.level import Level

logger = logging.getLogger(__name__)

GRAVITY = 800.0
JUMP_FORCE = -300.0
MOVE_SPEED = 200.0
RUN_MULTIPLIER = 1.5
PLAYER_WIDTH = 14.0
PLAYER_HEIGHT = 19.0


@dataclass(frozen=True)
class Controls:
    """The input state for one frame."""

    left: bool = False
    right: bool = False
    run: bool = False
    jump: bool = False

    @property
    def walking(self) -> bool:
        return self.left or self.right


@dataclass
class Player:
    """The player's body and its animation."""

    pos: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=lambda: Vector2(PLAYER_WIDTH, PLAYER_HEIGHT))
    velocity_y: float = 0.0
    is_moving_left: bool = False
    is_on_floor: bool = False
    anim: AnimPlayer | None = None

    def rect(self) -> Rect:
        """The player's bounding box."""
        return Rect(self.pos.x, self.pos.y, self.size.x, self.size.y)

    def respawn(self, spawn: Vector2) -> None:
        """Put the player back at spawn, at rest."""
        self.pos = Vector2(spawn.x, spawn.y)
        self.velocity_y = 0.0

    def update(self, dt: float, controls: Controls, level: Level) -> bool:
        """Advance one frame; return True if a spike sent the player back to spawn."""
        move_x = 0.0
        if controls.left:
            move_x = -MOVE_SPEED * dt
            self.is_moving_left = True
        if controls.right:
            move_x = MOVE_SPEED * dt
            self.is_moving_left = False
        if controls.walking and controls.run:
            move_x *= RUN_MULTIPLIER
        self.pos.x += move_x

        body = self.rect()
        for platform in level.platforms:
            if not body.collides(platform):
                continue
            if move_x > 0:
                self.pos.x = platform.x - self.size.x
            elif move_x < 0:
                self.pos.x = platform.right
            body.x = self.pos.x

        feet = Rect(self.pos.x, self.pos.y + self.size.y + 1, self.size.x, 2)
        self.is_on_floor = any(feet.collides(p) for p in level.platforms)

        if controls.jump and self.is_on_floor:
            self.velocity_y = JUMP_FORCE

        self.velocity_y += GRAVITY * dt
        self.pos.y += self.velocity_y * dt
        body.y = self.pos.y

        for platform in level.platforms:
            if not body.collides(platform):
                continue
            if self.velocity_y > 0:
                self.pos.y = platform.y - self.size.y
            else:
                self.pos.y = platform.bottom
            self.velocity_y = 0.0
            body.y = self.pos.y

        if self.anim is not None:
            self.anim.update(dt, self.velocity_y, controls.walking)

        for spike in level.spikes:
            if body.collides(spike):
                self.respawn(level.spawn)
                logger.info(
                    "spike hit, respawn at (%.1f, %.1f)", level.spawn.x, level.spawn.y
                )
                return True
        return False