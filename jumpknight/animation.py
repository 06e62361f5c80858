"""Sprite-strip animations and a state-driven animation player."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from jumpknight.geometry import Rect


class AnimState(Enum):
    """Animation states of a character."""

    IDLE = 0
    WALK = 1
    JUMP = 2
    FALL = 3


@dataclass
class Animation:
    """A sequence of frames cut from one texture."""

    frames: tuple[Rect, ...]
    frame_time: float
    loop: bool = True
    texture: Any = None

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("an animation needs at least one frame")
        self.frames = tuple(self.frames)

    @classmethod
    def from_strip(
        cls,
        texture_width: int,
        texture_height: int,
        frame_count: int,
        frame_time: float,
        loop: bool = True,
    ) -> Animation:
        """Cut a horizontal strip into frame_count equal frames."""
        if frame_count <= 0:
            raise ValueError("frame_count must be positive")
        width = texture_width // frame_count
        frames = tuple(
            Rect(float(i * width), 0.0, float(width), float(texture_height))
            for i in range(frame_count)
        )
        return cls(frames=frames, frame_time=frame_time, loop=loop)


@dataclass
class AnimPlayer:
    """Plays the animation that matches a character's movement."""

    anims: dict[AnimState, Animation] = field(default_factory=dict)
    state: AnimState = AnimState.IDLE
    frame: int = 0
    timer: float = 0.0

    def __post_init__(self) -> None:
        idle = self.anims.get(AnimState.IDLE)
        if idle is None:
            raise ValueError("an idle animation is required")
        # States without their own animation reuse the idle one.
        self.anims = {state: self.anims.get(state, idle) for state in AnimState}

    @property
    def animation(self) -> Animation:
        return self.anims[self.state]

    def update(self, dt: float, velocity_y: float, walking: bool) -> None:
        """Pick the state from the movement and advance the frame timer."""
        if velocity_y < 0:
            new_state = AnimState.JUMP
        elif velocity_y > 0:
            new_state = AnimState.FALL
        elif walking:
            new_state = AnimState.WALK
        else:
            new_state = AnimState.IDLE

        if new_state is not self.state:
            self.state = new_state
            self.frame = 0
            self.timer = 0.0

        anim = self.animation
        self.timer += dt
        if self.timer >= anim.frame_time:
            self.timer -= anim.frame_time
            self.frame += 1
            if self.frame >= len(anim.frames):
                self.frame = 0 if anim.loop else len(anim.frames) - 1

    def current_frame(self) -> Rect:
        """The source rectangle of the frame being shown."""
        return self.animation.frames[self.frame]

    def source_rect(self, flip_x: bool = False) -> Rect:
        """A copy of the current frame; a negative width mirrors it."""
        frame = self.current_frame()
        width = -frame.width if flip_x else frame.width
        return Rect(frame.x, frame.y, width, frame.height)