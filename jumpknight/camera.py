"""A 2D follow camera with a dead zone and vertical world limits."""

from __future__ import annotations

from dataclasses import dataclass, field

from jumpknight.geometry import Rect, Vector2, lerp

WORLD_TOP_Y = 0.0
BASE_FLOOR_Y = 900.0
SMOOTH_SPEED = 6.0
IDLE_SMOOTH_FACTOR = 0.3
DEADZONE_FRACTION = 0.25


@dataclass
class Camera:
    """What the view looks at and where that point sits on screen."""

    target: Vector2 = field(default_factory=Vector2)
    offset: Vector2 = field(default_factory=Vector2)
    zoom: float = 1.0
    rotation: float = 0.0


def update_camera(
    camera: Camera,
    dt: float,
    player_pos: Vector2,
    walking: bool,
    screen_width: float,
    screen_height: float,
) -> None:
    """Ease the camera towards the player and keep it inside the world's height.

    While walking the camera only moves once the player leaves a dead zone
    around the target; when standing it recentres horizontally, more slowly.
    """
    dz_w = screen_width * DEADZONE_FRACTION
    dz_h = screen_height * DEADZONE_FRACTION
    dz = Rect(camera.target.x - dz_w * 0.5, camera.target.y - dz_h * 0.5, dz_w, dz_h)

    desired_x = camera.target.x
    desired_y = camera.target.y
    if walking:
        if player_pos.x < dz.x:
            desired_x = player_pos.x + dz_w * 0.5
        elif player_pos.x > dz.right:
            desired_x = player_pos.x - dz_w * 0.5
        if player_pos.y < dz.y:
            desired_y = player_pos.y + dz_h * 0.5
        elif player_pos.y > dz.bottom:
            desired_y = player_pos.y - dz_h * 0.5
    else:
        desired_x = player_pos.x

    speed_x = SMOOTH_SPEED if walking else SMOOTH_SPEED * IDLE_SMOOTH_FACTOR
    t_x = min(speed_x * dt, 1.0)
    t_y = min(SMOOTH_SPEED * dt, 1.0)

    camera.target.x = lerp(camera.target.x, desired_x, t_x)
    camera.target.y = lerp(camera.target.y, desired_y, t_y)

    top_limit = WORLD_TOP_Y + camera.offset.y
    bottom_limit = BASE_FLOOR_Y + camera.offset.y
    if camera.target.y < top_limit:
        camera.target.y = top_limit
    if camera.target.y > bottom_limit:
        camera.target.y = bottom_limit