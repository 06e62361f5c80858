"""Level data: spawn point, platforms and spikes loaded from a map file."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from jumpknight.geometry import Rect, Vector2

logger = logging.getLogger(__name__)

MAX_PLATFORMS = 256
MAX_SPIKES = 1024
MAX_TYPE_LENGTH = 31

_EOL = re.compile(r"[\r\n]")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


class ObjectType(Enum):
    """Kinds of objects a map line can describe."""

    PLATFORM = "platform"
    SPIKE = "spike"


def _strip_eol(line: str) -> str:
    return _EOL.split(line, 1)[0]


def _tokens(line: str) -> list[str]:
    """Split on ';' the way strtok does: empty fields are skipped."""
    return [token for token in line.split(";") if token]


def _leading_float(text: str) -> float:
    """Parse the longest numeric prefix of text, or 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


@dataclass
class Level:
    """A loaded map: where the player starts and what is in the world."""

    spawn: Vector2 = field(default_factory=Vector2)
    platforms: list[Rect] = field(default_factory=list)
    spikes: list[Rect] = field(default_factory=list)

    def check_spike_collision(self, rect: Rect) -> bool:
        """Move rect to the spawn point if it touches a spike; report whether it did."""
        hit = False
        for spike in self.spikes:
            if rect.collides(spike):
                logger.info("spike collision at (%.1f, %.1f)", spike.x, spike.y)
                rect.x = self.spawn.x
                rect.y = self.spawn.y
                hit = True
        return hit

    def platform_tiles(
        self, tile_width: float, tile_height: float
    ) -> Iterator[tuple[Rect, Rect]]:
        """Yield (source, destination) rectangles that tile every platform.

        Tiles at the right and bottom edges are clipped to the platform.
        """
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError("tile dimensions must be positive")
        for rec in self.platforms:
            x_end = rec.right
            y_end = rec.bottom
            y = rec.y
            while y < y_end:
                x = rec.x
                while x < x_end:
                    w = min(tile_width, x_end - x)
                    h = min(tile_height, y_end - y)
                    yield Rect(0.0, 0.0, w, h), Rect(x, y, w, h)
                    x += tile_width
                y += tile_height


def _parse_spawn(line: str, line_number: int) -> Vector2:
    if not line.startswith("spawn;"):
        logger.warning("[L%d] no spawn line, using (0,0)", line_number)
        return Vector2()
    tokens = _tokens(line)
    if len(tokens) < 3:
        logger.warning("[L%d] invalid spawn line, using (0,0)", line_number)
        return Vector2()
    return Vector2(_leading_float(tokens[1]), _leading_float(tokens[2]))


def parse_map(lines: Iterable[str]) -> Level:
    """Build a level from map lines.

    The first line may be ``spawn;x;y``; any other first line is treated as a
    header. Each following line is ``x;y;width;height;type`` where type is
    ``platform`` or ``spike``. Incomplete lines, non-positive sizes and
    unknown types are skipped.
    """
    it = iter(lines)
    first = next(it, None)
    line_number = 0
    spawn = Vector2()
    if first is not None:
        line_number = 1
        spawn = _parse_spawn(_strip_eol(first), line_number)

    level = Level(spawn=spawn)
    for line_number, raw in enumerate(it, start=line_number + 1):
        line = _strip_eol(raw)
        if not line:
            continue
        tokens = _tokens(line)
        if len(tokens) < 5:
            continue
        x, y, w, h = (_leading_float(token) for token in tokens[:4])
        words = tokens[4].split()
        type_name = words[0][:MAX_TYPE_LENGTH] if words else ""

        if w <= 0 or h <= 0:
            logger.warning(
                "[L%d] invalid size w=%.1f h=%.1f, skipping", line_number, w, h
            )
            continue

        try:
            kind = ObjectType(type_name)
        except ValueError:
            logger.warning("[L%d] unknown type %r", line_number, type_name)
            continue

        if kind is ObjectType.PLATFORM:
            if len(level.platforms) < MAX_PLATFORMS:
                level.platforms.append(Rect(x, y, w, h))
            else:
                logger.warning("[L%d] MAX_PLATFORMS reached", line_number)
        elif len(level.spikes) < MAX_SPIKES:
            level.spikes.append(Rect(x, y, w, h))
        else:
            logger.warning("[L%d] MAX_SPIKES reached", line_number)

    logger.info(
        "loaded %d platforms, %d spikes, spawn=(%.1f, %.1f)",
        len(level.platforms),
        len(level.spikes),
        level.spawn.x,
        level.spawn.y,
    )
    return level


def load_map(path: str | os.PathLike[str]) -> Level:
    """Read a map file and build its level."""
    with open(path, "r", encoding="utf-8") as handle:
        return parse_map(handle)