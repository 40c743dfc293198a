"""components.spatial — Rectangles and the things that move.

All coordinates and dimensions are in canvas units, origin top-left,
y grows downward.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Static axis-aligned rectangle (obstacles, hazards, pads)."""
    x: float
    y: float
    w: float
    h: float


@dataclass
class Player:
    x: float = 70.0           # u
    y: float = 420.0          # u
    w: float = 28.0
    h: float = 28.0
    speed: float = 220.0      # u/s
    # Last safe respawn point (top-left corner)
    checkpoint_x: float = 70.0
    checkpoint_y: float = 420.0

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)

    @property
    def checkpoint(self) -> tuple[float, float]:
        return self.checkpoint_x, self.checkpoint_y

    def respawn(self) -> None:
        """Teleport back to the checkpoint."""
        self.x = self.checkpoint_x
        self.y = self.checkpoint_y


@dataclass
class Companion:
    """Dad.  Trails the player; never collides with anything."""
    x: float = 40.0
    y: float = 420.0
    w: float = 28.0
    h: float = 28.0

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


@dataclass
class Pursuer:
    """Glue Glue Head.

    ``speed`` is set per level at load time; ``home_x/home_y`` is where
    it is put back after tagging the player.
    """
    x: float = 70.0
    y: float = 120.0
    w: float = 34.0
    h: float = 34.0
    speed: float = 0.0        # u/s
    active: bool = False
    angry: bool = False
    home_x: float = 70.0
    home_y: float = 120.0

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)

    def go_home(self) -> None:
        self.x = self.home_x
        self.y = self.home_y


@dataclass
class PointerFollow:
    """Click/touch-to-move target (top-left corner the player heads for)."""
    x: float = 0.0
    y: float = 0.0
    active: bool = False


@dataclass(frozen=True)
class InputState:
    """One frame's worth of sampled input, passed to the movement system.

    ``direction`` is the combined keyboard + pad vector, each axis in
    {-1, 0, 1}.  ``pointer`` is a new click/touch target for this frame
    (virtual coordinates) or ``None``.
    """
    direction: tuple[int, int] = (0, 0)
    pointer: tuple[float, float] | None = None
