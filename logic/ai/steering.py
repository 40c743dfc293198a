"""logic/ai/steering.py — AI movement helpers.

Direct steering only: point at the target and go.  No path search —
walls are handled by the caller (see ``logic.ai.pursuer``).
"""

from __future__ import annotations
import math


def seek(ax: float, ay: float, tx: float, ty: float,
         speed: float) -> tuple[float, float, float]:
    """Velocity that moves (ax, ay) directly toward (tx, ty).

    Returns ``(vx, vy, dist)``.  A zero distance is treated as 1 so the
    result is always finite (and zero, since the offset is zero).
    """
    dx = tx - ax
    dy = ty - ay
    d = math.hypot(dx, dy) or 1.0
    return (dx / d) * speed, (dy / d) * speed, d


def arrive_scale(dist: float, near_distance: float, near_factor: float) -> float:
    """Speed multiplier that eases off inside *near_distance*."""
    return near_factor if dist < near_distance else 1.0
