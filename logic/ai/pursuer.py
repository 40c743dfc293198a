"""logic/ai/pursuer.py — Glue Glue Head's chase brain.

Kid-friendly chaser:
  - steers straight at the player's centre
  - slows to ``near_factor`` when close, so a near miss is escapable
  - walls are *soft*: if a step ends inside an obstacle, the step is
    undone by ``bounce_factor`` (slightly more than it moved).  Thin
    walls can still be clipped through.
  - touching the player sends the player back to their checkpoint and
    the pursuer back to its start spot

Speed is the level's configured base (0 on the first two levels), plus
``angry_bonus`` when the level makes it angry.  A zero base stays zero,
angry or not.
"""

from __future__ import annotations

from components import Pursuer
from core.collision import (
    box_overlaps_any, center_of, clamp_to_world, rects_overlap,
)
from core.events import PlayerTagged
from core.tuning import get as _tun
from logic.ai.steering import seek, arrive_scale
from logic.progress import reset_to_checkpoint
from logic.state import SimulationState

TAG_MESSAGE = "Glue Glue Head got you!\nPop! Back to your checkpoint 😄"


def effective_speed(pursuer: Pursuer) -> float:
    """Base speed plus the angry bonus.  A level with no base speed stays put."""
    speed = pursuer.speed
    if speed <= 0.0:
        return 0.0
    if pursuer.angry:
        speed += float(_tun("pursuer", "angry_bonus", 20.0))
    return speed


def update_pursuer(state: SimulationState, dt: float) -> bool:
    """Advance the pursuer one frame.  Returns True if it tagged the player."""
    m = state.pursuer
    if not m.active:
        return False

    p = state.player
    px, py = center_of(p)
    mx, my = center_of(m)
    vx, vy, d = seek(mx, my, px, py, effective_speed(m))
    scale = arrive_scale(d,
                         float(_tun("pursuer", "near_distance", 60.0)),
                         float(_tun("pursuer", "near_factor", 0.45)))
    step_x = vx * scale * dt
    step_y = vy * scale * dt

    m.x, m.y = clamp_to_world(m.x + step_x, m.y + step_y, m.w, m.h)

    if box_overlaps_any(m.x, m.y, m.w, m.h, state.obstacles):
        bounce = float(_tun("pursuer", "bounce_factor", 1.2))
        m.x, m.y = clamp_to_world(m.x - step_x * bounce,
                                  m.y - step_y * bounce, m.w, m.h)

    if rects_overlap(p, m):
        reset_to_checkpoint(state)
        state.bus.emit(PlayerTagged(message=TAG_MESSAGE))
        return True
    return False
