"""logic/movement.py — Player movement system.

Turns one frame of input into the player's next position:

1. combine keyboard / pad intent into a discrete vector
2. if there is none and pointer-follow is on, head for the pointer
   target (and switch follow off once within ``arrive_distance``)
3. normalise, so diagonals are no faster than axial moves
4. step by ``speed * dt`` and clamp to the playfield
5. resolve against obstacles one axis at a time — X first, then Y from
   the already-committed X — which lets the player slide along walls

Never fails; worst case the position is unchanged.
"""

from __future__ import annotations
import math

from components import InputState, Player
from core.collision import box_overlaps_any, clamp_to_world
from core.tuning import get as _tun
from logic.state import SimulationState


def set_pointer_target(state: SimulationState, x: float, y: float) -> None:
    """Start (or retarget) click/touch-to-move.

    The target is the top-left corner the player should end up at,
    clamped so the player would still be inside the playfield.
    """
    p = state.player
    tx, ty = clamp_to_world(x, y, p.w, p.h)
    state.pointer.x = tx
    state.pointer.y = ty
    state.pointer.active = True


def intent_vector(state: SimulationState, controls: InputState) -> tuple[float, float]:
    """Steps 1–3: the unit (or zero) vector the player wants to move along."""
    dx = float(max(-1, min(1, controls.direction[0])))
    dy = float(max(-1, min(1, controls.direction[1])))

    if dx == 0.0 and dy == 0.0 and state.pointer.active:
        p = state.player
        ptr = state.pointer
        # Centre-to-centre; pointer target is a top-left corner
        to_x = (ptr.x + p.w / 2) - (p.x + p.w / 2)
        to_y = (ptr.y + p.h / 2) - (p.y + p.h / 2)
        d = math.hypot(to_x, to_y)
        if d < float(_tun("pointer", "arrive_distance", 10.0)):
            ptr.active = False
            return 0.0, 0.0
        dx = to_x / d
        dy = to_y / d

    mag = math.hypot(dx, dy)
    if mag == 0.0:
        return 0.0, 0.0
    return dx / mag, dy / mag


def resolve_axis_separated(x: float, y: float, nx: float, ny: float,
                           w: float, h: float, solids) -> tuple[float, float]:
    """Move (x, y) toward (nx, ny) without entering any of *solids*.

    X is tried with the old Y; Y is then tried with whichever X was
    committed.  Each axis is accepted or rejected as a whole.
    """
    if not box_overlaps_any(nx, y, w, h, solids):
        x = nx
    if not box_overlaps_any(x, ny, w, h, solids):
        y = ny
    return x, y


def move_player(state: SimulationState, controls: InputState, dt: float) -> None:
    p: Player = state.player
    ux, uy = intent_vector(state, controls)

    nx = p.x + ux * p.speed * dt
    ny = p.y + uy * p.speed * dt
    nx, ny = clamp_to_world(nx, ny, p.w, p.h)

    p.x, p.y = resolve_axis_separated(p.x, p.y, nx, ny, p.w, p.h, state.obstacles)
