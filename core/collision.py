"""core/collision.py — Low-level AABB collision primitives.

These live in ``core/`` (not ``logic/``) because the loader, every
movement system and the render adapter all need them.  Keeping them
here prevents a circular dependency.

All functions are pure; rectangles are anything with ``x, y, w, h``.
"""

from __future__ import annotations
from typing import Iterable

from core.constants import WORLD_W, WORLD_H, EDGE_MARGIN


def clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))


def rects_overlap(a, b) -> bool:
    """Strict overlap test — touching edges do not count."""
    return (a.x < b.x + b.w and a.x + a.w > b.x and
            a.y < b.y + b.h and a.y + a.h > b.y)


def box_overlaps_any(x: float, y: float, w: float, h: float,
                     solids: Iterable) -> bool:
    """Return True if the box (x, y)→(x+w, y+h) overlaps any of *solids*."""
    for s in solids:
        if x < s.x + s.w and x + w > s.x and y < s.y + s.h and y + h > s.y:
            return True
    return False


def center_of(r) -> tuple[float, float]:
    return r.x + r.w / 2, r.y + r.h / 2


def clamp_to_world(x: float, y: float, w: float, h: float) -> tuple[float, float]:
    """Clamp a top-left corner so the box stays inside the playfield.

    Valid range per axis is ``[EDGE_MARGIN, bound - size - EDGE_MARGIN]``.
    """
    return (clamp(x, EDGE_MARGIN, WORLD_W - w - EDGE_MARGIN),
            clamp(y, EDGE_MARGIN, WORLD_H - h - EDGE_MARGIN))
