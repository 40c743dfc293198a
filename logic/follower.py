"""logic/follower.py — Dad trails behind the player.

Single-pole lag toward a fixed offset from the player: each second the
companion closes ``follow_rate`` of the remaining gap (scaled by dt).
No collision and no bounds clamping — purely cosmetic.
"""

from __future__ import annotations

from components import Companion, Player
from core.tuning import get as _tun


def follow_companion(companion: Companion, player: Player, dt: float) -> None:
    tx = player.x + float(_tun("companion", "offset_x", -30.0))
    ty = player.y + float(_tun("companion", "offset_y", 10.0))
    rate = float(_tun("companion", "follow_rate", 4.0))
    companion.x += (tx - companion.x) * rate * dt
    companion.y += (ty - companion.y) * rate * dt
