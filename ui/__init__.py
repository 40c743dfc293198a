"""ui — Drawing helpers for the HUD and message panel.

The game has no modal windows; every player-facing message is shown in
a single panel fed by the simulation's notification events.
"""

from ui.helpers import (
    draw_overlay, fill_alpha, draw_message_panel, draw_hud_bar, draw_key_hints,
)

__all__ = [
    "draw_overlay", "fill_alpha", "draw_message_panel", "draw_hud_bar",
    "draw_key_hints",
]
