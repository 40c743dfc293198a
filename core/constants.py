"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.

Unit System
-----------
All gameplay distances are measured in **canvas units**, where:

    1 unit = 1 pixel of the virtual (design) surface

Standard units used throughout the codebase:

    Distance / position     u       (canvas units, origin top-left, y down)
    Speed                   u/s     (units per second)
    Time                    s       (seconds)
    Counts                  —       (unitless)

The window may be resized; ``core.app`` scales the fixed virtual surface
to fit, so gameplay code never sees real screen pixels.

Tunable gameplay numbers (speeds, offsets, follow rates) live in
``data/tuning.toml`` instead — see ``core.tuning``.  Only values that
must never change at runtime belong here.
"""

# ── World bounds ────────────────────────────────────────────────────
WORLD_W = 960
WORLD_H = 540

# Entities are kept this far inside every edge.
EDGE_MARGIN = 8

# ── Palette ─────────────────────────────────────────────────────────
PLAYER_COLOR = (255, 210, 79)       # Michael
COMPANION_COLOR = (79, 209, 255)    # Dad
PURSUER_COLOR = (140, 255, 180)     # goo blob
HAZARD_FILL = (170, 255, 170, 90)
HAZARD_EDGE = (60, 255, 120, 140)
OBSTACLE_FILL = (255, 255, 255, 26)
CHECKPOINT_FILL = (255, 255, 255, 20)
CHECKPOINT_EDGE = (255, 255, 255, 64)
GOAL_FILL = (255, 255, 255, 31)
NPC_FILL = (255, 255, 255, 46)
LABEL_BG = (0, 0, 0, 140)

# ── Assets ──────────────────────────────────────────────────────────
ASSET_DIR = "assets"

# sprite key → file name inside ASSET_DIR (case sensitive)
SPRITE_FILES = {
    "michael": "michael.png",
    "dad": "dad.png",
    "mom": "mom.png",
    "catalina": "catalina.png",
    "tinsley": "tinsley.png",
    "flashlight": "flashlight.png",
    "home": "home.png",
    "monster": "gluegluehead.png",
}
