"""
logic/level_loader.py — Data-driven level loader.

Two steps, kept separate so the catalog can be validated without a
running game:

1. ``load_catalog()`` turns the plain-dict tables in ``data/levels.py``
   into immutable ``LevelDefinition`` records (done once).
2. ``load_level(state, index)`` copies one definition into the mutable
   ``SimulationState`` and resets every actor — nothing from the
   previous level survives except the family roster.

Malformed catalog data raises ``ValueError``; that is a content bug,
not something gameplay can recover from.
"""

from __future__ import annotations

from components import (
    Rect, Item, RescueTarget, GoalZone, Theme, LevelDefinition,
    Player, Companion, Pursuer, PointerFollow,
)
from core.events import LevelLoaded
from core.tuning import get as _tun
from logic.state import SimulationState


# ═══════════════════════════════════════════════════════════════════════════
#  CATALOG PARSING
# ═══════════════════════════════════════════════════════════════════════════

def _rects(raw: list, what: str, title: str) -> tuple[Rect, ...]:
    out = []
    for r in raw:
        if len(r) != 4:
            raise ValueError(f"{title}: {what} entry {r!r} is not (x, y, w, h)")
        out.append(Rect(*(float(v) for v in r)))
    return tuple(out)


def build_level(raw: dict, theme: dict | None = None) -> LevelDefinition:
    """Parse one catalog entry into a ``LevelDefinition``."""
    title = raw.get("title", "Unnamed Level")

    item = None
    if raw.get("item"):
        d = raw["item"]
        item = Item(float(d["x"]), float(d["y"]), float(d["w"]), float(d["h"]),
                    kind=d.get("kind", "item"), label=d.get("label", "Item"))

    npc = None
    if raw.get("npc"):
        d = raw["npc"]
        if not d.get("key"):
            raise ValueError(f"{title}: rescue NPC has no key")
        npc = RescueTarget(float(d["x"]), float(d["y"]),
                           float(d["w"]), float(d["h"]), key=d["key"])

    goal = None
    if raw.get("goal"):
        d = raw["goal"]
        goal = GoalZone(float(d["x"]), float(d["y"]), float(d["w"]), float(d["h"]),
                        label=d.get("label", "HOME"))

    pursuer = raw.get("pursuer", {})
    theme = theme or {}
    return LevelDefinition(
        title=title,
        goal_text=raw.get("goal_text", ""),
        intro=raw.get("intro", ""),
        pursuer_active=bool(pursuer.get("active", False)),
        pursuer_angry=bool(pursuer.get("angry", False)),
        checkpoints=_rects(raw.get("checkpoints", []), "checkpoint", title),
        obstacles=_rects(raw.get("obstacles", []), "obstacle", title),
        hazards=_rects(raw.get("hazards", []), "hazard", title),
        item=item,
        npc=npc,
        goal=goal,
        theme=Theme(theme.get("name", "Plain"),
                    tuple(theme.get("bg", (0, 0, 0))),
                    tuple(theme.get("accent", (255, 255, 255)))),
    )


def load_catalog(levels: list[dict] | None = None,
                 themes: list[dict] | None = None) -> tuple[LevelDefinition, ...]:
    """Build every level in play order (defaults: ``data.levels``)."""
    if levels is None or themes is None:
        from data.levels import LEVELS, THEMES
        levels = LEVELS if levels is None else levels
        themes = THEMES if themes is None else themes
    out = []
    for i, raw in enumerate(levels):
        theme = themes[i] if i < len(themes) else None
        out.append(build_level(raw, theme))
    return tuple(out)


# ═══════════════════════════════════════════════════════════════════════════
#  LOADING INTO THE SIMULATION
# ═══════════════════════════════════════════════════════════════════════════

def pursuer_speed_for(index: int) -> float:
    """Base pursuer speed configured for level *index*.

    The first two levels are always 0 — the pursuer may be drawn but
    never moves there.  Indices past the tuning list reuse its last
    entry; an empty list falls back to ``base_speed``.
    """
    if index <= 1:
        return 0.0
    speeds = _tun("pursuer", "level_speeds", [0.0, 0.0, 75.0, 95.0, 95.0])
    if not speeds:
        return float(_tun("pursuer", "base_speed", 85.0))
    return float(speeds[min(index, len(speeds) - 1)])


def _fresh_actors(state: SimulationState, index: int, level: LevelDefinition) -> None:
    px = float(_tun("player", "x", 70.0))
    py = float(_tun("player", "y", 420.0))
    state.player = Player(
        x=px, y=py,
        w=float(_tun("player", "w", 28.0)),
        h=float(_tun("player", "h", 28.0)),
        speed=float(_tun("player", "speed", 220.0)),
        checkpoint_x=px, checkpoint_y=py,
    )
    state.companion = Companion(
        x=float(_tun("companion", "x", 40.0)),
        y=float(_tun("companion", "y", 420.0)),
        w=float(_tun("companion", "w", 28.0)),
        h=float(_tun("companion", "h", 28.0)),
    )
    hx = float(_tun("pursuer", "x", 70.0))
    hy = float(_tun("pursuer", "y", 120.0))
    state.pursuer = Pursuer(
        x=hx, y=hy,
        w=float(_tun("pursuer", "w", 34.0)),
        h=float(_tun("pursuer", "h", 34.0)),
        speed=pursuer_speed_for(index),
        active=level.pursuer_active,
        angry=level.pursuer_angry,
        home_x=hx, home_y=hy,
    )
    state.pointer = PointerFollow()


def load_level(state: SimulationState, index: int) -> LevelDefinition:
    """(Re)initialise every per-level entity for level *index*.

    Does not touch ``state.phase`` or the roster — callers in
    ``logic.level_flow`` decide those.
    """
    if not 0 <= index < len(state.levels):
        raise ValueError(f"level index {index} out of range "
                         f"(catalog has {len(state.levels)} levels)")
    level = state.levels[index]
    if level.rescue_key is not None and level.rescue_key not in state.roster:
        raise ValueError(f"{level.title}: rescue key {level.rescue_key!r} "
                         f"is not in the family roster")

    state.level_index = index
    state.obstacles = level.obstacles
    state.hazards = level.hazards
    state.checkpoints = level.checkpoints
    state.item = level.item
    state.npc = level.npc
    state.goal = level.goal
    _fresh_actors(state, index, level)

    print(f"[LEVEL] Loaded {index + 1}/{len(state.levels)} '{level.title}' "
          f"(obstacles={len(level.obstacles)} hazards={len(level.hazards)} "
          f"pursuer={'on' if state.pursuer.active else 'off'})")
    state.bus.emit(LevelLoaded(index=index, title=level.title, message=level.intro))
    return level
