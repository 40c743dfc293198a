"""logic/state.py — The single owned simulation state.

Everything the per-frame pipeline reads or writes lives on one
``SimulationState``.  Systems receive it explicitly; there are no
module-level globals.  Adapters (scene, renderer, tests) may read it
freely but only the pipeline in ``logic.tick`` and the commands in
``logic.level_flow`` mutate it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from components import (
    Rect, Player, Companion, Pursuer, PointerFollow,
    Item, RescueTarget, GoalZone, LevelDefinition, FamilyRoster,
)
from core.events import EventBus


class Phase(Enum):
    IDLE = "idle"            # before the first start
    ACTIVE = "active"        # simulation running
    COMPLETE = "complete"    # goal reached, waiting for advance/retry
    FINISHED = "finished"    # last level advanced past


@dataclass
class SimulationState:
    levels: tuple[LevelDefinition, ...] = ()
    phase: Phase = Phase.IDLE
    level_index: int = 0

    player: Player = field(default_factory=Player)
    companion: Companion = field(default_factory=Companion)
    pursuer: Pursuer = field(default_factory=Pursuer)
    pointer: PointerFollow = field(default_factory=PointerFollow)

    # Per-level layout, replaced wholesale by load_level()
    obstacles: tuple[Rect, ...] = ()
    hazards: tuple[Rect, ...] = ()
    checkpoints: tuple[Rect, ...] = ()
    item: Item | None = None
    npc: RescueTarget | None = None
    goal: GoalZone | None = None

    # Survives level loads; reset only by a fresh start()
    roster: FamilyRoster = field(default_factory=FamilyRoster)

    bus: EventBus = field(default_factory=EventBus)

    # ── convenience ──────────────────────────────────────────────────

    @property
    def level(self) -> LevelDefinition | None:
        if 0 <= self.level_index < len(self.levels):
            return self.levels[self.level_index]
        return None

    @property
    def is_final_level(self) -> bool:
        return self.level_index == len(self.levels) - 1

    @property
    def running(self) -> bool:
        return self.phase is Phase.ACTIVE


def new_state(levels: tuple[LevelDefinition, ...] | None = None) -> SimulationState:
    """Build an IDLE state over *levels* (default: the built-in catalog)."""
    if levels is None:
        from logic.level_loader import load_catalog
        levels = load_catalog()
    return SimulationState(levels=tuple(levels))
