"""components — Plain dataclass records, organised by domain.

Submodules
----------
spatial    Rect, Player, Companion, Pursuer, PointerFollow, InputState
level      Item, RescueTarget, GoalZone, Theme, LevelDefinition
roster     FamilyMember, FamilyRoster

All public names are re-exported here so code can simply do
``from components import Player``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import (
    Rect, Player, Companion, Pursuer, PointerFollow, InputState,
)

# ── Level ────────────────────────────────────────────────────────────
from components.level import (
    Item, RescueTarget, GoalZone, Theme, LevelDefinition,
    UNLOCK_ITEM, UNLOCK_RESCUE, UNLOCK_ALL_RESCUED, UNLOCK_OPEN,
)

# ── Roster ───────────────────────────────────────────────────────────
from components.roster import FamilyMember, FamilyRoster

__all__ = [
    # spatial
    "Rect", "Player", "Companion", "Pursuer", "PointerFollow", "InputState",
    # level
    "Item", "RescueTarget", "GoalZone", "Theme", "LevelDefinition",
    "UNLOCK_ITEM", "UNLOCK_RESCUE", "UNLOCK_ALL_RESCUED", "UNLOCK_OPEN",
    # roster
    "FamilyMember", "FamilyRoster",
]
