"""components.level — Per-level pickups, zones and layout records."""

from __future__ import annotations
from dataclasses import dataclass, field

from components.spatial import Rect

# Goal unlock rules, derived from a level's place in the catalog by
# logic.progress.unlock_rule()
UNLOCK_ITEM = "item"                # the level's item has been collected
UNLOCK_RESCUE = "rescue"            # the level's rescue key is rescued
UNLOCK_ALL_RESCUED = "all_rescued"  # every roster member is rescued
UNLOCK_OPEN = "open"                # always unlocked


@dataclass(frozen=True)
class Item:
    x: float
    y: float
    w: float
    h: float
    kind: str = "flashlight"
    label: str = "Flashlight"


@dataclass(frozen=True)
class RescueTarget:
    """A family member waiting on the map; ``key`` indexes the roster."""
    x: float
    y: float
    w: float
    h: float
    key: str = ""


@dataclass(frozen=True)
class GoalZone:
    x: float
    y: float
    w: float
    h: float
    label: str = "HOME"


@dataclass(frozen=True)
class Theme:
    name: str
    bg: tuple = (0, 0, 0)
    accent: tuple = (255, 255, 255)


@dataclass(frozen=True)
class LevelDefinition:
    """Immutable description of one level, built from the catalog table.

    Loading a level copies these into the mutable SimulationState; the
    definition itself is never touched during play.
    """
    title: str
    goal_text: str
    intro: str = ""
    pursuer_active: bool = False
    pursuer_angry: bool = False
    checkpoints: tuple[Rect, ...] = ()
    obstacles: tuple[Rect, ...] = ()
    hazards: tuple[Rect, ...] = ()
    item: Item | None = None
    npc: RescueTarget | None = None
    goal: GoalZone | None = None
    theme: Theme = field(default_factory=lambda: Theme("Plain"))

    @property
    def rescue_key(self) -> str | None:
        return self.npc.key if self.npc is not None else None
