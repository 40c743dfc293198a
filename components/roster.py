"""components.roster — Who has been rescued this run."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class FamilyMember:
    name: str
    rescued: bool = False


def _default_members() -> dict[str, FamilyMember]:
    return {
        "mom": FamilyMember("Mom"),
        "catalina": FamilyMember("Catalina"),
        "tinsley": FamilyMember("Tinsley"),
    }


@dataclass
class FamilyRoster:
    """rescue-key → FamilyMember.

    Rescue flags only ever go False → True.  The one exception is
    ``reset()``, which is called when a fresh run starts at level 1.
    """
    members: dict[str, FamilyMember] = field(default_factory=_default_members)

    def __contains__(self, key: str) -> bool:
        return key in self.members

    def name_of(self, key: str) -> str:
        m = self.members.get(key)
        return m.name if m else key

    def is_rescued(self, key: str) -> bool:
        m = self.members.get(key)
        return bool(m and m.rescued)

    def rescue(self, key: str) -> bool:
        """Mark *key* rescued.  Returns True only on the first rescue."""
        m = self.members.get(key)
        if m is None or m.rescued:
            return False
        m.rescued = True
        return True

    @property
    def rescued_count(self) -> int:
        return sum(1 for m in self.members.values() if m.rescued)

    @property
    def total(self) -> int:
        return len(self.members)

    def all_rescued(self) -> bool:
        return self.rescued_count == self.total

    def reset(self) -> None:
        for m in self.members.values():
            m.rescued = False

    def names(self) -> list[str]:
        return [m.name for m in self.members.values()]
