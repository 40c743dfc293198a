"""core/events.py — Lightweight event bus.

Decouples the simulation (which *signals* that something happened)
from the adapters that *react* to it — mostly the message panel.  The
bus is owned by the ``SimulationState``::

    from core.events import EventBus, HazardHit
    state.bus.emit(HazardHit(message="Uh oh!"))

Consumers subscribe with a callable::

    bus.subscribe("HazardHit", my_handler)

And the frame driver drains once per frame::

    bus.drain()          # calls all handlers for pending events

Design rules:
  - Events are plain dataclasses — no behaviour.
  - Every notification carries a ready-to-show ``message``.
  - ``emit()`` is O(1) (just appends).
  - ``drain()`` processes all queued events in FIFO order.
  - Handlers may emit new events; those are processed in the same drain.
"""

from __future__ import annotations
import traceback
from dataclasses import dataclass
from typing import Any, Callable
from collections import defaultdict


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass
class LevelLoaded:
    """A level's layout was (re)initialised."""
    index: int = 0
    title: str = ""
    message: str = ""


@dataclass
class PlayerTagged:
    """The pursuer touched the player; player is back at the checkpoint."""
    message: str = ""


@dataclass
class HazardHit:
    """The player stepped in a hazard; player is back at the checkpoint."""
    message: str = ""


@dataclass
class ItemFound:
    kind: str = ""
    label: str = ""
    message: str = ""


@dataclass
class MemberRescued:
    key: str = ""
    name: str = ""
    message: str = ""


@dataclass
class GoalBlocked:
    """Player is standing in the goal zone but the level is still locked."""
    message: str = ""


@dataclass
class LevelComplete:
    index: int = 0
    message: str = ""


@dataclass
class RunComplete:
    """The last level was advanced past — the whole run is won."""
    message: str = ""


# Class names of every event that carries a player-facing message.
NOTIFICATION_EVENTS = (
    "LevelLoaded", "PlayerTagged", "HazardHit", "ItemFound",
    "MemberRescued", "GoalBlocked", "LevelComplete", "RunComplete",
)


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event bus owned by the simulation state."""

    def __init__(self):
        self._queue: list[Any] = []
        self._subs: dict[str, list[Callable]] = defaultdict(list)

    # ── Public API ───────────────────────────────────────────────────

    def emit(self, event) -> None:
        """Queue an event for processing on next ``drain()``."""
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* to receive events of *event_type*.

        *event_type* is the class name, e.g. ``"HazardHit"``.
        """
        self._subs[event_type].append(handler)

    def subscribe_many(self, event_types, handler: Callable) -> None:
        for name in event_types:
            self.subscribe(name, handler)

    def drain(self) -> int:
        """Process all queued events.  Returns number processed.

        Handlers may emit new events — those are processed in the
        same drain pass (breadth-first).
        """
        processed = 0
        safety = 1000  # prevent infinite loops
        while self._queue and safety > 0:
            batch = self._queue[:]
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                for handler in self._subs.get(name, []):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            processed += len(batch)
            safety -= 1
        return processed

    def clear(self) -> None:
        """Discard all pending events."""
        self._queue.clear()

    def pending_count(self) -> int:
        """Number of events waiting to be drained."""
        return len(self._queue)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, subs={len(self._subs)})"
