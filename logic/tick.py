"""logic/tick.py — Frame pipeline orchestration.

One call to ``step_frame()`` per display frame::

    ran = step_frame(state, app.dt, input_manager.sample())

The pipeline runs only while the level is ACTIVE; in every other phase
the frame is render-only.  The whole pipeline is synchronous — nothing
outside sees a half-updated frame.

``snapshot()`` is the read-only view handed to the render adapter.
"""

from __future__ import annotations
from dataclasses import dataclass

from components import InputState, Rect, Theme
from core.collision import clamp
from core.tuning import get as _tun
from logic.ai.pursuer import update_pursuer
from logic.follower import follow_companion
from logic.movement import move_player, set_pointer_target
from logic.progress import (
    update_checkpoints, update_hazards, update_item, update_rescue, update_goal,
)
from logic.state import SimulationState, Phase


def update(state: SimulationState, controls: InputState, dt: float) -> None:
    """Run every gameplay system once, in order."""
    if controls.pointer is not None:
        set_pointer_target(state, *controls.pointer)

    move_player(state, controls, dt)
    follow_companion(state.companion, state.player, dt)

    update_checkpoints(state)
    update_hazards(state)
    update_item(state)
    update_rescue(state)

    update_pursuer(state, dt)

    update_goal(state)


def step_frame(state: SimulationState, dt: float,
               controls: InputState | None = None) -> bool:
    """Advance one frame.  Returns True if the pipeline ran.

    *dt* is clamped to ``[0, frame.max_step]`` so a stall (window drag,
    breakpoint) can't teleport anything through a wall.
    """
    ran = False
    if state.phase is Phase.ACTIVE:
        dt = clamp(dt, 0.0, float(_tun("frame", "max_step", 0.033)))
        update(state, controls or InputState(), dt)
        ran = True
    state.bus.drain()
    return ran


# ═══════════════════════════════════════════════════════════════════
#  Render snapshot
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Snapshot:
    phase: Phase
    level_index: int
    level_count: int
    title: str
    goal_text: str
    theme: Theme
    player: Rect
    companion: Rect
    pursuer: Rect | None          # None while the pursuer is inactive
    obstacles: tuple[Rect, ...]
    hazards: tuple[Rect, ...]
    checkpoints: tuple[Rect, ...]
    item: Rect | None
    item_kind: str
    item_label: str
    npc: Rect | None
    npc_key: str
    goal: Rect | None
    goal_label: str
    rescued: int
    rescued_total: int
    is_final: bool


def _rect(r) -> Rect | None:
    return None if r is None else Rect(r.x, r.y, r.w, r.h)


def snapshot(state: SimulationState) -> Snapshot:
    level = state.level
    return Snapshot(
        phase=state.phase,
        level_index=state.level_index,
        level_count=len(state.levels),
        title=level.title if level else "",
        goal_text=level.goal_text if level else "",
        theme=level.theme if level else Theme("Plain"),
        player=state.player.rect,
        companion=state.companion.rect,
        pursuer=state.pursuer.rect if state.pursuer.active else None,
        obstacles=tuple(state.obstacles),
        hazards=tuple(state.hazards),
        checkpoints=tuple(state.checkpoints),
        item=_rect(state.item),
        item_kind=state.item.kind if state.item else "",
        item_label=state.item.label if state.item else "",
        npc=_rect(state.npc),
        npc_key=state.npc.key if state.npc else "",
        goal=_rect(state.goal),
        goal_label=state.goal.label if state.goal else "",
        rescued=state.roster.rescued_count,
        rescued_total=state.roster.total,
        is_final=state.is_final_level,
    )
