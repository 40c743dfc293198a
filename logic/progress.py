"""logic/progress.py — Triggers checked against the player each frame.

Order matters and matches the frame pipeline in ``logic.tick``:

    checkpoints → hazards → item → rescue NPC → (pursuer) → goal

Every check uses the player's rectangle *after* this frame's movement.
"""

from __future__ import annotations

from components import (
    UNLOCK_ITEM, UNLOCK_RESCUE, UNLOCK_ALL_RESCUED, UNLOCK_OPEN,
)
from core.collision import box_overlaps_any, clamp_to_world, rects_overlap
from core.events import HazardHit, ItemFound, MemberRescued, GoalBlocked
from core.tuning import get as _tun
from logic.level_flow import complete_level
from logic.state import SimulationState

HAZARD_MESSAGE = "Uh oh — sticky goo!\nBack to the checkpoint!"


def reset_to_checkpoint(state: SimulationState) -> None:
    """Player back to the checkpoint; pursuer back home so it can't re-tag."""
    state.player.respawn()
    state.pointer.active = False
    state.pursuer.go_home()


# ── Checkpoints ─────────────────────────────────────────────────────

def update_checkpoints(state: SimulationState) -> None:
    """Every pad under the player moves the respawn point; last one wins.

    A respawn point that would put the player inside an obstacle is
    refused and the previous checkpoint is kept.
    """
    p = state.player
    ox = float(_tun("checkpoint", "offset_x", 8.0))
    oy = float(_tun("checkpoint", "offset_y", -30.0))
    for cp in state.checkpoints:
        if not rects_overlap(p, cp):
            continue
        cx, cy = clamp_to_world(cp.x + ox, cp.y + oy, p.w, p.h)
        if box_overlaps_any(cx, cy, p.w, p.h, state.obstacles):
            continue
        p.checkpoint_x = cx
        p.checkpoint_y = cy


# ── Hazards ─────────────────────────────────────────────────────────

def update_hazards(state: SimulationState) -> bool:
    """Returns True if a hazard sent the player back this frame."""
    for hz in state.hazards:
        if rects_overlap(state.player, hz):
            reset_to_checkpoint(state)
            state.bus.emit(HazardHit(message=HAZARD_MESSAGE))
            return True
    return False


# ── Item ────────────────────────────────────────────────────────────

def update_item(state: SimulationState) -> bool:
    item = state.item
    if item is None or not rects_overlap(state.player, item):
        return False
    state.item = None
    if item.kind == "flashlight":
        text = f"You found the {item.label}!\nNow go rescue the family!"
    else:
        text = f"You found the {item.label}!"
    state.bus.emit(ItemFound(kind=item.kind, label=item.label, message=text))
    return True


# ── Rescue ──────────────────────────────────────────────────────────

def update_rescue(state: SimulationState) -> bool:
    npc = state.npc
    if npc is None or not npc.key or not rects_overlap(state.player, npc):
        return False
    state.roster.rescue(npc.key)
    state.npc = None
    name = state.roster.name_of(npc.key)
    state.bus.emit(MemberRescued(key=npc.key, name=name,
                                 message=f"You rescued {name}!\nNow go HOME!"))
    return True


# ── Goal ────────────────────────────────────────────────────────────

def unlock_rule(state: SimulationState) -> str:
    """Which condition opens the current level's goal.

    Checked in order: the final level needs every family member, the
    first level needs its item, a level with a rescue NPC needs that
    member, anything else is open.
    """
    level = state.level
    if level is None:
        return UNLOCK_OPEN
    if state.is_final_level:
        return UNLOCK_ALL_RESCUED
    if state.level_index == 0:
        return UNLOCK_ITEM
    if level.rescue_key is not None:
        return UNLOCK_RESCUE
    return UNLOCK_OPEN


def goal_unlocked(state: SimulationState) -> bool:
    rule = unlock_rule(state)
    if rule == UNLOCK_ALL_RESCUED:
        return state.roster.all_rescued()
    if rule == UNLOCK_ITEM:
        return state.item is None
    if rule == UNLOCK_RESCUE:
        return state.roster.is_rescued(state.level.rescue_key)
    return True


def blocked_hint(state: SimulationState) -> str:
    """What the player still has to do before the goal opens."""
    rule = unlock_rule(state)
    if rule == UNLOCK_ALL_RESCUED:
        names = state.roster.names()
        who = ", ".join(names[:-1]) + f", and {names[-1]}" if len(names) > 1 else names[0]
        return f"Rescue {who} first!"
    if rule == UNLOCK_ITEM and state.item is not None:
        return f"Find the {state.item.label} first!"
    if rule == UNLOCK_RESCUE:
        return f"Rescue {state.roster.name_of(state.level.rescue_key)} first!"
    return "Not yet!"


def update_goal(state: SimulationState) -> bool:
    """Returns True if the level was completed this frame."""
    goal = state.goal
    if goal is None or not rects_overlap(state.player, goal):
        return False
    if goal_unlocked(state):
        complete_level(state)
        return True
    state.bus.emit(GoalBlocked(message=blocked_hint(state)))
    return False
