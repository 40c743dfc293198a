"""logic/level_flow.py — Level state machine commands.

    IDLE ──start──▶ ACTIVE ──goal──▶ COMPLETE ──advance──▶ ACTIVE (next level)
                      ▲  │                │
                      └──┴────retry───────┘
    COMPLETE on the last level ──advance──▶ FINISHED ──start──▶ ACTIVE (level 1)

Each command returns True if it changed anything.  A command issued in
the wrong phase is ignored (logged, returns False) — the UI is expected
to gate these, but a stray key press must never corrupt the state.

The ACTIVE → COMPLETE edge is not a command; ``logic.progress``
triggers it through ``complete_level()`` when the goal is reached.
"""

from __future__ import annotations

from core.events import LevelComplete, RunComplete
from data.levels import VICTORY_MESSAGE
from logic.level_loader import load_level
from logic.state import SimulationState, Phase


def _ignored(state: SimulationState, command: str) -> bool:
    print(f"[FLOW] {command} ignored in phase {state.phase.value}")
    return False


def start(state: SimulationState) -> bool:
    """Begin a fresh run from level 1.  Valid from IDLE or FINISHED."""
    if state.phase not in (Phase.IDLE, Phase.FINISHED):
        return _ignored(state, "start")
    state.roster.reset()
    load_level(state, 0)
    state.phase = Phase.ACTIVE
    print("[FLOW] start → level 1")
    state.bus.drain()
    return True


def retry(state: SimulationState) -> bool:
    """Reload the current level.  Valid from ACTIVE or COMPLETE.

    The roster is left alone, so a rescue made before retrying counts.
    """
    if state.phase not in (Phase.ACTIVE, Phase.COMPLETE):
        return _ignored(state, "retry")
    load_level(state, state.level_index)
    state.phase = Phase.ACTIVE
    print(f"[FLOW] retry → level {state.level_index + 1}")
    state.bus.drain()
    return True


def advance(state: SimulationState) -> bool:
    """Go to the next level, or finish the run after the last one."""
    if state.phase is not Phase.COMPLETE:
        return _ignored(state, "advance")
    if state.level_index < len(state.levels) - 1:
        load_level(state, state.level_index + 1)
        state.phase = Phase.ACTIVE
        print(f"[FLOW] advance → level {state.level_index + 1}")
    else:
        state.phase = Phase.FINISHED
        print("[FLOW] run finished")
        state.bus.emit(RunComplete(message=VICTORY_MESSAGE))
    state.bus.drain()
    return True


def complete_level(state: SimulationState) -> None:
    """ACTIVE → COMPLETE.  Called by the goal check only."""
    if state.phase is not Phase.ACTIVE:
        return
    state.phase = Phase.COMPLETE
    state.pointer.active = False
    if state.is_final_level:
        text = "You made it HOME with everyone!\nPress Next (N) to finish!"
    else:
        text = "Nice job!\nYou made it HOME!\nPress Next Level (N)!"
    print(f"[FLOW] level {state.level_index + 1} complete")
    state.bus.emit(LevelComplete(index=state.level_index, message=text))
