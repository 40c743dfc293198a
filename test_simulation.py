"""test_simulation.py — Headless checks of the per-frame systems.

Covers movement (normalisation, wall sliding, pointer follow), the
companion, the pursuer, and every trigger in logic.progress, each in a
real catalog level with hand-placed actors.

Run:  python test_simulation.py     (or: pytest test_simulation.py)
"""
from __future__ import annotations
import math, random, sys, traceback

# ── Bootstrap ────────────────────────────────────────────────────────
from core.tuning import load as _load_tuning
_load_tuning()

from components import InputState, Rect
from core.collision import box_overlaps_any, clamp_to_world, rects_overlap
from core.events import NOTIFICATION_EVENTS
from logic.ai.pursuer import update_pursuer, effective_speed, TAG_MESSAGE
from logic.follower import follow_companion
from logic.level_loader import load_level, pursuer_speed_for
from logic.movement import move_player, set_pointer_target
from logic.progress import (
    update_checkpoints, update_goal, HAZARD_MESSAGE,
)
from logic.state import Phase, new_state
from logic.tick import step_frame


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)

def check(cond: bool, label: str, detail: str = ""):
    if cond:
        ok(label)
    else:
        fail(label, detail)
        raise AssertionError(f"{label}: {detail}")

DT = 0.02
EPS = 1e-6


# ── Fixtures ─────────────────────────────────────────────────────────

def _level(index: int):
    """Fresh state sitting ACTIVE on level *index*, plus its message log."""
    state = new_state()
    load_level(state, index)
    state.phase = Phase.ACTIVE
    state.bus.clear()
    messages: list[str] = []
    state.bus.subscribe_many(NOTIFICATION_EVENTS, lambda e: messages.append(e.message))
    return state, messages


def _place(state, x: float, y: float):
    state.player.x = x
    state.player.y = y


# ═══════════════════════════════════════════════════════════════════════
#  1. Collision primitives
# ═══════════════════════════════════════════════════════════════════════

def test_collision_primitives():
    print("\n=== 1. Collision primitives ===")
    a = Rect(0, 0, 10, 10)
    check(not rects_overlap(a, Rect(10, 0, 10, 10)),
          "1a: touching edges do not overlap")
    check(rects_overlap(a, Rect(9.5, 9.5, 10, 10)), "1b: corner overlap detected")
    check(clamp_to_world(-50, -50, 28, 28) == (8, 8), "1c: clamp to top-left margin")
    check(clamp_to_world(5000, 5000, 28, 28) == (960 - 28 - 8, 540 - 28 - 8),
          "1d: clamp to bottom-right margin")
    check(not box_overlaps_any(0, 0, 5, 5, []), "1e: no solids, no overlap")


# ═══════════════════════════════════════════════════════════════════════
#  2. Player movement
# ═══════════════════════════════════════════════════════════════════════

def test_player_movement():
    print("\n=== 2. Player movement ===")

    # 2a: diagonals are normalised
    state, _ = _level(0)
    _place(state, 400, 420)
    move_player(state, InputState(direction=(1, 1)), DT)
    moved = math.hypot(state.player.x - 400, state.player.y - 420)
    check(abs(moved - 220 * DT) < 1e-6, "2a: diagonal step has length speed·dt",
          f"moved {moved:.4f}")

    # 2b: blocked Y, free X: slides along the fence
    state, _ = _level(0)
    _place(state, 300, 371)
    move_player(state, InputState(direction=(1, -1)), DT)
    check(state.player.y == 371, "2b: Y rejected by the fence",
          f"y={state.player.y}")
    check(state.player.x > 300, "2b: X still advances (slide)",
          f"x={state.player.x}")

    # 2c: playfield clamp
    state, _ = _level(0)
    _place(state, 9, 420)
    for _ in range(10):
        move_player(state, InputState(direction=(-1, 0)), DT)
    check(state.player.x == 8, "2c: player stops at the left margin",
          f"x={state.player.x}")

    # 2d: out-of-range direction is clamped per axis
    state, _ = _level(0)
    _place(state, 400, 420)
    move_player(state, InputState(direction=(5, 0)), DT)
    check(abs(state.player.x - (400 + 220 * DT)) < EPS,
          "2d: direction (5, 0) moves like (1, 0)")


# ═══════════════════════════════════════════════════════════════════════
#  3. Pointer follow
# ═══════════════════════════════════════════════════════════════════════

def test_pointer_follow():
    print("\n=== 3. Pointer follow ===")

    state, _ = _level(0)
    set_pointer_target(state, 2000, -50)
    check((state.pointer.x, state.pointer.y) == (960 - 28 - 8, 8),
          "3a: target clamped into the playfield")
    check(state.pointer.active, "3a: follow switched on")

    state, _ = _level(0)
    _place(state, 400, 420)
    set_pointer_target(state, 600, 420)
    move_player(state, InputState(), DT)
    check(abs(state.player.x - (400 + 220 * DT)) < EPS and state.player.y == 420,
          "3b: heads straight for the target at full speed")

    state, _ = _level(0)
    _place(state, 400, 420)
    set_pointer_target(state, 404, 420)
    move_player(state, InputState(), DT)
    check(not state.pointer.active, "3c: within arrive distance → follow off")
    check(state.player.x == 400, "3c: no movement on arrival frame")

    state, _ = _level(0)
    _place(state, 400, 420)
    set_pointer_target(state, 600, 420)
    move_player(state, InputState(direction=(-1, 0)), DT)
    check(state.player.x < 400, "3d: keys override the pointer")


# ═══════════════════════════════════════════════════════════════════════
#  4. Companion
# ═══════════════════════════════════════════════════════════════════════

def test_companion_follow():
    print("\n=== 4. Companion ===")
    state, _ = _level(0)
    follow_companion(state.companion, state.player, DT)
    # target is (70 - 30, 420 + 10) = (40, 430); start (40, 420)
    check(abs(state.companion.x - 40) < EPS, "4a: already on target X")
    check(abs(state.companion.y - (420 + 10 * 4.0 * DT)) < EPS,
          "4b: closes rate·dt of the gap",
          f"y={state.companion.y}")

    for _ in range(400):
        follow_companion(state.companion, state.player, DT)
    check(abs(state.companion.y - 430) < 0.01, "4c: converges on the offset")


# ═══════════════════════════════════════════════════════════════════════
#  5. Pursuer
# ═══════════════════════════════════════════════════════════════════════

def test_pursuer():
    print("\n=== 5. Pursuer ===")

    check(pursuer_speed_for(0) == 0 and pursuer_speed_for(1) == 0,
          "5a: no chase speed on the first two levels")
    check(pursuer_speed_for(2) == 75 and pursuer_speed_for(3) == 95,
          "5b: configured level speeds")
    check(pursuer_speed_for(42) == 95, "5c: past the list → last entry")

    state, _ = _level(3)
    check(effective_speed(state.pursuer) == 115, "5d: angry adds the bonus",
          f"speed={effective_speed(state.pursuer)}")

    state, _ = _level(0)
    before = (state.pursuer.x, state.pursuer.y)
    check(not update_pursuer(state, DT), "5e: inactive pursuer never tags")
    check((state.pursuer.x, state.pursuer.y) == before, "5e: inactive pursuer stays put")

    # 5f: chase in a straight line at base speed
    state, _ = _level(2)
    state.obstacles = ()
    _place(state, 600, 300)
    state.pursuer.x, state.pursuer.y = 100, 297   # centres share y = 314
    update_pursuer(state, 1 / 60)
    check(abs(state.pursuer.x - (100 + 75 / 60)) < EPS and state.pursuer.y == 297,
          "5f: steps toward the player's centre")

    # 5g: soft wall bounce
    state, _ = _level(2)
    state.obstacles = (Rect(135, 280, 20, 80),)
    _place(state, 600, 300)
    state.pursuer.x, state.pursuer.y = 100, 297
    update_pursuer(state, 1 / 60)
    expect = 100 + 75 / 60 - (75 / 60) * 1.2
    check(abs(state.pursuer.x - expect) < EPS, "5g: wall hit undoes 1.2× the step",
          f"x={state.pursuer.x:.4f} expect {expect:.4f}")

    # 5h: slows down when close
    state, _ = _level(2)
    state.obstacles = ()
    _place(state, 200, 300)
    state.pursuer.x, state.pursuer.y = 150, 297    # centre gap 31 < 60
    update_pursuer(state, 1 / 60)
    check(abs(state.pursuer.x - (150 + 75 * 0.45 / 60)) < EPS,
          "5h: near factor applied inside near distance")

    # 5i: tag sends the player to the checkpoint, the pursuer home
    state, messages = _level(2)
    _place(state, 300, 440)
    state.pursuer.x, state.pursuer.y = 305, 440
    step_frame(state, 1 / 60, InputState())
    check((state.player.x, state.player.y) == (70, 420), "5i: player back at checkpoint")
    check((state.pursuer.x, state.pursuer.y) == (70, 120), "5i: pursuer back home")
    check(messages == [TAG_MESSAGE], "5i: tag message shown", f"{messages}")

    # 5j: an angry pursuer on a zero-speed level still stays put
    state, _ = _level(0)
    state.pursuer.active = True
    state.pursuer.angry = True
    _place(state, 600, 300)
    before = (state.pursuer.x, state.pursuer.y)
    check(effective_speed(state.pursuer) == 0.0, "5j: angry bonus not added to speed 0")
    update_pursuer(state, 1 / 60)
    check((state.pursuer.x, state.pursuer.y) == before, "5j: pursuer does not move")


# ═══════════════════════════════════════════════════════════════════════
#  6. Checkpoints, hazards, item, rescue
# ═══════════════════════════════════════════════════════════════════════

def test_triggers():
    print("\n=== 6. Triggers ===")

    state, _ = _level(0)
    _place(state, 330, 425)
    update_checkpoints(state)
    check(state.player.checkpoint == (328, 400), "6a: checkpoint pad sets respawn",
          f"{state.player.checkpoint}")

    state, _ = _level(0)
    state.obstacles = (Rect(320, 395, 30, 20),)
    _place(state, 370, 425)
    update_checkpoints(state)
    check(state.player.checkpoint == (70, 420),
          "6b: respawn inside an obstacle is refused")

    state, messages = _level(1)
    _place(state, 270, 460)
    step_frame(state, DT, InputState())
    check((state.player.x, state.player.y) == (70, 420), "6c: hazard resets the player")
    check(messages == [HAZARD_MESSAGE], "6c: hazard message shown", f"{messages}")

    state, messages = _level(0)
    _place(state, 690, 410)
    step_frame(state, DT, InputState())
    check(state.item is None, "6d: flashlight collected")
    check(messages and "Flashlight" in messages[0], "6d: item message shown")

    state, messages = _level(1)
    _place(state, 745, 265)
    step_frame(state, DT, InputState())
    check(state.roster.is_rescued("tinsley"), "6e: Tinsley rescued")
    check(state.npc is None, "6e: rescue NPC removed")
    check(messages == ["You rescued Tinsley!\nNow go HOME!"], "6e: rescue message",
          f"{messages}")

    # 6f: two hazards under the player at once: one reset, one message
    state, messages = _level(1)
    state.hazards = (Rect(260, 450, 40, 40), Rect(280, 450, 40, 40))
    _place(state, 270, 460)
    step_frame(state, DT, InputState())
    check(state.player.rect == Rect(70, 420, 28, 28) and
          state.player.checkpoint == (70, 420),
          "6f: overlapping hazards still land on the checkpoint")
    check(messages == [HAZARD_MESSAGE], "6f: a single hazard message", f"{messages}")

    # 6g: item and NPC are cleared once; standing there again emits nothing
    state, _ = _level(0)
    found: list = []
    state.bus.subscribe("ItemFound", found.append)
    _place(state, 690, 410)
    step_frame(state, DT, InputState())
    step_frame(state, DT, InputState())
    check(len(found) == 1 and state.item is None, "6g: item collected exactly once",
          f"{len(found)} events")

    state, _ = _level(1)
    rescued: list = []
    state.bus.subscribe("MemberRescued", rescued.append)
    _place(state, 745, 265)
    step_frame(state, DT, InputState())
    step_frame(state, DT, InputState())
    check(len(rescued) == 1 and state.npc is None, "6g: NPC rescued exactly once",
          f"{len(rescued)} events")


# ═══════════════════════════════════════════════════════════════════════
#  7. Goal gating
# ═══════════════════════════════════════════════════════════════════════

def test_goal_gating():
    print("\n=== 7. Goal gating ===")

    state, messages = _level(0)
    _place(state, 870, 420)
    step_frame(state, DT, InputState())
    check(state.phase is Phase.ACTIVE, "7a: locked goal keeps the level running")
    check(messages == ["Find the Flashlight first!"], "7a: item hint", f"{messages}")

    state, messages = _level(0)
    state.item = None
    _place(state, 870, 420)
    step_frame(state, DT, InputState())
    check(state.phase is Phase.COMPLETE, "7b: goal completes once the item is held")
    check(not state.pointer.active, "7b: pointer follow cleared")

    state, messages = _level(1)
    _place(state, 870, 280)
    step_frame(state, DT, InputState())
    check(messages == ["Rescue Tinsley first!"], "7c: rescue hint", f"{messages}")

    state, messages = _level(4)
    state.roster.rescue("mom")
    state.roster.rescue("catalina")
    _place(state, 890, 80)
    step_frame(state, DT, InputState())
    check(state.phase is Phase.ACTIVE, "7d: final goal locked at 2/3")
    check(messages == ["Rescue Mom, Catalina, and Tinsley first!"], "7d: roster hint",
          f"{messages}")

    state.roster.rescue("tinsley")
    check(update_goal(state), "7e: final goal opens at 3/3")
    check(state.phase is Phase.COMPLETE, "7e: level complete")

    # 7f: level 1 start to finish through the pipeline
    state, _ = _level(0)
    _place(state, 690, 410)
    step_frame(state, DT, InputState())
    check(state.item is None, "7f: flashlight picked up on the way")
    for _ in range(120):
        if state.phase is not Phase.ACTIVE:
            break
        step_frame(state, 1 / 60, InputState(direction=(1, 0)))
    check(state.phase is Phase.COMPLETE, "7f: walking into HOME completes level 1",
          f"x={state.player.x:.1f}")

    # 7g: level 2 rescue, then home
    state, _ = _level(1)
    _place(state, 745, 265)
    step_frame(state, DT, InputState())
    check(state.roster.is_rescued("tinsley"), "7g: Tinsley rescued first")
    for _ in range(120):
        if state.phase is not Phase.ACTIVE:
            break
        step_frame(state, 1 / 60, InputState(direction=(1, 0)))
    check(state.phase is Phase.COMPLETE, "7g: walking into HOME completes level 2",
          f"x={state.player.x:.1f}")


# ═══════════════════════════════════════════════════════════════════════
#  8. Random walk: invariants hold on every level
# ═══════════════════════════════════════════════════════════════════════

def test_random_walk_invariants():
    print("\n=== 8. Random walk ===")
    rng = random.Random(1234)
    dirs = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)]
    for index in range(5):
        state, _ = _level(index)
        rescued_before = state.roster.rescued_count
        for frame in range(900):
            if frame % 20 == 0:
                d = rng.choice(dirs)
            controls = InputState(direction=d)
            if frame % 150 == 0:
                controls = InputState(direction=(0, 0),
                                      pointer=(rng.uniform(0, 960), rng.uniform(0, 540)))
            if state.phase is not Phase.ACTIVE:
                break
            step_frame(state, 1 / 60, controls)
            p = state.player
            if box_overlaps_any(p.x, p.y, p.w, p.h, state.obstacles):
                fail(f"8: level {index + 1} player inside obstacle at frame {frame}")
                raise AssertionError("player inside obstacle")
            if not (8 <= p.x <= 960 - p.w - 8 and 8 <= p.y <= 540 - p.h - 8):
                fail(f"8: level {index + 1} player left the playfield")
                raise AssertionError("player out of bounds")
            count = state.roster.rescued_count
            if count < rescued_before:
                fail(f"8: level {index + 1} rescue flag cleared mid-level")
                raise AssertionError("rescue count decreased")
            rescued_before = count
        ok(f"8: level {index + 1} invariants held")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Collision primitives", test_collision_primitives),
        ("Player movement", test_player_movement),
        ("Pointer follow", test_pointer_follow),
        ("Companion", test_companion_follow),
        ("Pursuer", test_pursuer),
        ("Triggers", test_triggers),
        ("Goal gating", test_goal_gating),
        ("Random walk", test_random_walk_invariants),
    ]

    for name, fn in sections:
        try:
            fn()
        except AssertionError:
            pass                      # already reported by check()
        except Exception:
            _failed += 1
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Simulation Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
