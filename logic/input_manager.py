"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and the simulation.  The scene feeds in
raw events; the manager maps them to *intents*.  Once per frame the
scene calls ``sample()`` and hands the resulting immutable
``InputState`` to the frame pipeline — the simulation never sees a
live key set.

Usage (in game_scene):

    self.input = InputManager()
    # each frame:
    for event in events:
        self.input.feed(event)
    self.input.end_frame()          # captures held-key state

    if self.input.just("advance"):  # discrete press
        ...
    controls = self.input.sample()  # → InputState(direction, pointer)
    self.input.begin_frame()
"""

from __future__ import annotations
import pygame

from components import InputState
from core.constants import WORLD_W, WORLD_H


# ── Intent names ────────────────────────────────────────────────────
# Held:     move_up  move_down  move_left  move_right
# Pressed:  start  retry  advance  reload_tuning  quit


# ── Default key bindings ────────────────────────────────────────────

_BINDS: dict[str, list[int]] = {
    # Movement  (held: continuous)
    "move_up":      [pygame.K_w, pygame.K_UP],
    "move_down":    [pygame.K_s, pygame.K_DOWN],
    "move_left":    [pygame.K_a, pygame.K_LEFT],
    "move_right":   [pygame.K_d, pygame.K_RIGHT],
    # Commands  (press: discrete)
    "start":        [pygame.K_RETURN, pygame.K_KP_ENTER],
    "retry":        [pygame.K_r],
    "advance":      [pygame.K_n, pygame.K_SPACE],
    "reload_tuning": [pygame.K_F5],
    "quit":         [pygame.K_ESCAPE],
}

_HELD_INTENTS = ("move_up", "move_down", "move_left", "move_right")


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Maps pygame events to intents plus a pointer target.

    Call ``begin_frame()`` after the frame has been sampled,
    ``feed(event)`` for each pygame event,
    ``end_frame()`` after all events.

    Then use ``just(intent)`` for discrete presses, ``held(intent)``
    for continuous holds and ``sample()`` for the simulation input.
    """

    def __init__(self):
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Intents currently held (key is down right now)
        self._held: set[str] = set()
        # New click/touch target this frame (virtual coords) or None
        self._pointer: tuple[float, float] | None = None
        # True while the mouse button / finger that set the target is down
        self._dragging = False

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call once the frame's input has been consumed."""
        self._pressed.clear()
        self._pointer = None

    def feed(self, event: pygame.event.Event):
        """Feed a raw pygame event.  Maps it to intents / pointer."""
        if event.type == pygame.KEYDOWN:
            for intent, keys in _BINDS.items():
                if event.key in keys:
                    self._pressed.add(intent)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._dragging = True
            self._pointer = (float(event.pos[0]), float(event.pos[1]))

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._dragging = False

        elif event.type == pygame.MOUSEMOTION and self._dragging:
            self._pointer = (float(event.pos[0]), float(event.pos[1]))

        # Touch: finger coords are normalised 0..1
        elif event.type == pygame.FINGERDOWN:
            self._dragging = True
            self._pointer = (event.x * WORLD_W, event.y * WORLD_H)

        elif event.type == pygame.FINGERMOTION and self._dragging:
            self._pointer = (event.x * WORLD_W, event.y * WORLD_H)

        elif event.type == pygame.FINGERUP:
            self._dragging = False

    def end_frame(self):
        """Snapshot held-key state for continuous intents (movement)."""
        self._held.clear()
        keys = pygame.key.get_pressed()
        for intent in _HELD_INTENTS:
            if any(keys[k] for k in _BINDS[intent]):
                self._held.add(intent)

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame (rising edge)."""
        return intent in self._pressed

    def held(self, intent: str) -> bool:
        """True if the intent is continuously held down."""
        return intent in self._held

    def direction(self) -> tuple[int, int]:
        """Discrete (dx, dy) from held keys — each axis in {-1, 0, 1}.

        Not normalised; the movement system does that after folding in
        the pointer.
        """
        dx = int(self.held("move_right")) - int(self.held("move_left"))
        dy = int(self.held("move_down")) - int(self.held("move_up"))
        return dx, dy

    def sample(self) -> InputState:
        """This frame's input as an immutable value."""
        return InputState(direction=self.direction(), pointer=self._pointer)
