"""
scenes/game_scene.py — The one gameplay screen.

Wires the adapters around the simulation:

  input    pygame events → InputManager → InputState each frame
  commands Enter / R / N → level_flow.start / retry / advance
  messages notification events → the message panel
  tick     logic.tick.step_frame (render-only unless ACTIVE)
  render   logic.tick.snapshot → scenes.world_draw
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.assets import SpriteBank
from core.events import NOTIFICATION_EVENTS
from core import tuning as tuning_mod
from data.levels import TITLE_MESSAGE
from logic import level_flow
from logic.input_manager import InputManager
from logic.state import SimulationState, Phase, new_state
from logic.tick import step_frame, snapshot
from scenes.world_draw import draw_world
from ui.helpers import draw_hud_bar, draw_key_hints, draw_message_panel, draw_overlay


_HINTS = {
    Phase.IDLE: ["Enter: Start"],
    Phase.ACTIVE: ["WASD / arrows / click to move", "R: Retry"],
    Phase.COMPLETE: ["N: Next Level", "R: Retry"],
    Phase.FINISHED: ["Enter: Play again"],
}


class GameScene(Scene):
    def __init__(self, state: SimulationState | None = None,
                 sprites: SpriteBank | None = None):
        self.state = state or new_state()
        self.sprites = sprites or SpriteBank()
        self.input = InputManager()
        self.message = TITLE_MESSAGE

        self.state.bus.subscribe_many(NOTIFICATION_EVENTS, self._on_notification)

    def _on_notification(self, event) -> None:
        self.message = event.message

    def on_enter(self, app: App):
        failed = self.sprites.failure_message()
        if failed:
            self.message = failed + "\n\n" + TITLE_MESSAGE

    # ── event handler ────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    # ── update ───────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        self.input.end_frame()

        if self.input.just("quit"):
            app.quit()
        if self.input.just("reload_tuning") and not tuning_mod.reload():
            self.message = "data/tuning.toml has an error.\nKept the old numbers."
        if self.input.just("start"):
            level_flow.start(self.state)
        if self.input.just("retry"):
            level_flow.retry(self.state)
        if self.input.just("advance"):
            level_flow.advance(self.state)

        step_frame(self.state, dt, self.input.sample())
        self.input.begin_frame()

    # ── draw ─────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        snap = snapshot(self.state)
        draw_world(surface, app, snap, self.sprites)
        if snap.phase in (Phase.IDLE, Phase.FINISHED):
            draw_overlay(surface, 120)

        if snap.phase is Phase.IDLE:
            left = "Dad and Michael's Family Adventures"
        else:
            left = f"{snap.title}  ·  {snap.goal_text}"
        right = f"Rescued: {snap.rescued}/{snap.rescued_total}"
        draw_hud_bar(surface, app, left, right, snap.theme.accent)
        draw_key_hints(surface, app, _HINTS[snap.phase])

        draw_message_panel(surface, app, self.message, accent=snap.theme.accent)
