"""
core/scene.py — Screen interface

The app keeps a stack of scenes and drives only the top one.  Each
display frame it calls, in order:

    handle_event(event, app)   once per pending pygame event
    update(dt, app)            dt = raw frame time in seconds
    draw(surface, app)         every frame, paused or not

``update`` always runs; deciding whether the game simulation advances
(e.g. only while a level is ACTIVE) is the scene's job.  ``draw``
targets the fixed WORLD_W × WORLD_H virtual surface, never the window.

    class TitleCard(Scene):
        def draw(self, surface, app):
            app.draw_text(surface, "Press Enter", 400, 260)
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Pushed on the stack."""

    def on_exit(self, app: App):
        """Covered by another scene."""

    def handle_event(self, event: pygame.event.Event, app: App):
        """One pygame event; mouse positions are already in canvas units."""

    def update(self, dt: float, app: App):
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
