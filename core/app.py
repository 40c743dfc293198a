"""
core/app.py — Pygame application shell

Handles the window, the frame loop and the scene stack.
You don't edit this file to build the game.
You write Scenes and push them.

    app = App(title="Family Adventures")
    app.push_scene(GameScene())
    app.run()

The game always renders to a fixed virtual surface of
``WORLD_W × WORLD_H`` canvas units; the window can be resized (or made
fullscreen with F11) and the surface is scaled to fit.  Mouse events
are remapped to virtual coordinates before scenes see them, so gameplay
code only ever deals in canvas units.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.constants import WORLD_W, WORLD_H
from core.tuning import get as _tun


class App:
    def __init__(self, title: str = "Family Adventures",
                 width: int = WORLD_W, height: int = WORLD_H):
        pygame.init()
        self._windowed_size = (width, height)
        # The virtual (design) resolution: all game rendering targets this.
        self._virtual_size = (WORLD_W, WORLD_H)
        self._render_surface = pygame.Surface(self._virtual_size)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fullscreen = False
        self.fps = int(_tun("frame", "fps", 60))
        self.dt = 0.0

        # Scene stack: only the top scene is active
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("sans", 16, bold=True)
        self.font_sm = pygame.font.SysFont("sans", 11, bold=True)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    # -- Coordinate mapping --

    def to_virtual(self, sx: float, sy: float) -> tuple[float, float]:
        """Map a window-space point to virtual-surface coordinates."""
        sw, sh = self.screen.get_size()
        vw, vh = self._virtual_size
        return sx * vw / sw, sy * vh / sh

    def _remap_mouse_event(self, event: pygame.event.Event) -> pygame.event.Event:
        """Return a copy of *event* with .pos mapped to virtual coords."""
        if not hasattr(event, "pos"):
            return event
        vx, vy = self.to_virtual(*event.pos)
        attrs: dict = {}
        for attr in ("button", "buttons", "rel", "touch", "window"):
            if hasattr(event, attr):
                attrs[attr] = getattr(event, attr)
        attrs["pos"] = (int(vx), int(vy))
        return pygame.event.Event(event.type, **attrs)

    # -- Main loop --

    def run(self):
        while self.running:
            # Raw frame time; the simulation clamps it to its max step.
            self.dt = self.clock.tick(self.fps) / 1000.0

            # Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                    self._windowed_size = (event.w, event.h)
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                elif self.scene:
                    if event.type in (pygame.MOUSEBUTTONDOWN,
                                      pygame.MOUSEBUTTONUP,
                                      pygame.MOUSEMOTION):
                        event = self._remap_mouse_event(event)
                    self.scene.handle_event(event, self)

            # Update (scene decides whether the simulation actually runs)
            if self.scene:
                self.scene.update(self.dt, self)

            # Draw every frame, even when the simulation is idle
            if self.scene:
                self.scene.draw(self._render_surface, self)

            pygame.transform.scale(self._render_surface,
                                   self.screen.get_size(), self.screen)
            pygame.display.flip()

        pygame.quit()

    def quit(self):
        self.running = False

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (x, y))

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2):
        """Draw text with a semi-transparent background box."""
        f = font or self.font
        img = f.render(text, True, color)
        w, h = img.get_size()
        bg_surf = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        bg_surf.fill(bg)
        surface.blit(bg_surf, (x - pad, y - pad))
        return surface.blit(img, (x, y))
