"""ui.helpers — Shared drawing utilities for panels and the HUD."""

from __future__ import annotations
import pygame


def draw_overlay(surface: pygame.Surface, alpha: int = 160) -> None:
    """Full-screen semi-transparent dark overlay."""
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, (0, 0))


def fill_alpha(surface: pygame.Surface, rect, rgba: tuple,
               radius: int = 0, width: int = 0) -> None:
    """Draw a (possibly translucent, possibly rounded) rectangle.

    ``pygame.draw`` ignores alpha on opaque targets, so translucent
    shapes go through a temporary SRCALPHA surface.
    """
    r = pygame.Rect(rect)
    if len(rgba) < 4 or rgba[3] >= 255:
        pygame.draw.rect(surface, rgba[:3], r, width, border_radius=radius)
        return
    tmp = pygame.Surface(r.size, pygame.SRCALPHA)
    pygame.draw.rect(tmp, rgba, tmp.get_rect(), width, border_radius=radius)
    surface.blit(tmp, r.topleft)


# ── message panel ──────────────────────────────────────────────────

LINE_H = 20  # pixel height of one message line


def draw_message_panel(
    surface: pygame.Surface, app,
    text: str,
    *,
    accent: tuple = (255, 255, 255),
    width: int = 520,
) -> pygame.Rect | None:
    """Centre a multi-line message box near the bottom of the screen.

    Returns the panel ``Rect`` (``None`` for empty text).
    """
    if not text:
        return None
    lines = text.split("\n")
    sw, sh = surface.get_size()
    h = len(lines) * LINE_H + 16
    x = (sw - width) // 2
    y = sh - h - 14
    panel = pygame.Rect(x, y, width, h)
    fill_alpha(surface, panel, (10, 10, 20, 200), radius=10)
    pygame.draw.rect(surface, accent, panel, 2, border_radius=10)
    for i, line in enumerate(lines):
        app.draw_text(surface, line, x + 14, y + 8 + i * LINE_H,
                      (240, 240, 240), font=app.font)
    return panel


def draw_hud_bar(
    surface: pygame.Surface, app,
    left: str, right: str,
    accent: tuple,
) -> None:
    """44 px title stripe with level text on the left, status on the right."""
    sw, _ = surface.get_size()
    fill_alpha(surface, (0, 0, 0, sw, 44), (255, 255, 255, 13))
    app.draw_text(surface, left, 16, 12, accent, font=app.font)
    img = app.font_sm.render(right, True, (230, 230, 230))
    surface.blit(img, (sw - img.get_width() - 16, 16))


def draw_key_hints(surface: pygame.Surface, app, hints: list[str]) -> None:
    """Small command hints along the top-right under the HUD bar."""
    sw, _ = surface.get_size()
    y = 50
    for hint in hints:
        img = app.font_sm.render(hint, True, (200, 200, 200))
        surface.blit(img, (sw - img.get_width() - 16, y))
        y += 14
