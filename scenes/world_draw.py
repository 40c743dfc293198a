"""scenes/world_draw.py — Rendering helpers for the game scene.

All pure-draw functions live here so that GameScene.draw() stays thin.
Every function receives the data it needs as parameters — a
``Snapshot`` of the simulation and the ``SpriteBank`` — and never
touches the simulation state itself.

Any sprite may be missing; each draw falls back to a flat shape first
and blits the sprite on top only when it loaded.
"""

from __future__ import annotations
import pygame
from core.app import App
from core.assets import SpriteBank
from core.constants import (
    WORLD_W, WORLD_H, PLAYER_COLOR, COMPANION_COLOR, PURSUER_COLOR,
    HAZARD_FILL, HAZARD_EDGE, OBSTACLE_FILL, CHECKPOINT_FILL, CHECKPOINT_EDGE,
    GOAL_FILL, NPC_FILL, LABEL_BG,
)
from components import Rect
from logic.tick import Snapshot
from ui.helpers import fill_alpha


def _pr(r: Rect) -> pygame.Rect:
    return pygame.Rect(int(r.x), int(r.y), int(r.w), int(r.h))


def _blit_sprite(surface: pygame.Surface, sprites: SpriteBank,
                 key: str | None, r: Rect) -> bool:
    img = sprites.scaled(key, int(r.w), int(r.h))
    if img is None:
        return False
    surface.blit(img, (int(r.x), int(r.y)))
    return True


# ── Background ──────────────────────────────────────────────────────

def draw_background(surface: pygame.Surface, snap: Snapshot) -> None:
    surface.fill(snap.theme.bg)
    # subtle fixed star field
    stars = pygame.Surface((WORLD_W, WORLD_H), pygame.SRCALPHA)
    for i in range(70):
        x = (i * 137) % WORLD_W
        y = (i * 71) % WORLD_H
        stars.fill((255, 255, 255, 30), (x, y, 2, 2))
    surface.blit(stars, (0, 0))


# ── Static layout ───────────────────────────────────────────────────

def draw_goal(surface: pygame.Surface, app: App, snap: Snapshot,
              sprites: SpriteBank) -> None:
    if snap.goal is None:
        return
    r = _pr(snap.goal)
    if not _blit_sprite(surface, sprites, "home", snap.goal):
        fill_alpha(surface, r, GOAL_FILL, radius=12)
        app.draw_text(surface, snap.goal_label, r.x + 10, r.y + 8,
                      (255, 255, 255), font=app.font)
    pygame.draw.rect(surface, snap.theme.accent, r, 3)


def draw_checkpoints(surface: pygame.Surface, snap: Snapshot) -> None:
    for cp in snap.checkpoints:
        fill_alpha(surface, _pr(cp), CHECKPOINT_FILL)
        fill_alpha(surface, _pr(cp), CHECKPOINT_EDGE, width=1)


def draw_obstacles(surface: pygame.Surface, snap: Snapshot) -> None:
    for o in snap.obstacles:
        fill_alpha(surface, _pr(o), OBSTACLE_FILL)


def draw_hazards(surface: pygame.Surface, snap: Snapshot) -> None:
    for hz in snap.hazards:
        fill_alpha(surface, _pr(hz), HAZARD_FILL)
        fill_alpha(surface, _pr(hz), HAZARD_EDGE, width=1)


# ── Pickups / rescue ────────────────────────────────────────────────

def draw_item(surface: pygame.Surface, app: App, snap: Snapshot,
              sprites: SpriteBank) -> None:
    if snap.item is None:
        return
    r = _pr(snap.item)
    pygame.draw.rect(surface, snap.theme.accent, r, border_radius=8)
    _blit_sprite(surface, sprites, snap.item_kind, snap.item)
    app.draw_text_bg(surface, snap.item_label, r.x - 6, r.y - 20,
                     bg=LABEL_BG, font=app.font_sm)


def draw_npc(surface: pygame.Surface, app: App, snap: Snapshot,
             sprites: SpriteBank) -> None:
    if snap.npc is None:
        return
    r = _pr(snap.npc)
    fill_alpha(surface, r, NPC_FILL, radius=10)
    _blit_sprite(surface, sprites, snap.npc_key or None, snap.npc)
    app.draw_text_bg(surface, "RESCUE!", r.x, r.y - 18,
                     bg=LABEL_BG, font=app.font_sm)


# ── Characters ──────────────────────────────────────────────────────

def draw_character(surface: pygame.Surface, app: App, sprites: SpriteBank,
                   r: Rect, color: tuple, label: str, key: str) -> None:
    pr = _pr(r)
    pygame.draw.rect(surface, color, pr, border_radius=8)
    _blit_sprite(surface, sprites, key, r)
    img = app.font_sm.render(label, True, (255, 255, 255))
    tx = pr.centerx - img.get_width() // 2
    fill_alpha(surface, (tx - 6, pr.y - 17, img.get_width() + 12, 15), LABEL_BG)
    surface.blit(img, (tx, pr.y - 16))


def draw_pursuer(surface: pygame.Surface, snap: Snapshot,
                 sprites: SpriteBank) -> None:
    if snap.pursuer is None:
        return
    if not _blit_sprite(surface, sprites, "monster", snap.pursuer):
        pygame.draw.ellipse(surface, PURSUER_COLOR, _pr(snap.pursuer))


# ── HUD extras ──────────────────────────────────────────────────────

def draw_final_hint(surface: pygame.Surface, app: App, snap: Snapshot) -> None:
    if snap.is_final and snap.rescued < snap.rescued_total:
        app.draw_text(surface, "Rescue everyone first!", 16, 50,
                      (200, 200, 200), font=app.font_sm)


def draw_world(surface: pygame.Surface, app: App, snap: Snapshot,
               sprites: SpriteBank) -> None:
    """Everything below the HUD, back to front."""
    draw_background(surface, snap)
    draw_goal(surface, app, snap, sprites)
    draw_checkpoints(surface, snap)
    draw_obstacles(surface, snap)
    draw_hazards(surface, snap)
    draw_item(surface, app, snap, sprites)
    draw_npc(surface, app, snap, sprites)
    draw_character(surface, app, sprites, snap.companion,
                   COMPANION_COLOR, "Dad", "dad")
    draw_character(surface, app, sprites, snap.player,
                   PLAYER_COLOR, "Michael", "michael")
    draw_pursuer(surface, snap, sprites)
    draw_final_hint(surface, app, snap)
