"""core/assets.py — Best-effort sprite loading.

Every sprite is optional.  A file that is missing or unreadable is
recorded as a ``(key, path)`` failure and its slot is left as ``None``;
the render adapter then draws a flat-coloured shape instead.  Nothing
here ever raises into gameplay.

    sprites = SpriteBank.load()          # after pygame.display.set_mode
    img = sprites.get("monster")         # Surface or None
    for key, path in sprites.failed: ...
"""

from __future__ import annotations
from pathlib import Path

import pygame

from core.constants import ASSET_DIR, SPRITE_FILES


class SpriteBank:
    """Loaded sprite surfaces keyed by name, plus the list of failures."""

    def __init__(self):
        self.surfaces: dict[str, pygame.Surface | None] = {}
        self.failed: list[tuple[str, str]] = []
        self._scaled: dict[tuple[str, int, int], pygame.Surface] = {}

    @classmethod
    def load(cls, root: str | Path | None = None,
             files: dict[str, str] | None = None) -> "SpriteBank":
        """Load every sprite in *files* (default ``SPRITE_FILES``).

        *root* defaults to ``assets/`` next to the project root.
        """
        if root is None:
            root = Path(__file__).resolve().parent.parent / ASSET_DIR
        root = Path(root)
        bank = cls()
        for key, name in (files or SPRITE_FILES).items():
            path = root / name
            bank.surfaces[key] = bank._load_one(key, path)

        ok = sum(1 for s in bank.surfaces.values() if s is not None)
        print(f"[ASSETS] {ok}/{len(bank.surfaces)} sprites loaded from {root}")
        for key, path in bank.failed:
            print(f"[ASSETS]   missing {key}: {path}")
        return bank

    def _load_one(self, key: str, path: Path) -> pygame.Surface | None:
        try:
            img = pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError, OSError):
            self.failed.append((key, str(path)))
            return None
        # convert_alpha needs a display mode; headless loads keep the raw image
        if pygame.display.get_surface() is not None:
            img = img.convert_alpha()
        return img

    def get(self, key: str | None) -> pygame.Surface | None:
        if key is None:
            return None
        return self.surfaces.get(key)

    def scaled(self, key: str | None, w: int, h: int) -> pygame.Surface | None:
        """Return sprite *key* scaled to (w, h), cached per size."""
        img = self.get(key)
        if img is None:
            return None
        ck = (key, w, h)
        cached = self._scaled.get(ck)
        if cached is None:
            cached = pygame.transform.smoothscale(img, (w, h))
            self._scaled[ck] = cached
        return cached

    def failure_message(self) -> str:
        """Player-facing diagnostic listing, or ``""`` if everything loaded."""
        if not self.failed:
            return ""
        lines = [f"{key}: {path}" for key, path in self.failed]
        return ("Some images did not load:\n" + "\n".join(lines) +
                f"\n\nFix filenames in /{ASSET_DIR} (case sensitive).")
