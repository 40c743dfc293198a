"""core/tuning.py — Gameplay numbers from ``data/tuning.toml``.

The file is flat: one table per system (``[player]``, ``[pursuer]``,
``[frame]`` …) holding scalars or short lists.  Read a value with::

    from core.tuning import get
    speed = get("player", "speed", 220.0)

Every call site carries its own default, so the game runs on stock
numbers when the file (or a key) is missing.

``reload()`` is bound to F5.  A file that fails to parse on reload is
reported and the previous values stay in effect, so a typo made while
the game is running never takes it down.  ``load()`` itself lets the
parse error through: a broken file at startup is a content bug.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    try:
        import tomli as tomllib            # pip install tomli
    except ModuleNotFoundError:
        tomllib = None                     # type: ignore[assignment]

DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"

_tables: dict[str, dict] = {}
_path: Path = DEFAULT_PATH


def _read(path: Path) -> dict[str, dict]:
    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        return {}
    if tomllib is None:
        print("[TUNING] No TOML parser available (need Python 3.11+ or `pip install tomli`)")
        return {}
    with open(path, "rb") as f:
        raw = tomllib.load(f)
    return {name: table for name, table in raw.items() if isinstance(table, dict)}


def load(path: str | Path | None = None) -> None:
    """Replace every value with the contents of *path* (default: data/tuning.toml)."""
    global _tables, _path
    _path = Path(path) if path is not None else DEFAULT_PATH
    _tables = _read(_path)
    if _tables:
        print(f"[TUNING] Loaded [{'] ['.join(_tables)}] from {_path}")


def reload() -> bool:
    """Re-read the last loaded file.  Returns False (old values kept) on a bad file."""
    global _tables
    try:
        tables = _read(_path)
    except ValueError as exc:              # tomllib.TOMLDecodeError
        print(f"[TUNING] Reload failed, keeping previous values: {exc}")
        return False
    _tables = tables
    print(f"[TUNING] Reloaded {_path}")
    return True


def get(section: str, key: str, default=None):
    """``[section] key`` or *default*."""
    return _tables.get(section, {}).get(key, default)
