"""core package initialization.

Engine layer: app shell, scene interface, constants, tuning, event
bus, collision primitives and sprite loading.  Nothing in here knows
about levels or the family.
"""

__all__ = ["app", "assets", "collision", "constants", "events", "scene", "tuning"]
