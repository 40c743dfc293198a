"""data/levels.py — Level-layout catalog.

Plain dict tables, one per level, in play order.  Nothing here has
behaviour: ``logic.level_loader`` turns an entry into a
``LevelDefinition`` and copies it into the simulation state.

Schema (per level)
------------------
    title         str    HUD / title-stripe text
    goal_text     str    short objective shown in the HUD
    intro         str    message shown when the level loads
    pursuer       dict   {"active": bool, "angry": bool}
    checkpoints   list   rects  (x, y, w, h)
    obstacles     list   rects
    hazards       list   rects
    item          dict   {"kind", "label", "x", "y", "w", "h"}   (optional)
    npc           dict   {"key", "x", "y", "w", "h"}             (optional)
    goal          dict   {"label", "x", "y", "w", "h"}

Rects are (x, y, w, h) tuples in canvas units (960 × 540 playfield).

The goal rule is not stored here; it follows from position.  The first
level needs its item, a level with an npc needs that rescue, and the
last level needs the whole family.
"""

# ── Themes (index-aligned with LEVELS) ───────────────────────────────

THEMES = [
    {"name": "Red",         "bg": (42, 12, 12),  "accent": (255, 42, 42)},
    {"name": "Orange",      "bg": (42, 22, 6),   "accent": (255, 140, 26)},
    {"name": "Yellow",      "bg": (42, 37, 7),   "accent": (255, 230, 0)},
    {"name": "Green",       "bg": (12, 42, 20),  "accent": (26, 255, 107)},
    {"name": "Blue/Purple", "bg": (11, 15, 42),  "accent": (127, 92, 255)},
]


# ── Levels ───────────────────────────────────────────────────────────

LEVELS = [
    # 1: wide open lane with no pursuer or hazards
    {
        "title": "Level 1 (Red): Find the Flashlight",
        "goal_text": "Goal: Find the Flashlight",
        "intro": ("Welcome!\n"
                  "You are Michael (5) and Dad is with you.\n"
                  "Find the Flashlight so you can see the way home!"),
        "pursuer": {"active": False, "angry": False},
        "checkpoints": [
            (80, 430, 80, 18),
            (320, 430, 80, 18),
            (560, 430, 80, 18),
        ],
        # soft "fences" to guide, not block too much
        "obstacles": [
            (0, 360, 760, 10),
            (0, 490, 760, 10),
        ],
        "hazards": [],
        "item": {"kind": "flashlight", "label": "Flashlight",
                 "x": 700, "y": 410, "w": 32, "h": 32},
        "goal": {"label": "Home", "x": 860, "y": 400, "w": 70, "h": 90},
    },
    # 2: big toy platforms, first goo puddles
    {
        "title": "Level 2 (Orange): Rescue Tinsley",
        "goal_text": "Goal: Rescue Tinsley",
        "intro": "Level 2!\nFind Tinsley and rescue her, then go HOME!",
        "pursuer": {"active": False, "angry": False},
        "checkpoints": [
            (90, 430, 80, 18),
            (360, 360, 80, 18),
            (640, 300, 80, 18),
        ],
        "obstacles": [
            (200, 120, 20, 320),
            (420, 0, 20, 320),
            (200, 420, 520, 20),
        ],
        "hazards": [
            (260, 470, 120, 22),
            (470, 470, 120, 22),
        ],
        "npc": {"key": "tinsley", "x": 740, "y": 260, "w": 40, "h": 40},
        "goal": {"label": "HOME", "x": 860, "y": 240, "w": 80, "h": 120},
    },
    # 3: maze with thick walls and wide hallways; pursuer wakes up
    {
        "title": "Level 3 (Yellow): Catalina’s Maze",
        "goal_text": "Goal: Rescue Catalina",
        "intro": "Level 3!\nFind Catalina, rescue her, then go HOME!",
        "pursuer": {"active": True, "angry": False},
        "checkpoints": [
            (90, 430, 80, 18),
            (420, 430, 80, 18),
            (720, 430, 80, 18),
        ],
        "obstacles": [
            # outer guides
            (140, 80, 10, 420),
            (140, 80, 720, 10),
            (850, 80, 10, 420),
            # inside walls
            (220, 160, 500, 10),
            (220, 160, 10, 250),
            (300, 240, 420, 10),
            (710, 240, 10, 210),
            (380, 320, 250, 10),
        ],
        "hazards": [
            (260, 480, 140, 20),
            (520, 480, 140, 20),
        ],
        "npc": {"key": "catalina", "x": 760, "y": 110, "w": 40, "h": 40},
        "goal": {"label": "HOME", "x": 860, "y": 90, "w": 80, "h": 120},
    },
    # 4: narrow gates, angry pursuer
    {
        "title": "Level 4 (Green): Elevator Escape (Rescue Mom)",
        "goal_text": "Goal: Rescue Mom",
        "intro": "Level 4!\nFind Mom, rescue her, then go HOME!",
        "pursuer": {"active": True, "angry": True},
        "checkpoints": [
            (90, 430, 80, 18),
            (420, 300, 80, 18),
            (700, 160, 80, 18),
        ],
        "obstacles": [
            (190, 90, 20, 420),
            (420, 0, 20, 260),
            (420, 320, 20, 220),
            (650, 90, 20, 360),
            (740, 180, 120, 20),
        ],
        "hazards": [
            (260, 470, 120, 22),
            (520, 470, 120, 22),
            (780, 470, 120, 22),
        ],
        "npc": {"key": "mom", "x": 800, "y": 120, "w": 40, "h": 40},
        "goal": {"label": "HOME", "x": 860, "y": 90, "w": 80, "h": 140},
    },
    # 5: zig-zag run home; everyone must already be rescued
    {
        "title": "Level 5 (Blue/Purple): Run Home!",
        "goal_text": "Goal: Get Home",
        "intro": ("Final Level!\nRun home!\n"
                  "If Glue Glue Head catches you, you pop back to the last checkpoint.\n"
                  "You’ve got this!"),
        "pursuer": {"active": True, "angry": True},
        "checkpoints": [
            (90, 430, 80, 18),
            (380, 430, 80, 18),
            (660, 430, 80, 18),
            (820, 260, 80, 18),
        ],
        "obstacles": [
            (200, 120, 20, 380),
            (340, 0, 20, 300),
            (480, 240, 20, 300),
            (620, 0, 20, 320),
            (760, 220, 20, 320),
            # home wall, gap in the middle
            (860, 0, 10, 160),
            (860, 260, 10, 280),
        ],
        "hazards": [
            (260, 470, 120, 22),
            (520, 470, 120, 22),
            (780, 470, 120, 22),
        ],
        "goal": {"label": "HOME", "x": 880, "y": 40, "w": 70, "h": 150},
    },
]


# ── Story text outside any level ─────────────────────────────────────

TITLE_MESSAGE = (
    "Press Start! (Enter)\n\n"
    "Story: Monsters behind the elevator are chasing.\n"
    "Dad and Michael must rescue Mom, Catalina, and Tinsley — then run home!\n\n"
    "Tip: Touch checkpoint pads to save your spot."
)

VICTORY_MESSAGE = (
    "YOU DID IT!\n"
    "Dad and Michael got everyone home!\n"
    "Mom, Catalina, and Tinsley are safe.\n\n"
    "Press Start to play again!"
)
