"""logic — Game systems package.

Subpackages
-----------
ai/         — steering helpers and the pursuer chase / tag system

Top-level modules
-----------------
state           — the single SimulationState + Phase
level_loader    — catalog parsing and per-level (re)initialisation
level_flow      — start / retry / advance commands
tick            — per-frame pipeline, step_frame() and the render Snapshot
movement        — player intent, pointer follow, wall sliding
follower        — the companion's trailing lag
progress        — checkpoints, hazards, item, rescue, goal gating
input_manager   — raw input → intent mapping
"""
