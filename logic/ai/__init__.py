"""logic/ai — AI subpackage.

Modules
-------
steering   — direct seek + near-distance easing
pursuer    — Glue Glue Head chase / tag system
"""
