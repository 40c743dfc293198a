"""data — Static game content (level catalog, tuning file)."""
