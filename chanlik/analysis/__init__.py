"""Analysis helpers built on top of the channel models (no new physics here)."""
