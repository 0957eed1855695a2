"""Real-time simulation engine for a grid-based maze chase game."""
