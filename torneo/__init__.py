"""Console manager for a small round-robin tournament: players, games and results."""

__version__ = "1.0.0"