"""Space Game leaderboard backed by in-memory document repositories."""

__version__ = "0.1.0"
