"""
Core utilities shared across the leaderboard app.

This package hosts configuration helpers (env vars, data file paths) and
the logging setup. Repositories, services and routers depend on these
primitives instead of reading os.environ directly.
"""
