"""
High-level use cases for the leaderboard.

Routers call these services; services compose repository queries and never
touch the JSON documents directly.
"""
