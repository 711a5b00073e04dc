"""
FastAPI routers grouped by domain (leaderboard, profiles, pages).

Each module exposes an APIRouter included by the app factory. Routers read
their services from ``request.app.state``.
"""
