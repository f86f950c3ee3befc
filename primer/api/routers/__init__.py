"""API routers for Python Primer."""

from primer.api.routers import demos, games

__all__ = ["demos", "games"]
