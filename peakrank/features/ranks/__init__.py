"""Rank resolution through the Riot API."""

from .router import router as ranks_router

__all__ = ["ranks_router"]
