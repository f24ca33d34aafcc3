"""Stored player accounts."""

from .router import router as accounts_router

__all__ = ["accounts_router"]
