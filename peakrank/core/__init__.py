"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import RiotAPIConfig, Settings, get_settings, get_global_settings
from .database import DatabaseManager, get_db
from .exceptions import (
    ServiceException,
    ValidationError,
    StoreFailure,
    ConfigurationError,
    UpstreamFailure,
    LookupStep,
)
from .models import Base
from .validation import is_empty_or_none, missing_required_fields

__all__ = [
    # Config
    "RiotAPIConfig",
    "Settings",
    "get_settings",
    "get_global_settings",
    # Database
    "DatabaseManager",
    "get_db",
    # Exceptions
    "ServiceException",
    "ValidationError",
    "StoreFailure",
    "ConfigurationError",
    "UpstreamFailure",
    "LookupStep",
    # Models
    "Base",
    # Validation
    "is_empty_or_none",
    "missing_required_fields",
]
