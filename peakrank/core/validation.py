"""Validation utility functions shared by the feature services."""

from typing import Any, Dict, List

import structlog

logger = structlog.get_logger(__name__)


def is_empty_or_none(value: Any) -> bool:
    """
    Check if value is None or empty (empty string, list, dict, etc.).

    Args:
        value: Value to check

    Returns:
        True if value is None or empty, False otherwise
    """
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, (list, dict, set, tuple)):
        return len(value) == 0
    return False


def missing_required_fields(
    data: Dict[str, Any],
    required_fields: List[str],
    context_name: str = "data",
) -> List[str]:
    """
    Return the required fields that are absent or empty in ``data``.

    Args:
        data: Dictionary to validate
        required_fields: List of required field names
        context_name: Name for logging context (e.g., "account")

    Returns:
        Names of the missing fields, in ``required_fields`` order
    """
    missing = [field for field in required_fields if is_empty_or_none(data.get(field))]
    if missing:
        logger.info("Missing required fields", context=context_name, fields=missing)
    return missing
