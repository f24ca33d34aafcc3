"""
Service layer custom exceptions.

Each exception kind maps to one HTTP status and one JSON error envelope.
The application registers a single handler for ``ServiceException`` that
turns any of them into a response, so route handlers just raise.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message

    def to_payload(self) -> Dict[str, Any]:
        """JSON body returned to the client."""
        return {"success": False, "error": self.message}


class ValidationError(ServiceException):
    """Malformed or missing client input."""

    status_code = 400

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        validation_context = context or {}
        if field:
            validation_context["field"] = field
        if value is not None:
            validation_context["value"] = str(value)

        super().__init__(
            message=message,
            service=service,
            operation=operation,
            context=validation_context,
        )


class StoreFailure(ServiceException):
    """A persistence operation failed."""

    status_code = 500


class ConfigurationError(ServiceException):
    """Required configuration is missing."""

    status_code = 500


class LookupStep(str, Enum):
    """Upstream lookup that failed during rank resolution."""

    ACCOUNT = "account"
    LEAGUE = "league"


class UpstreamFailure(ServiceException):
    """A Riot API lookup failed (network error, non-2xx or malformed body)."""

    status_code = 500

    def __init__(
        self,
        message: str,
        step: LookupStep,
        upstream_status: Optional[int] = None,
        upstream_data: Optional[Any] = None,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        context: Dict[str, Any] = {"step": step.value}
        if upstream_status is not None:
            context["upstream_status"] = upstream_status

        super().__init__(
            message=message,
            service=service,
            operation=operation,
            context=context,
            original_error=original_error,
        )
        self.step = step
        self.upstream_status = upstream_status
        self.upstream_data = upstream_data

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "error": "Failed to fetch rank",
            "step": self.step.value,
        }
        if self.upstream_status is not None:
            payload["status"] = self.upstream_status
        if self.upstream_data is not None:
            payload["data"] = self.upstream_data
        return payload
