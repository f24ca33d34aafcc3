"""
Service layer decorators for common functionality.

This module provides decorators for error handling and logging of
service methods.
"""

import functools
import inspect
from typing import Any, Awaitable, Callable, Dict, ParamSpec, TypeVar

import structlog
from sqlalchemy.exc import SQLAlchemyError

from peakrank.core.exceptions import ServiceException, StoreFailure

logger = structlog.get_logger(__name__)

# Type variables for generic decorator typing
P = ParamSpec("P")
R = TypeVar("R")


def service_error_handler(
    service_name: str,
    include_context: bool = True,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Decorator for handling service method errors with structured logging.

    Service exceptions propagate unchanged. SQLAlchemy errors are wrapped in
    ``StoreFailure`` so the request boundary can answer with a 500 envelope.

    :param service_name: Name of the service (e.g., "AccountService")
    :param include_context: Whether to include method parameters in error context
    :returns: Decorated function with error handling

    :example:
        @service_error_handler("AccountService")
        async def list_accounts(self) -> list[AccountResponse]:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        operation_name = func.__name__
        sig = inspect.signature(func)

        @functools.wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            context: Dict[str, Any] = {
                "service": service_name,
                "operation": operation_name,
            }

            if include_context:
                bound_args = sig.bind(*args, **kwargs)
                for name, value in bound_args.arguments.items():
                    if name not in ["self", "db", "session"]:
                        context[name] = str(value)[:200] if value is not None else None

            logger.debug("Service method called", **context)

            try:
                result = await func(*args, **kwargs)
            except ServiceException as e:
                logger.info(
                    "Service operation rejected",
                    error_type=e.__class__.__name__,
                    error_message=e.message,
                    error_context=e.context,
                    **context,
                )
                raise
            except SQLAlchemyError as e:
                logger.error(
                    "Database error in service operation",
                    error_type=e.__class__.__name__,
                    error_message=str(e),
                    **context,
                )
                raise StoreFailure(
                    message=str(e),
                    service=service_name,
                    operation=operation_name,
                    context=context if include_context else {},
                    original_error=e,
                ) from e

            logger.debug("Service method completed successfully", **context)
            return result

        return async_wrapper

    return decorator
