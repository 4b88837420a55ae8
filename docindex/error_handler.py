"""Boundary error handling: application methods that report failure as a return value."""

import logging
from functools import wraps
from typing import Any, Optional

from .exceptions import DocIndexError, InvalidArgumentError

logger = logging.getLogger(__name__)


def handle_errors(
    default_return: Any = None,
    exception_type: type = DocIndexError,
    log_level: int = logging.ERROR,
    reraise: bool = False
):
    """Turn failures of the decorated call into `default_return`.

    InvalidArgumentError always propagates, since a broken precondition is a
    caller bug and not an operational failure. Other DocIndexErrors are logged
    as they are. Any other exception is wrapped in `exception_type`, with the
    function name in its details, before logging. With `reraise=True` the
    (possibly wrapped) error is raised instead of returning the default.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except InvalidArgumentError:
                raise
            except DocIndexError as e:
                error = e
            except Exception as e:
                error = exception_type(
                    message=f"Unexpected error in {func.__name__}: {e}",
                    details={'original_error': str(e), 'function': func.__name__}
                )
                error.__cause__ = e

            log_error(error, func.__name__, level=log_level)
            if reraise:
                raise error
            return default_return
        return wrapper
    return decorator


def log_error(
    error: Exception,
    context: str,
    details: Optional[dict] = None,
    level: int = logging.ERROR
) -> None:
    """Log `error` as "<context>: <message>" with its error code and merged details.

    The traceback is attached only when `error` wraps another exception.
    """
    logger.log(level, f"{context}: {error}", exc_info=error.__cause__, extra={
        'error_code': getattr(error, 'error_code', type(error).__name__),
        'details': {**getattr(error, 'details', {}), **(details or {})},
        'context': context
    })
