"""
Shared helpers: the package error type, argument checks and logging setup.
"""

import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError

from .models import CountArgument, Settings

logger = logging.getLogger(__name__)


class InvalidArgument(TypeError):
    """Raised at construction time when an operation receives a bad argument"""
    pass


def require_callable(name: str, fn: Any) -> Callable:
    """Return `fn` unchanged, or raise InvalidArgument if it cannot be called"""
    if not callable(fn):
        logger.warning(f"{name}() rejected non-callable argument of type {type(fn).__name__}")
        raise InvalidArgument(f"{name}() requires fn to be a function")
    return fn


def require_count(name: str, n: Any) -> int:
    """Validate a non-negative integer count through CountArgument"""
    try:
        return CountArgument(n=n).n
    except ValidationError as e:
        logger.warning(f"{name}() rejected count {n!r}")
        raise InvalidArgument(
            f"{name}() requires n to be a non-negative integer"
        ) from e


def configure_logging(settings: Optional[Settings] = None) -> Settings:
    """Configure root logging from `settings` (defaults when omitted)"""
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
    logger.debug(f"Logging configured at {settings.log_level}")
    return settings
