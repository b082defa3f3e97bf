"""log_middleware — wraps chain handlers with start/complete/error logging."""

from __future__ import annotations

import functools
import logging
import time
from typing import TYPE_CHECKING, Any

from ..config import DEFAULT_LOGGER_PREFIX

if TYPE_CHECKING:
    from ..ports.handler import Handler, NextFunction


def get_middleware_logger(
    label: str, prefix: str = DEFAULT_LOGGER_PREFIX
) -> logging.Logger:
    """Return the logger used for the middleware labelled *label*."""
    return logging.getLogger(f"{prefix}.{label}")


def log_middleware(
    label: str,
    handler: Handler,
    *,
    logger_prefix: str = DEFAULT_LOGGER_PREFIX,
) -> Handler:
    """Wrap *handler* so that each invocation is logged under *label*.

    Logs ``started`` on entry, ``complete`` when the handler calls
    ``next()`` without an error, and the error when it calls
    ``next(err)`` with a truthy value. Exceptions raised by the handler
    are logged and re-raised. The original ``next`` always receives the
    same arguments, and the handler's return value is passed through.
    """
    logger = get_middleware_logger(label, logger_prefix)

    @functools.wraps(handler)
    def wrapper(request: Any, response: Any, next_fn: NextFunction) -> Any:
        logger.debug("started")
        start = time.perf_counter()

        def logged_next(*args: Any, **kwargs: Any) -> Any:
            err = args[0] if args else kwargs.get("err")
            elapsed = (time.perf_counter() - start) * 1000
            if err:
                logger.warning("%s failed after %.2fms: %s", label, elapsed, err)
            else:
                logger.debug("complete in %.2fms", elapsed)
            return next_fn(*args, **kwargs)

        try:
            return handler(request, response, logged_next)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception("%s raised after %.2fms", label, elapsed)
            raise

    return wrapper
