"""Middleware components."""

from .definition import MiddlewareDefinition
from .logging import get_middleware_logger, log_middleware
from .policy import ALL, OPTIONAL, REQUIRED, Inclusion, resolve_inclusion, should_include
from .registry import MiddlewareRegistry, get_default_registry, set_default_registry

__all__ = [
    "ALL",
    "Inclusion",
    "MiddlewareDefinition",
    "MiddlewareRegistry",
    "OPTIONAL",
    "REQUIRED",
    "get_default_registry",
    "get_middleware_logger",
    "log_middleware",
    "resolve_inclusion",
    "set_default_registry",
    "should_include",
]
