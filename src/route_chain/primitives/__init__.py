"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    MalformedDescriptorError,
    MalformedRouteError,
    MissingRequiredFieldError,
    RouteChainError,
    RouterRegistrationError,
    ValidationError,
)

__all__ = [
    "MalformedDescriptorError",
    "MalformedRouteError",
    "MissingRequiredFieldError",
    "RouteChainError",
    "RouterRegistrationError",
    "ValidationError",
]
