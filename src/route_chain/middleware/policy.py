"""Inclusion policy — decides whether a definition joins a route chain."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ..primitives.exceptions import MissingRequiredFieldError

if TYPE_CHECKING:
    from ..routing.route import RouteDescriptor
    from .definition import MiddlewareDefinition

ALL = "all"
REQUIRED = "required"
OPTIONAL = "optional"


class Inclusion(str, Enum):
    """Per-route state of a middleware definition.

    ``FORCED_IN``: the route carries a field named after the middleware.
    ``FORCED_OUT``: the route lists the middleware in ``exclude``.
    ``POLICY``: the definition's ``include`` tokens decide.
    """

    FORCED_IN = "forced-in"
    FORCED_OUT = "forced-out"
    POLICY = "policy"


def check_required(definition: MiddlewareDefinition, route: RouteDescriptor) -> None:
    """Raise when a ``"required"`` middleware has no field on *route*."""
    if definition.has_token(REQUIRED) and not route.has_field(definition.name):
        raise MissingRequiredFieldError(definition.name, route.path)


def resolve_inclusion(
    definition: MiddlewareDefinition, route: RouteDescriptor
) -> Inclusion:
    if route.has_field(definition.name):
        return Inclusion.FORCED_IN
    if definition.name in route.exclude:
        return Inclusion.FORCED_OUT
    return Inclusion.POLICY


def policy_includes(definition: MiddlewareDefinition, method: str) -> bool:
    """Return True when the tokens alone select the middleware for *method*.

    ``"required"`` and ``"optional"`` never select on their own; they only
    take effect through a same-named route field.
    """
    return definition.has_token(ALL) or definition.has_token(method)


def should_include(definition: MiddlewareDefinition, route: RouteDescriptor) -> bool:
    """Apply the required check, then the three-state inclusion decision."""
    check_required(definition, route)
    state = resolve_inclusion(definition, route)
    if state is Inclusion.POLICY:
        return policy_includes(definition, route.http_method)
    return state is Inclusion.FORCED_IN
