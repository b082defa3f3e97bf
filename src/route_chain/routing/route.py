"""RouteDescriptor — configuration of one endpoint and its middleware values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..primitives.exceptions import MalformedRouteError


class RouteDescriptor(BaseModel):
    """Describes one endpoint: method, path and per-middleware values.

    Every field beyond ``method``, ``path`` and ``exclude`` is keyed by a
    middleware name and holds the value handed to that middleware's
    generator. A field's mere presence forces the middleware into the
    chain, even when its value is ``None``. ``exclude`` is reserved and
    cannot name a middleware; ``method`` and ``path`` can, and are passed
    on as authored.

    Usage::

        route = RouteDescriptor(method="GET", path="/fish", authorization="bearer")
        route.method                      # "GET", as authored
        route.http_method                 # "get"
        route.get_field("authorization")  # "bearer"
    """

    model_config = ConfigDict(frozen=True, extra="allow", arbitrary_types_allowed=True)

    method: str = Field(min_length=1)
    path: str = Field(min_length=1)
    exclude: frozenset[str] = Field(default_factory=frozenset)

    @property
    def http_method(self) -> str:
        """The method in lower case, as matched against include tokens."""
        return self.method.lower()

    @model_validator(mode="after")
    def _check_exclusions(self) -> RouteDescriptor:
        conflicting = sorted(name for name in self.exclude if self.has_field(name))
        if conflicting:
            msg = f"middleware cannot be both configured and excluded: {conflicting}"
            raise ValueError(msg)
        return self

    # ── Construction ─────────────────────────────────────────────

    @classmethod
    def coerce(cls, route: Any) -> RouteDescriptor:
        """Return *route* as a validated descriptor.

        Accepts an existing descriptor or a mapping. ``path`` is checked
        before ``method``; any other failure is reported with structured
        ``{field: [messages]}`` errors.
        """
        if isinstance(route, RouteDescriptor):
            return route
        if not isinstance(route, Mapping):
            msg = "route descriptor must be a mapping"
            raise MalformedRouteError(msg)
        if not route.get("path"):
            raise MalformedRouteError({"path": ["route requires a 'path' attribute"]})
        if not route.get("method"):
            raise MalformedRouteError(
                {"method": ["route requires a 'method' attribute"]}
            )
        try:
            return cls.model_validate(dict(route))
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
                msg = error.get("msg", "validation error")
                errors.setdefault(loc, []).append(msg)
            raise MalformedRouteError(errors) from exc

    # ── Field access ─────────────────────────────────────────────

    @property
    def fields(self) -> dict[str, Any]:
        """Middleware values carried by the route (reserved fields excluded)."""
        return dict(self.model_extra or {})

    def has_field(self, name: str) -> bool:
        """True when *name* is explicitly present on the route.

        ``method`` and ``path`` always count as present, so a middleware
        registered under either name is configured with that value.
        """
        if name in ("method", "path"):
            return True
        return name in (self.model_extra or {})

    def get_field(self, name: str, default: Any = None) -> Any:
        if name in ("method", "path"):
            return getattr(self, name)
        return (self.model_extra or {}).get(name, default)
