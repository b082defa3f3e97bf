"""Configuration and validation exceptions for route-chain."""

from __future__ import annotations


class RouteChainError(Exception):
    """Root exception for the entire route-chain package."""


class ValidationError(RouteChainError):
    """Raised when a middleware descriptor or route descriptor is invalid.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(self._format())

    def _format(self) -> str:
        root = self.errors.get("__root__")
        if root and len(self.errors) == 1:
            return "; ".join(root)
        return str(self.errors)


class MalformedDescriptorError(ValidationError):
    """Raised when a middleware descriptor cannot be registered.

    Usage: MiddlewareRegistry raises this for a missing descriptor, a
    missing or non-string ``name``, a non-callable ``generator`` or a bad
    ``include`` policy.
    """


class MalformedRouteError(ValidationError):
    """Raised when a route descriptor lacks ``path`` or ``method``."""


class MissingRequiredFieldError(ValidationError):
    """Raised when a ``"required"`` middleware has no field on the route."""

    def __init__(self, name: str, path: str | None = None) -> None:
        self.name = name
        self.path = path
        super().__init__({name: [f"{name} is a required configuration"]})

    def _format(self) -> str:
        msg = f"{self.name} is a required configuration"
        if self.path is not None:
            msg += f" (route {self.path!r})"
        return msg


class RouterRegistrationError(RouteChainError):
    """Raised when the router exposes no registration callable for a method."""

    def __init__(self, method: str, path: str) -> None:
        self.method = method
        self.path = path
        super().__init__(
            f"Router has no {method!r} registration method for route {path!r}"
        )
