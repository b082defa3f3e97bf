"""Handler, generator and decorator contracts for chain members."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

# ``next(err)`` with a truthy ``err`` short-circuits the rest of the chain.
NextFunction = Callable[..., Any]

Handler = Callable[[Any, Any, NextFunction], Any]

MiddlewareGenerator = Callable[[Any], Handler]


@runtime_checkable
class IHandlerDecorator(Protocol):
    """Protocol for handler wrappers applied to every chain member.

    The returned handler must keep the ``(request, response, next)``
    signature and stay transparent to chain behaviour.
    """

    def __call__(self, label: str, handler: Handler) -> Handler:
        """Wrap *handler*, reporting events under *label*."""
        ...
