"""IRouter — registration surface of the router collaborator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .handler import Handler


@runtime_checkable
class IRouter(Protocol):
    """Protocol for routers accepting built chains.

    Exposes one callable per lowercase HTTP method. Each accepts the
    route path followed by the ordered handlers of its chain, i.e.
    ``router.get("/fish", h1, h2)``. Dispatch semantics belong to the
    router; the builder only decides which handlers go where.
    """

    def get(self, path: str, *handlers: Handler) -> Any: ...

    def post(self, path: str, *handlers: Handler) -> Any: ...

    def put(self, path: str, *handlers: Handler) -> Any: ...

    def patch(self, path: str, *handlers: Handler) -> Any: ...

    def delete(self, path: str, *handlers: Handler) -> Any: ...
