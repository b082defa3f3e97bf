"""InMemoryRouter — list-backed router fake for unit tests and examples."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from route_chain.ports.handler import Handler

logger = logging.getLogger(__name__)


def default_handlers_factory() -> list[Handler]:
    return []


@dataclass
class RouteEntry:
    """One registered chain: method, path and its ordered handlers."""

    method: str
    path: str
    handlers: list[Handler] = field(default_factory=default_handlers_factory)


class InMemoryRouter:
    """In-memory implementation of the router registration contract.

    Every registration is appended to :attr:`stack`, so ``len(router.stack)``
    counts the registered chains. :meth:`dispatch` runs a chain the way a
    web router would: handlers are invoked in order, each receiving a
    ``next`` callable; a truthy error passed to ``next`` stops the chain,
    and so does a handler that never calls ``next``.
    """

    def __init__(self) -> None:
        self.stack: list[RouteEntry] = []

    def _register(self, method: str, path: str, *handlers: Handler) -> InMemoryRouter:
        self.stack.append(RouteEntry(method=method, path=path, handlers=list(handlers)))
        return self

    def get(self, path: str, *handlers: Handler) -> InMemoryRouter:
        return self._register("get", path, *handlers)

    def post(self, path: str, *handlers: Handler) -> InMemoryRouter:
        return self._register("post", path, *handlers)

    def put(self, path: str, *handlers: Handler) -> InMemoryRouter:
        return self._register("put", path, *handlers)

    def patch(self, path: str, *handlers: Handler) -> InMemoryRouter:
        return self._register("patch", path, *handlers)

    def delete(self, path: str, *handlers: Handler) -> InMemoryRouter:
        return self._register("delete", path, *handlers)

    def head(self, path: str, *handlers: Handler) -> InMemoryRouter:
        return self._register("head", path, *handlers)

    def options(self, path: str, *handlers: Handler) -> InMemoryRouter:
        return self._register("options", path, *handlers)

    # ── Lookup ───────────────────────────────────────────────────

    def find(self, method: str, path: str) -> RouteEntry | None:
        method = method.lower()
        for entry in self.stack:
            if entry.method == method and entry.path == path:
                return entry
        return None

    # ── Dispatch ─────────────────────────────────────────────────

    def dispatch(self, method: str, path: str, request: Any, response: Any) -> Any:
        """Run the first chain registered for *method* and *path*.

        Returns the error that stopped the chain, or ``None``.

        Raises
        ------
        LookupError
            If no chain is registered for *method* and *path*.
        """
        entry = self.find(method, path)
        if entry is None:
            msg = f"No route registered for {method.upper()} {path}"
            raise LookupError(msg)

        outcome: dict[str, Any] = {"error": None}
        handlers = entry.handlers

        def run(index: int) -> None:
            if index >= len(handlers):
                return

            def next_fn(err: Any = None) -> None:
                if err:
                    outcome["error"] = err
                    logger.debug("%s %s stopped at handler %d", method, path, index)
                    return
                run(index + 1)

            handlers[index](request, response, next_fn)

        run(0)
        return outcome["error"]
