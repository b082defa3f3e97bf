"""ChainBuilder — assembles route chains and registers them on a router."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any

from ..config import ChainBuilderConfig
from ..middleware.logging import log_middleware
from ..middleware.policy import should_include
from ..middleware.registry import MiddlewareRegistry, get_default_registry
from ..primitives.exceptions import MalformedRouteError, RouterRegistrationError
from .route import RouteDescriptor

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ..ports.handler import Handler, IHandlerDecorator

logger = logging.getLogger(__name__)

# [path, handler1, handler2, ...]: positional arguments for one router call.
Chain = list[Any]


class ChainBuilder:
    """Builds ordered handler chains from a :class:`MiddlewareRegistry`.

    For each route the registry is walked in registration order. Each
    definition is included when the route has a same-named field, or
    (unless the route excludes it) when its ``include`` tokens contain
    ``"all"`` or the route's method. A ``"required"`` definition without
    a same-named field aborts the build.

    Included generators are invoked with the route's field value and the
    resulting handlers are wrapped with *decorator* (the logging wrapper
    by default) unless ``wrap_with_logging`` is disabled.
    """

    def __init__(
        self,
        registry: MiddlewareRegistry | None = None,
        *,
        config: ChainBuilderConfig | None = None,
        decorator: IHandlerDecorator | None = None,
    ) -> None:
        self._registry = registry if registry is not None else get_default_registry()
        self._config = config or self._registry.config
        self._decorator = decorator or functools.partial(
            log_middleware, logger_prefix=self._config.logger_prefix
        )

    @property
    def registry(self) -> MiddlewareRegistry:
        return self._registry

    # ── Chain construction ───────────────────────────────────────

    def plan(self, route: RouteDescriptor | Mapping[str, Any]) -> list[str]:
        """Return the names a chain for *route* would include, in order.

        Generators are not invoked.
        """
        descriptor = RouteDescriptor.coerce(route)
        return [
            definition.name
            for definition in self._registry.get_definitions()
            if should_include(definition, descriptor)
        ]

    def build_chain(self, route: RouteDescriptor | Mapping[str, Any]) -> Chain:
        """Build ``[path, *handlers]`` for one route.

        Raises
        ------
        MalformedRouteError
            If ``path`` (checked first) or ``method`` is missing.
        MissingRequiredFieldError
            If a ``"required"`` middleware has no field on the route.
        """
        descriptor = RouteDescriptor.coerce(route)
        chain: Chain = [descriptor.path]

        for definition in self._registry.get_definitions():
            if not should_include(definition, descriptor):
                continue
            handler = definition.build(descriptor.get_field(definition.name))
            chain.append(self._wrap(definition.name, handler))

        logger.debug(
            "Built chain for %s %s with %d handler(s)",
            descriptor.http_method.upper(),
            descriptor.path,
            len(chain) - 1,
        )
        return chain

    def _wrap(self, label: str, handler: Handler) -> Handler:
        if not self._config.wrap_with_logging:
            return handler
        return self._decorator(label, handler)

    # ── Router population ────────────────────────────────────────

    def build_router(
        self,
        router: Any,
        routes: Iterable[RouteDescriptor | Mapping[str, Any]],
        *,
        atomic: bool | None = None,
    ) -> Any:
        """Build a chain per route and register it on *router*.

        Each chain is passed to ``router.<method>(path, *handlers)`` using
        the lowercased route method. Routes are processed in order; by
        default a failure leaves the routes before it registered. With
        ``atomic=True`` every chain is built (and every registration
        method resolved) before anything is registered.

        Returns the same *router* instance.
        """
        if atomic is None:
            atomic = self._config.atomic_batches

        if not atomic:
            for route in routes:
                method, chain = self._prepare(router, route)
                self._register(router, method, chain)
            return router

        prepared = [self._prepare(router, route) for route in routes]
        for method, chain in prepared:
            self._register(router, method, chain)
        return router

    def _prepare(self, router: Any, route: Any) -> tuple[str, Chain]:
        method = route.method if isinstance(route, RouteDescriptor) else None
        if method is None and hasattr(route, "get"):
            method = route.get("method")
        if not method or not isinstance(method, str):
            raise MalformedRouteError(
                {"method": ["route requires a 'method' attribute"]}
            )
        method = method.lower()
        chain = self.build_chain(route)
        if not callable(getattr(router, method, None)):
            raise RouterRegistrationError(method, chain[0])
        return method, chain

    def _register(self, router: Any, method: str, chain: Chain) -> None:
        getattr(router, method)(*chain)
        logger.debug("Registered %s %s on router", method.upper(), chain[0])


def build_chain(
    route: RouteDescriptor | Mapping[str, Any],
    registry: MiddlewareRegistry | None = None,
    *,
    config: ChainBuilderConfig | None = None,
    decorator: IHandlerDecorator | None = None,
) -> Chain:
    """Build the chain for *route* from *registry* (default: shared registry)."""
    return ChainBuilder(registry, config=config, decorator=decorator).build_chain(
        route
    )


def build_router(
    router: Any,
    routes: Iterable[RouteDescriptor | Mapping[str, Any]],
    registry: MiddlewareRegistry | None = None,
    *,
    config: ChainBuilderConfig | None = None,
    decorator: IHandlerDecorator | None = None,
    atomic: bool | None = None,
) -> Any:
    """Register a chain per route on *router* and return the router."""
    builder = ChainBuilder(registry, config=config, decorator=decorator)
    return builder.build_router(router, routes, atomic=atomic)
