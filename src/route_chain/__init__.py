"""route-chain — declarative middleware-chain assembly for web routers.

Register named middleware generators once, then build ordered handler
chains per route and hand them to a router's per-method registration calls.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryRouter, RouteEntry
from .config import ChainBuilderConfig

# ── Middleware ───────────────────────────────────────────────────
from .middleware import (
    ALL,
    OPTIONAL,
    REQUIRED,
    Inclusion,
    MiddlewareDefinition,
    MiddlewareRegistry,
    get_default_registry,
    log_middleware,
    set_default_registry,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import Handler, IHandlerDecorator, IRouter, MiddlewareGenerator

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    MalformedDescriptorError,
    MalformedRouteError,
    MissingRequiredFieldError,
    RouteChainError,
    RouterRegistrationError,
    ValidationError,
)

# ── Routing ──────────────────────────────────────────────────────
from .routing import Chain, ChainBuilder, RouteDescriptor, build_chain, build_router

__all__: list[str] = [
    # Middleware
    "ALL",
    "OPTIONAL",
    "REQUIRED",
    "Inclusion",
    "MiddlewareDefinition",
    "MiddlewareRegistry",
    "get_default_registry",
    "set_default_registry",
    "log_middleware",
    # Routing
    "Chain",
    "ChainBuilder",
    "RouteDescriptor",
    "build_chain",
    "build_router",
    "ChainBuilderConfig",
    # Ports
    "Handler",
    "IHandlerDecorator",
    "IRouter",
    "MiddlewareGenerator",
    # Primitives
    "RouteChainError",
    "ValidationError",
    "MalformedDescriptorError",
    "MalformedRouteError",
    "MissingRequiredFieldError",
    "RouterRegistrationError",
    # Adapters
    "InMemoryRouter",
    "RouteEntry",
]
