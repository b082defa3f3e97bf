"""Route descriptors and chain assembly."""

from .chain import Chain, ChainBuilder, build_chain, build_router
from .route import RouteDescriptor

__all__ = [
    "Chain",
    "ChainBuilder",
    "RouteDescriptor",
    "build_chain",
    "build_router",
]
