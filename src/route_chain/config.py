"""ChainBuilderConfig — options shared by the registry and chain builder."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LOGGER_PREFIX = "route_chain.middleware"


class ChainBuilderConfig(BaseModel):
    """Immutable configuration for registries and chain builders.

    Usage::

        config = ChainBuilderConfig(wrap_with_logging=False)
        builder = ChainBuilder(registry, config=config)
    """

    model_config = ConfigDict(frozen=True)

    wrap_with_logging: bool = True
    logger_prefix: str = Field(default=DEFAULT_LOGGER_PREFIX, min_length=1)
    allow_duplicate_names: bool = True
    atomic_batches: bool = False


DEFAULT_CONFIG = ChainBuilderConfig()
