"""MiddlewareRegistry — declarative registration in chain order."""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from ..config import DEFAULT_CONFIG, ChainBuilderConfig
from ..primitives.exceptions import MalformedDescriptorError
from .definition import MiddlewareDefinition

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from ..ports.handler import MiddlewareGenerator

logger = logging.getLogger(__name__)


class MiddlewareRegistry:
    """Collects middleware definitions in registration order.

    Chains are assembled by walking the definitions in the order they were
    added, so the registry order *is* the chain order. Definitions are
    never removed except through :meth:`clear`.

    Same-named definitions are accepted by default and all of them run,
    each reading the route's same-named field (fan-out). Set
    ``allow_duplicate_names=False`` on the config to reject them instead.
    """

    def __init__(self, config: ChainBuilderConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._definitions: list[MiddlewareDefinition] = []

    @property
    def config(self) -> ChainBuilderConfig:
        return self._config

    # ── Registration ─────────────────────────────────────────────

    def add(self, descriptor: Any) -> MiddlewareDefinition:
        """Validate *descriptor* and append it to the registry.

        Parameters
        ----------
        descriptor:
            A :class:`MiddlewareDefinition` or a mapping with ``name``,
            ``generator`` and optional ``include`` keys. ``include`` may
            be a single token or a sequence of tokens.

        Raises
        ------
        MalformedDescriptorError
            If the descriptor is missing, has no string ``name``, has no
            callable ``generator`` or a malformed ``include``.
        """
        definition = self._validate(descriptor)
        self._definitions.append(definition)
        logger.debug(
            "Registered middleware %s (include=%s)",
            definition.name,
            ",".join(definition.include) or "-",
        )
        return definition

    def add_many(
        self, descriptors: Sequence[Any], *, atomic: bool | None = None
    ) -> list[MiddlewareDefinition]:
        """Add each descriptor in order.

        By default a failure stops the batch and leaves the descriptors
        before it registered. With ``atomic=True`` every descriptor is
        validated before any of them is committed.
        """
        if not isinstance(descriptors, (list, tuple)):
            msg = "add_many: descriptors should be a list or tuple"
            raise MalformedDescriptorError(msg)
        if atomic is None:
            atomic = self._config.atomic_batches
        if not atomic:
            return [self.add(descriptor) for descriptor in descriptors]

        staged: list[MiddlewareDefinition] = []
        seen = {definition.name for definition in self._definitions}
        for descriptor in descriptors:
            definition = MiddlewareDefinition.from_descriptor(descriptor)
            self._check_duplicate(definition.name, seen)
            seen.add(definition.name)
            staged.append(definition)
        for definition in staged:
            self.add(definition)
        return staged

    def register(
        self,
        name: str,
        generator: MiddlewareGenerator,
        *,
        include: str | Sequence[str] | None = None,
    ) -> MiddlewareDefinition:
        """Keyword-style form of :meth:`add`."""
        return self.add({"name": name, "generator": generator, "include": include})

    def middleware(
        self, name: str, *, include: str | Sequence[str] | None = None
    ) -> Callable[[MiddlewareGenerator], MiddlewareGenerator]:
        """Decorator-style registration.

        Usage::

            @registry.middleware("pagination", include="get")
            def pagination(config):
                def handler(req, res, next):
                    ...
                return handler
        """

        def wrapper(generator: MiddlewareGenerator) -> MiddlewareGenerator:
            self.register(name, generator, include=include)
            return generator

        return wrapper

    def _validate(self, descriptor: Any) -> MiddlewareDefinition:
        definition = MiddlewareDefinition.from_descriptor(descriptor)
        self._check_duplicate(
            definition.name, {existing.name for existing in self._definitions}
        )
        return definition

    def _check_duplicate(self, name: str, existing: set[str]) -> None:
        if self._config.allow_duplicate_names or name not in existing:
            return
        raise MalformedDescriptorError(
            {"name": [f"middleware {name!r} is already registered"]}
        )

    # ── Retrieval ────────────────────────────────────────────────

    def get_definitions(self) -> tuple[MiddlewareDefinition, ...]:
        """Return a read-only snapshot of the definitions in order."""
        return tuple(self._definitions)

    def get_registered_names(self) -> list[str]:
        return [definition.name for definition in self._definitions]

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[MiddlewareDefinition]:
        return iter(self.get_definitions())

    def __contains__(self, name: object) -> bool:
        return any(definition.name == name for definition in self._definitions)

    # ── Cleanup ──────────────────────────────────────────────────

    def clear(self) -> None:
        """Remove all registrations (testing utility)."""
        self._definitions.clear()


_default_registry_var: ContextVar[MiddlewareRegistry | None] = ContextVar(
    "middleware_registry", default=None
)


def get_default_registry() -> MiddlewareRegistry:
    """Get the shared registry for the current context.

    Creates a fresh ``MiddlewareRegistry`` on first access within each
    context. Applications that assemble a single configuration at startup
    can use it instead of passing a registry around.
    """
    registry = _default_registry_var.get()
    if registry is None:
        registry = MiddlewareRegistry()
        _default_registry_var.set(registry)
    return registry


def set_default_registry(registry: MiddlewareRegistry) -> None:
    """Set a custom shared registry in the current context."""
    _default_registry_var.set(registry)
