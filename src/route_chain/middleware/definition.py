"""MiddlewareDefinition — descriptor for a middleware in a route chain."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import MalformedDescriptorError
from ..utils import normalize_include

if TYPE_CHECKING:
    from ..ports.handler import Handler, MiddlewareGenerator

# Route attributes that are not middleware fields.
RESERVED_NAMES = frozenset({"exclude"})


@dataclass(frozen=True)
class MiddlewareDefinition:
    """Descriptor for a middleware in the chain.

    Supports **deferred instantiation**: the *generator* runs once per
    route when a chain is built, never at registration time, so every
    route receives a freshly configured handler.
    """

    name: str
    generator: MiddlewareGenerator
    include: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        errors: dict[str, list[str]] = {}
        if not isinstance(self.name, str) or not self.name:
            errors["name"] = ["name required"]
        elif self.name in RESERVED_NAMES:
            errors["name"] = [f"{self.name!r} is a reserved route attribute"]
        if not callable(self.generator):
            errors["generator"] = ["generator must be callable"]
        try:
            include = normalize_include(self.include)
        except TypeError as exc:
            errors["include"] = [str(exc)]
        else:
            object.__setattr__(self, "include", include)
        if errors:
            raise MalformedDescriptorError(errors)

    @classmethod
    def from_descriptor(cls, descriptor: Any) -> MiddlewareDefinition:
        """Validate *descriptor* and return a definition.

        Accepts an existing definition (returned as-is) or a mapping with
        ``name``, ``generator`` and optional ``include`` keys.
        """
        if isinstance(descriptor, MiddlewareDefinition):
            return descriptor
        if not isinstance(descriptor, Mapping):
            msg = "middleware descriptor must be a mapping"
            raise MalformedDescriptorError(msg)
        name = descriptor.get("name")
        if not name or not isinstance(name, str):
            raise MalformedDescriptorError({"name": ["name required"]})
        generator = descriptor.get("generator")
        if generator is None or not callable(generator):
            raise MalformedDescriptorError(
                {"generator": ["generator must be callable"]}
            )
        return cls(name=name, generator=generator, include=descriptor.get("include"))

    # ── Policy lookup ────────────────────────────────────────────

    def has_token(self, token: str) -> bool:
        return token in self.include

    # ── Construction ─────────────────────────────────────────────

    def build(self, value: Any = None) -> Handler:
        """Invoke the generator with the route's configuration value."""
        return self.generator(value)
