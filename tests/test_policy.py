from unittest.mock import Mock

import pytest

from route_chain.middleware.definition import MiddlewareDefinition
from route_chain.middleware.policy import (
    Inclusion,
    policy_includes,
    resolve_inclusion,
    should_include,
)
from route_chain.primitives.exceptions import MissingRequiredFieldError
from route_chain.routing.route import RouteDescriptor


def definition(name, include=None) -> MiddlewareDefinition:
    return MiddlewareDefinition(name=name, generator=Mock(), include=include)


def test_resolve_forced_in() -> None:
    route = RouteDescriptor(method="get", path="/", cors=True)

    assert resolve_inclusion(definition("cors"), route) is Inclusion.FORCED_IN


def test_resolve_forced_out() -> None:
    route = RouteDescriptor(method="get", path="/", exclude={"cors"})

    assert resolve_inclusion(definition("cors", "all"), route) is Inclusion.FORCED_OUT


def test_resolve_policy() -> None:
    route = RouteDescriptor(method="get", path="/")

    assert resolve_inclusion(definition("cors", "all"), route) is Inclusion.POLICY


@pytest.mark.parametrize(
    ("include", "method", "expected"),
    [
        ("all", "get", True),
        ("get", "get", True),
        ("get", "post", False),
        (["post", "put"], "put", True),
        ("optional", "get", False),
        ("required", "get", False),
        ("GET", "get", False),
        (None, "get", False),
    ],
)
def test_policy_includes(include, method, expected) -> None:
    assert policy_includes(definition("mw", include), method) is expected


def test_optional_included_with_field() -> None:
    route = RouteDescriptor(method="get", path="/", authorization="bearer")

    assert should_include(definition("authorization", "optional"), route)


def test_forced_out_beats_all() -> None:
    route = RouteDescriptor(method="get", path="/", exclude={"cors"})

    assert not should_include(definition("cors", "all"), route)


def test_required_checked_before_exclusion() -> None:
    route = RouteDescriptor(method="get", path="/", exclude={"handler"})

    with pytest.raises(MissingRequiredFieldError):
        should_include(definition("handler", "required"), route)


def test_middleware_named_after_reserved_field_is_forced_in() -> None:
    route = RouteDescriptor(method="get", path="/fish")

    assert should_include(definition("path"), route)
