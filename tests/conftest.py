from types import SimpleNamespace

import pytest

from route_chain.middleware.registry import MiddlewareRegistry, set_default_registry


@pytest.fixture(autouse=True)
def _fresh_default_registry():
    set_default_registry(MiddlewareRegistry())
    yield
    set_default_registry(MiddlewareRegistry())


@pytest.fixture()
def registry() -> MiddlewareRegistry:
    return MiddlewareRegistry()


def pagination_generator(_config=None):
    def pagination(req, res, next):
        req.pagination = "pagination"
        next()

    return pagination


def authorization_generator(kind=None):
    def authorization(req, res, next):
        req.authorization = kind
        next()

    return authorization


@pytest.fixture()
def middleware_descriptors() -> list[dict]:
    return [
        {"name": "pagination", "include": "get", "generator": pagination_generator},
        {
            "name": "authorization",
            "include": "optional",
            "generator": authorization_generator,
        },
    ]


@pytest.fixture()
def request_obj() -> SimpleNamespace:
    return SimpleNamespace()
