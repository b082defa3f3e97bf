import logging
from unittest.mock import Mock

import pytest

from route_chain.middleware.logging import get_middleware_logger, log_middleware


def test_logs_start_and_completion(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="route_chain.middleware")
    next_fn = Mock()

    def handler(req, res, next) -> None:
        next()

    log_middleware("pagination", handler)({}, {}, next_fn)

    next_fn.assert_called_once_with()
    records = [r for r in caplog.records if r.name == "route_chain.middleware.pagination"]
    assert records[0].getMessage() == "started"
    assert records[1].getMessage().startswith("complete in")


def test_logs_error_passed_to_next(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="route_chain.middleware")
    next_fn = Mock()
    error = ValueError("bad token")

    def handler(req, res, next) -> None:
        next(error)

    log_middleware("authorization", handler)({}, {}, next_fn)

    next_fn.assert_called_once_with(error)
    assert "authorization failed after" in caplog.text
    assert "bad token" in caplog.text


def test_logs_and_reraises_exceptions(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="route_chain.middleware")

    def handler(req, res, next) -> None:
        raise RuntimeError("boom")

    wrapped = log_middleware("explode", handler)

    with pytest.raises(RuntimeError, match="boom"):
        wrapped({}, {}, Mock())

    assert "explode raised after" in caplog.text


def test_wrapper_is_transparent() -> None:
    def handler(req, res, next):
        """Set the answer."""
        req["answer"] = 42
        return "result"

    wrapped = log_middleware("answer", handler)
    req: dict = {}

    assert wrapped(req, {}, Mock()) == "result"
    assert req == {"answer": 42}
    assert wrapped.__name__ == "handler"
    assert wrapped.__doc__ == "Set the answer."


def test_custom_logger_prefix(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="myapp.http")

    log_middleware("cors", lambda req, res, next: next(), logger_prefix="myapp.http")(
        {}, {}, Mock()
    )

    assert any(r.name == "myapp.http.cors" for r in caplog.records)


def test_get_middleware_logger() -> None:
    assert get_middleware_logger("cors").name == "route_chain.middleware.cors"
