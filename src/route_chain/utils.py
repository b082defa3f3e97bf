"""Common utility functions and helpers."""

from __future__ import annotations

from typing import Any


def normalize_include(include: Any) -> tuple[str, ...]:
    """Normalize an inclusion policy into a tuple of tokens.

    ``None`` (or any other falsy value) gives an empty tuple, a single
    string is wrapped, and a list or tuple keeps its order. Sets are
    rejected because their order is not stable.
    """
    if not include:
        return ()
    if isinstance(include, str):
        return (include,)
    if not isinstance(include, (list, tuple)):
        msg = (
            "include must be a string or a list or tuple of strings, got "
            f"{type(include).__name__}"
        )
        raise TypeError(msg)
    tokens = tuple(include)
    bad = [token for token in tokens if not isinstance(token, str)]
    if bad:
        msg = f"include tokens must be strings, got {bad!r}"
        raise TypeError(msg)
    return tokens
