"""Function helpers."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

R = TypeVar("R")


def partial(f: Callable[..., R], arg1: Any) -> Callable[..., R]:
    """Return a function that calls ``f`` with its first argument fixed to ``arg1``."""

    def bound(*rest: Any) -> R:
        return f(arg1, *rest)

    return bound