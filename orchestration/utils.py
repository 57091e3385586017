"""Helpers for calling service hooks that may or may not be coroutines."""

import inspect
from collections.abc import Callable
from typing import Any


async def resolve_value(value: Any) -> Any:
    """Await ``value`` until it is no longer awaitable.

    Args:
        value: Plain value, coroutine, or any other awaitable

    Returns:
        Final, non-awaitable value
    """
    while inspect.isawaitable(value):
        value = await value
    return value


async def call_step(step: Callable[..., Any], *args: Any) -> Any:
    """Call a sync or async step and return its resolved result."""
    return await resolve_value(step(*args))
