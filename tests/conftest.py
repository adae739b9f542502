"""
Shared test fixtures for the remote-data test suite.

Provides a factory for pending containers that settle after a delay, used
to exercise the async combinators with out-of-order settlement.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import pytest

Settle = Callable[..., Awaitable[Any]]


@pytest.fixture()
def settle() -> Settle:
    """
    Return a coroutine factory: settle(container, delay=0.0, log=None).

    The coroutine sleeps for `delay` seconds, appends the container to `log`
    (when given) to record settlement order, then returns the container.
    """

    async def _settle(container: Any, delay: float = 0.0, log: list[Any] | None = None) -> Any:
        await asyncio.sleep(delay)
        if log is not None:
            log.append(container)
        return container

    return _settle
