"""
Fetch-lifecycle connector — one RemoteData value driven by a request function.

The connector is the only stateful piece of the package: it holds the
current container and replaces it as the request progresses.

    connector = RemoteDataConnector(lambda user_id: http_client.get(f"/users/{user_id}"))
    connector.state        # → NotAsked()
    task = connector.trigger(42)
    connector.state        # → Loading()
    await task
    connector.state        # → Success({...}) or Failure(HttpFailure(...))

trigger() only fires from NotAsked, so calling it again while a request is
in flight (or after it settled) is a no-op. Call reset() to allow another
request. There is no cancellation: once started, a request runs to the end,
but a request started before the last reset() no longer updates the state.

request_fn should settle to a container. If it raises instead, the state goes
back to NotAsked and the exception is re-raised from the task.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from remote_data.log import get_logger
from remote_data.remote import Loading, NotAsked, RemoteData

E = TypeVar("E")
V = TypeVar("V")

log = get_logger("connector")


class RemoteDataConnector(Generic[E, V]):
    """Holds one RemoteData and moves it NotAsked → Loading → settled."""

    def __init__(self, request_fn: Callable[..., Awaitable[RemoteData[E, V]]]) -> None:
        self._request_fn = request_fn
        self._state: RemoteData[E, V] = NotAsked()
        self._generation = 0
        self._listeners: list[Callable[[RemoteData[E, V]], Any]] = []

    @property
    def state(self) -> RemoteData[E, V]:
        return self._state

    def subscribe(self, listener: Callable[[RemoteData[E, V]], Any]) -> Callable[[], None]:
        """
        Call `listener` with every new state. Returns a function that unsubscribes.

            unsubscribe = connector.subscribe(render)
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def trigger(self, *args: Any) -> asyncio.Task[None] | None:
        """
        Start the request unless one was already started.

        Must be called from a running event loop. The state becomes Loading
        before this returns; the returned task settles once the new state
        is in place. Returns None when the state is not NotAsked.
        """
        if not isinstance(self._state, NotAsked):
            log.debug("connector.trigger.ignored", state=type(self._state).__name__)
            return None

        loop = asyncio.get_running_loop()
        self._generation += 1
        self._set_state(Loading())
        return loop.create_task(self._run(self._generation, args))

    def reset(self) -> None:
        """
        Go back to NotAsked so that trigger() fires again.

        A request still in flight keeps running, but its outcome is discarded.
        """
        self._generation += 1
        self._set_state(NotAsked())

    async def _run(self, generation: int, args: tuple[Any, ...]) -> None:
        try:
            settled = await self._request_fn(*args)
        except Exception:
            log.exception("connector.request.raised", generation=generation)
            if generation == self._generation:
                self._set_state(NotAsked())
            raise

        if generation != self._generation:
            log.debug("connector.settlement.discarded", state=type(settled).__name__)
            return
        self._set_state(settled)

    def _set_state(self, state: RemoteData[E, V]) -> None:
        self._state = state
        log.debug("connector.state.changed", state=type(state).__name__)
        for listener in list(self._listeners):
            listener(state)
