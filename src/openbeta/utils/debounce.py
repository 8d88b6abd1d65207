"""Coalesce bursts of async calls into a single execution."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

DEFAULT_DELAY_SECONDS = 0.3


@dataclass(slots=True)
class Debouncer:
    """Run ``fn`` once the calls stop arriving for ``delay_seconds``.

    Each call cancels the pending timer and schedules a new one with its own
    argument. Every caller waiting in the same burst receives the result of
    the one execution, which uses the most recent argument.
    """

    fn: Callable[[Any], Awaitable[Any]]
    delay_seconds: float = DEFAULT_DELAY_SECONDS
    _handle: asyncio.TimerHandle | None = field(default=None, init=False, repr=False)
    _waiter: asyncio.Future[Any] | None = field(default=None, init=False, repr=False)
    _task: asyncio.Task[None] | None = field(default=None, init=False, repr=False)

    async def __call__(self, arg: Any) -> Any:
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        if self._waiter is None or self._waiter.done():
            self._waiter = loop.create_future()
        waiter = self._waiter
        self._handle = loop.call_later(self.delay_seconds, self._fire, arg, waiter)
        return await asyncio.shield(waiter)

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def _fire(self, arg: Any, waiter: asyncio.Future[Any]) -> None:
        self._handle = None
        self._waiter = None
        self._task = asyncio.ensure_future(self._run(arg, waiter))

    async def _run(self, arg: Any, waiter: asyncio.Future[Any]) -> None:
        try:
            result = await self.fn(arg)
        except Exception as exc:
            if not waiter.done():
                waiter.set_exception(exc)
        else:
            if not waiter.done():
                waiter.set_result(result)
        finally:
            # cancellation or interpreter exit; release the waiting callers
            if not waiter.done():
                waiter.cancel()


async def _passthrough(items: list[Any]) -> list[Any]:
    return items


debounced = Debouncer(_passthrough)


__all__ = ["DEFAULT_DELAY_SECONDS", "Debouncer", "debounced"]
