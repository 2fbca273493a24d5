"""Run a service on its own task, fed by a queue of commands."""

from __future__ import annotations

import asyncio
import contextlib
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

S = TypeVar("S")
T = TypeVar("T")

_QUEUE_SIZE = 32
_background_tasks: set[asyncio.Task[Any]] = set()


@dataclass
class Command(Generic[S]):
    """A step applied to a service, with an optional future for its answer."""

    fn: Callable[[S], S]
    response: asyncio.Future[Any] | None = None


class ServiceRunner(Generic[S]):
    """Owns a service and applies queued commands to it one at a time.

    Must be created while an event loop is running.
    """

    def __init__(self, service: S, name: str) -> None:
        self.name = name
        self._service = service
        self._queue: asyncio.Queue[Command[S]] = asyncio.Queue(maxsize=_QUEUE_SIZE)
        self._closed = False
        self._task = asyncio.get_running_loop().create_task(self._serve())

    async def _serve(self) -> None:
        while True:
            command = await self._queue.get()
            with contextlib.suppress(Exception):
                self._service = command.fn(self._service)

    async def send(self, command: Command[S]) -> None:
        """Queue a command; raises ``RuntimeError`` once closed."""
        if self._closed:
            raise RuntimeError(f"{self.name} is closed")
        await self._queue.put(command)

    async def run(self, fn: Callable[[S], T]) -> T:
        """Apply ``fn`` to the service and return what it returns."""
        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()

        def apply(service: S) -> S:
            try:
                result = fn(service)
            except Exception as exc:
                if not future.done():
                    future.set_exception(exc)
            else:
                if not future.done():
                    future.set_result(result)
            return service

        await self.send(Command(apply, future))
        return await future

    async def post(self, fn: Callable[[S], Any]) -> None:
        """Queue ``fn`` to be applied to the service without waiting for it."""

        def apply(service: S) -> S:
            fn(service)
            return service

        await self.send(Command(apply))

    async def close(self) -> bool:
        """Stop the runner; return False if it was already closed."""
        if self._closed:
            return False
        self._closed = True
        self._task.cancel()
        await asyncio.wait([self._task])
        while not self._queue.empty():
            command = self._queue.get_nowait()
            if command.response is not None and not command.response.done():
                command.response.set_exception(RuntimeError(f"{self.name} is closed"))
        return True


def chain_listener(
    receiver: Awaitable[T],
) -> tuple[asyncio.Future[T], asyncio.Future[None]]:
    """Relay ``receiver``'s result, plus a second future that fires alongside it."""
    loop = asyncio.get_running_loop()
    message: asyncio.Future[T] = loop.create_future()
    notify: asyncio.Future[None] = loop.create_future()

    async def forward() -> None:
        try:
            value = await receiver
        except asyncio.CancelledError:
            message.cancel()
            notify.cancel()
        except Exception as exc:
            message.set_exception(exc)
            notify.set_exception(exc)
        else:
            message.set_result(value)
            notify.set_result(None)

    task = loop.create_task(forward())
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return message, notify