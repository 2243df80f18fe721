from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Generic, Protocol, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


def loop_scheduler(delay: float, callback: Callable[[], None]) -> TimerHandle:
    """Schedule callback on the running event loop after delay seconds."""
    return asyncio.get_running_loop().call_later(delay, callback)


class Debouncer(Generic[T]):
    """Trailing-edge debounce with a single pending slot.

    submit() cancels the pending timer (if any) and schedules a new one. Only
    the most recent submission runs. The future of a superseded submission is
    left pending forever: it is neither resolved nor rejected.

    The timer is injectable so the debouncer can be driven without wall-clock
    delays.
    """

    def __init__(self, scheduler: Scheduler = loop_scheduler) -> None:
        self._schedule = scheduler
        self._handle: TimerHandle | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> bool:
        """True while a submission is waiting for its timer."""
        return self._handle is not None

    def submit(
        self,
        factory: Callable[[], Awaitable[T]],
        delay_ms: int = 300,
    ) -> asyncio.Future[T]:
        """Run factory() after delay_ms unless another submit() comes first.

        Must be called from within a running event loop.
        """
        self.cancel()
        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()

        def fire() -> None:
            self._handle = None
            task = asyncio.ensure_future(factory())
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            task.add_done_callback(lambda t: _settle(future, t))

        self._handle = self._schedule(delay_ms / 1000, fire)
        return future

    def cancel(self) -> None:
        """Drop the pending timer, if any. Its future never settles."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Superseded pending debounced call")


def _settle(future: asyncio.Future[T], task: asyncio.Future[T]) -> None:
    if future.done():
        return
    if task.cancelled():
        future.cancel()
    elif task.exception() is not None:
        future.set_exception(task.exception())  # type: ignore[arg-type]
    else:
        future.set_result(task.result())
