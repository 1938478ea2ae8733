"""
Registry of string queues addressed by integer handles.

Handles are issued from a counter starting at 0 and are never reused, even
after the queue they named was deleted. Operations against unknown handles
never raise: they fall back to a benign result (no-op, `0`, `None`, an empty
queue for comparison) and only the [tracer][strqueue.tracing.Tracer] tells the
difference.

Example:
    ```python
    registry = QueueRegistry()
    h = registry.create()
    registry.insert_at(h, 0, "b")
    registry.insert_at(h, 0, "a")
    registry.get_at(h, 1)  # "b"
    registry.compare(h, registry.create())  # Ordering.GREATER
    ```
"""

import threading
from contextlib import AbstractContextManager, nullcontext
from functools import cache
from typing import Generator, Sequence

from anystore.logging import get_logger

from strqueue.decorators import traced
from strqueue.exceptions import HandleSpaceExhausted
from strqueue.model import Ordering, QueueModel, RegistryModel
from strqueue.settings import Settings
from strqueue.tracing import LogTracer, Tracer

log = get_logger(__name__)

EMPTY: tuple[str, ...] = ()


class QueueRegistry:
    def __init__(
        self,
        tracer: Tracer | None = None,
        max_handle: int | None = None,
        synchronized: bool | None = None,
    ) -> None:
        settings = Settings()
        if tracer is None:
            tracer = LogTracer() if settings.debug else Tracer()
        if max_handle is None:
            max_handle = settings.max_handle
        if synchronized is None:
            synchronized = settings.synchronized
        self.tracer = tracer
        self.max_handle = max_handle
        self._lock: AbstractContextManager = (
            threading.RLock() if synchronized else nullcontext()
        )
        self._queues: dict[int, list[str]] = {}
        self._cnt = 0

    def __len__(self) -> int:
        return len(self._queues)

    def __contains__(self, handle: object) -> bool:
        return handle in self._queues

    @property
    def next_handle(self) -> int:
        """The handle the next `create()` will return"""
        return self._cnt

    def exists(self, handle: int) -> bool:
        return handle in self._queues

    def handles(self) -> Generator[int, None, None]:
        """Iterate live handles in ascending order"""
        with self._lock:
            handles = sorted(self._queues)
        yield from handles

    def _view(self, handle: int) -> Sequence[str]:
        # unknown handles read as an empty queue
        return self._queues.get(handle, EMPTY)

    @traced(returns=True)
    def create(self) -> int:
        """
        Allocate a new, empty queue.

        Raises:
            HandleSpaceExhausted: All handles below `max_handle` were issued

        Returns:
            The handle of the new queue
        """
        if self._cnt >= self.max_handle:
            raise HandleSpaceExhausted(
                f"Handle space exhausted (max_handle: {self.max_handle})"
            )
        handle = self._cnt
        self._queues[handle] = []
        self._cnt += 1
        return handle

    @traced()
    def delete(self, handle: int) -> None:
        """Destroy the queue. Its handle will never name a queue again."""
        if self._queues.pop(handle, None) is None:
            self.tracer.does_not_exist("delete", handle)
            return
        self.tracer.done("delete")

    @traced(returns=True)
    def size(self, handle: int) -> int:
        """Number of strings in the queue, `0` for unknown handles"""
        if handle not in self._queues:
            self.tracer.does_not_exist("size", handle)
        return len(self._view(handle))

    @traced()
    def insert_at(self, handle: int, position: int, value: str | None) -> None:
        """
        Insert `value` before `position`. A position at or beyond the end of
        the queue appends the value.

        Unknown handles, absent or non-string values and invalid positions
        are rejected without mutation.
        """
        queue = self._queues.get(handle)
        invalid = (
            not isinstance(value, str)
            or not isinstance(position, int)
            or position < 0
        )
        if queue is None or invalid:
            if queue is None:
                self.tracer.does_not_exist("insert_at", handle)
            if invalid:
                self.tracer.failed("insert_at")
            return
        if position >= len(queue):
            queue.append(value)
        else:
            queue.insert(position, value)
        self.tracer.done("insert_at")

    @traced()
    def remove_at(self, handle: int, position: int) -> None:
        """Remove the string at `position`, later strings move down by one"""
        queue = self._queues.get(handle)
        if queue is None:
            self.tracer.does_not_exist("remove_at", handle)
            return
        if not isinstance(position, int) or not 0 <= position < len(queue):
            self.tracer.does_not_contain("remove_at", handle, position)
            return
        del queue[position]
        self.tracer.done("remove_at")

    @traced(returns=True)
    def get_at(self, handle: int, position: int) -> str | None:
        """
        Get the string at `position`

        Returns:
            The string or `None` if the handle is unknown or the position out
            of range
        """
        queue = self._queues.get(handle)
        if queue is None:
            self.tracer.does_not_exist("get_at", handle)
            return None
        if not isinstance(position, int) or not 0 <= position < len(queue):
            self.tracer.does_not_contain("get_at", handle, position)
            return None
        return queue[position]

    @traced()
    def clear(self, handle: int) -> None:
        """Remove all strings but keep the queue"""
        queue = self._queues.get(handle)
        if queue is None:
            self.tracer.does_not_exist("clear", handle)
            return
        queue.clear()
        self.tracer.done("clear")

    @traced(returns=True)
    def compare(self, handle1: int, handle2: int) -> Ordering:
        """
        Compare two queues lexicographically, string by string. A queue that
        is a strict prefix of the other one is less. Unknown handles compare
        as empty queues.
        """
        for handle in (handle1, handle2):
            if handle not in self._queues:
                self.tracer.does_not_exist("compare", handle)
        # lists and tuples are not comparable to each other
        return Ordering.of(tuple(self._view(handle1)), tuple(self._view(handle2)))

    def dump(self, handle: int) -> QueueModel | None:
        """Get a copy of the queue contents"""
        with self._lock:
            queue = self._queues.get(handle)
            if queue is None:
                return None
            return QueueModel(handle=handle, items=list(queue))

    def dump_all(self) -> RegistryModel:
        with self._lock:
            queues = [
                QueueModel(handle=h, items=list(q))
                for h, q in sorted(self._queues.items())
            ]
            return RegistryModel(next_handle=self._cnt, queues=queues)


@cache
def get_registry() -> QueueRegistry:
    """Get the process-wide registry configured from the environment"""
    settings = Settings()
    log.info(
        "Initializing queue registry ...",
        debug=settings.debug,
        synchronized=settings.synchronized,
    )
    return QueueRegistry()
