"""Bounded reuse pool for request and response objects."""
import queue
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Hands out reusable objects and takes them back.

    ``acquire`` is a context manager: the object goes back to the pool exactly
    once when the block exits, whether it exits normally or with an exception.
    At most ``max_idle`` released objects are kept; extras are dropped.
    """

    def __init__(self, factory: Callable[[], T], reset: Optional[Callable[[T], None]] = None, max_idle: int = 1):
        self._factory = factory
        self._reset = reset
        self._idle: "queue.LifoQueue[T]" = queue.LifoQueue(maxsize=max_idle)
        self.created = 0

    def _take(self) -> T:
        try:
            return self._idle.get_nowait()
        except queue.Empty:
            self.created += 1
            return self._factory()

    def _give_back(self, item: T) -> None:
        if self._reset is not None:
            self._reset(item)
        try:
            self._idle.put_nowait(item)
        except queue.Full:
            pass

    @property
    def idle(self) -> int:
        return self._idle.qsize()

    @contextmanager
    def acquire(self) -> Iterator[T]:
        item = self._take()
        try:
            yield item
        finally:
            self._give_back(item)
