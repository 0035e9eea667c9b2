"""
Observable state cell with a single writer and any number of readers.

Every observer receives the value current at subscription time followed by
every later value, in the order they were set. A set() issued from inside an
observer callback is queued and delivered after the current value has reached
every observer, so no observer ever sees an older value after a newer one.
An observer that raises is logged and skipped; the others still receive the value.
"""

from __future__ import annotations

import asyncio
from collections import deque
from typing import AsyncIterator, Callable, Generic, TypeVar

from catalog_browser.utils.logger import get_logger

logger = get_logger()

T = TypeVar("T")

_CLOSED = object()


class StateStore(Generic[T]):
    def __init__(self, initial: T) -> None:
        self._value = initial
        self._observers: list[Callable[[T], None]] = []
        self._queues: list[asyncio.Queue] = []
        self._pending: deque[T] = deque()
        self._dispatching = False
        self._closed = False

    @property
    def value(self) -> T:
        return self._value

    @property
    def closed(self) -> bool:
        return self._closed

    def set(self, value: T) -> None:
        if self._closed:
            raise RuntimeError("State store is closed")
        self._value = value
        self._pending.append(value)
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._pending:
                v = self._pending.popleft()
                for q in list(self._queues):
                    q.put_nowait(v)
                for cb in list(self._observers):
                    try:
                        cb(v)
                    except Exception:
                        logger.exception("State observer %r failed on %r", cb, v)
        finally:
            self._dispatching = False

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register callback, call it with the current value, return an unsubscribe function."""
        self._observers.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    async def stream(self) -> AsyncIterator[T]:
        """Yield the current value and every later one; ends when the store closes."""
        q: asyncio.Queue = asyncio.Queue()
        q.put_nowait(self._value)
        if self._closed:
            q.put_nowait(_CLOSED)
        else:
            self._queues.append(q)
        try:
            while True:
                v = await q.get()
                if v is _CLOSED:
                    return
                yield v
        finally:
            if q in self._queues:
                self._queues.remove(q)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        for q in self._queues:
            q.put_nowait(_CLOSED)
        self._observers.clear()
