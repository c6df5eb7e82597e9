# Руководство к файлу
# Назначение: ограниченная FIFO-очередь на asyncio.Queue с однократным закрытием.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: закрытие будит всех ожидающих читателей; после опустошения get() бросает QueueClosedError.

from __future__ import annotations

import asyncio
from typing import AsyncIterator, Generic, TypeVar

from titlextractor.core.errors import QueueClosedError


T = TypeVar("T")

_CLOSED = object()


class ClosableQueue(Generic[T]):
    """Очередь с обратным давлением: put() ждёт при переполнении, get() — при пустой очереди."""

    def __init__(self, maxsize: int) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be >= 1")
        self._q: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._maxsize = maxsize
        self._closed = False
        self._marker_queued = False

    @property
    def maxsize(self) -> int:
        return self._maxsize

    @property
    def closed(self) -> bool:
        return self._closed

    def size(self) -> int:
        return self._q.qsize() - (1 if self._marker_queued else 0)

    def empty(self) -> bool:
        return self.size() == 0

    async def put(self, item: T) -> None:
        if self._closed:
            raise QueueClosedError("put() on a closed queue")
        await self._q.put(item)

    async def get(self) -> T:
        if self._closed and self.empty():
            raise QueueClosedError("queue is closed and drained")
        item = await self._q.get()
        if item is _CLOSED:
            # маркер возвращаем обратно, чтобы проснулся следующий читатель
            self._q.put_nowait(_CLOSED)
            raise QueueClosedError("queue is closed and drained")
        return item

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        # Читатели ждут только на пустой очереди, а в ней место для маркера есть всегда.
        if not self._q.full():
            self._q.put_nowait(_CLOSED)
            self._marker_queued = True

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        try:
            return await self.get()
        except QueueClosedError:
            raise StopAsyncIteration from None
