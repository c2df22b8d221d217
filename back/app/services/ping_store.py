# app/services/ping_store.py
from __future__ import annotations

from collections import deque
from datetime import datetime
from typing import Callable, Deque, List

import structlog

from app.schemas.ping import PingEvent
from app.utils.rwlock import AsyncReadWriteLock

logger = structlog.get_logger(__name__)

DEFAULT_CAPACITY = 8


def local_now() -> datetime:
    return datetime.now().astimezone()


class PingStore:
    """
    История пингов в памяти: фиксированная ёмкость, самый свежий первым.

    Все чтения и записи идут через одну блокировку читатели/писатель,
    вставка вместе с вытеснением атомарна для любого читателя.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        clock: Callable[[], datetime] = local_now,
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._clock = clock
        self._lock = AsyncReadWriteLock()
        # appendleft на полном deque выбрасывает самый старый элемент справа
        self._pings: Deque[PingEvent] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._pings)

    async def record(self, reason: str) -> PingEvent:
        """Добавить пинг в начало истории; старейший вытесняется при переполнении."""
        async with self._lock.writer():
            event = PingEvent(reason=reason, timestamp=self._clock())
            evicted = len(self._pings) == self._capacity
            self._pings.appendleft(event)
            size = len(self._pings)

        logger.debug("ping_store.recorded", size=size, evicted=evicted)
        return event

    async def snapshot(self) -> List[PingEvent]:
        """Копия истории, самый свежий первым. Хранилище не меняется."""
        async with self._lock.reader():
            return list(self._pings)
