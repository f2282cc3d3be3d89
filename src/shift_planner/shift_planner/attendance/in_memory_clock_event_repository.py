from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from .model import ClockEvent
from .repository import ClockEventRepository


class InMemoryClockEventRepository(ClockEventRepository):
    def __init__(self, events: Iterable[ClockEvent] = ()):
        self._events = list(events)

    def list_all(self) -> Sequence[ClockEvent]:
        return list(self._events)

    def list_for_date(self, work_date: date) -> Sequence[ClockEvent]:
        return [e for e in self._events if e.work_date == work_date]

    def add(self, event: ClockEvent) -> None:
        self._events.append(event)
