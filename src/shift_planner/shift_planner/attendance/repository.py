from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import ClockEvent


class ClockEventRepository(Protocol):
    def list_all(self) -> Sequence[ClockEvent]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[ClockEvent]:
        """Events of one day, in the order they were recorded."""

        raise NotImplementedError

    def add(self, event: ClockEvent) -> None:
        raise NotImplementedError
