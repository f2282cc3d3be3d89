from __future__ import annotations

from typing import Iterable, Sequence

from .model import LeaveRequest
from .repository import LeaveRepository


class InMemoryLeaveRepository(LeaveRepository):
    def __init__(self, requests: Iterable[LeaveRequest] = ()):
        self._requests = list(requests)

    def list_all(self) -> Sequence[LeaveRequest]:
        return list(self._requests)
