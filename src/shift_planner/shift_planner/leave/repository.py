from __future__ import annotations

from typing import Protocol, Sequence

from .model import LeaveRequest


class LeaveRepository(Protocol):
    def list_all(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError
