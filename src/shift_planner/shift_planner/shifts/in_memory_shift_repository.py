from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence

from .model import Shift
from .repository import ShiftRepository


class InMemoryShiftRepository(ShiftRepository):
    """Dict-backed repository; dicts keep insertion order, which is the list order."""

    def __init__(self, shifts: Iterable[Shift] = ()):
        self._by_id: Dict[str, Shift] = {}
        for s in shifts:
            self._by_id[s.shift_id] = s

    def list_all(self) -> Sequence[Shift]:
        return list(self._by_id.values())

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        return self._by_id.get(shift_id)

    def add(self, shift: Shift) -> None:
        self._by_id[shift.shift_id] = shift

    def replace(self, shift: Shift) -> bool:
        if shift.shift_id not in self._by_id:
            return False
        self._by_id[shift.shift_id] = shift
        return True
