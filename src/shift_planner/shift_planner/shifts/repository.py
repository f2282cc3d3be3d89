from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[Shift]:
        """All shifts in insertion order."""

        raise NotImplementedError

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        raise NotImplementedError

    def add(self, shift: Shift) -> None:
        raise NotImplementedError

    def replace(self, shift: Shift) -> bool:
        """Overwrite every field of an existing shift in one step."""

        raise NotImplementedError
