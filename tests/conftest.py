from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from src.shift_planner.shift_planner.shifts.in_memory_shift_repository import InMemoryShiftRepository
from src.shift_planner.shift_planner.shifts.model import Shift
from src.shift_planner.shift_planner.shifts.service import ShiftStore
from src.shift_planner.shift_planner.slots.model import TimeOfDay

DATA_DIR = Path(__file__).resolve().parents[1] / "data"

MON = date(2024, 6, 3)
TUE = date(2024, 6, 4)


def make_shift(shift_id, employee_id, work_date, start, end, department="Engineering") -> Shift:
    return Shift(
        shift_id=shift_id,
        employee_id=employee_id,
        work_date=work_date,
        start=TimeOfDay.parse(start),
        end=TimeOfDay.parse(end),
        department=department,
    )


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def store() -> ShiftStore:
    """S1 for E1 Monday 09-17, S2 for E2 Monday 13-21, S3 unassigned Tuesday 08-12."""

    return ShiftStore(
        InMemoryShiftRepository(
            [
                make_shift("S1", "E1", MON, "09:00", "17:00"),
                make_shift("S2", "E2", MON, "13:00", "21:00", department="Sales"),
                make_shift("S3", None, TUE, "08:00", "12:00"),
            ]
        )
    )
