from __future__ import annotations

import pytest

from src.shift_planner.shift_planner.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.shift_planner.shift_planner.shifts.in_memory_shift_repository import InMemoryShiftRepository
from src.shift_planner.shift_planner.shifts.model import NewShift
from src.shift_planner.shift_planner.shifts.service import ShiftStore
from src.shift_planner.shift_planner.slots.model import TimeOfDay

from conftest import MON, TUE, make_shift


def new_shift(employee_id, work_date, start, end, department="Engineering", shift_id=None) -> NewShift:
    return NewShift(
        work_date=work_date,
        start=TimeOfDay.parse(start),
        end=TimeOfDay.parse(end),
        department=department,
        employee_id=employee_id,
        shift_id=shift_id,
    )


def test_create_overlapping_shift_for_same_employee_conflicts(store):
    with pytest.raises(ConflictError):
        store.create_shift(new_shift("E1", MON, "12:00", "20:00"))

    assert len(store.list_shifts(employee_id="E1")) == 1


def test_touching_shifts_do_not_overlap(store):
    shift = store.create_shift(new_shift("E1", MON, "17:00", "21:00"))
    assert shift.employee_id == "E1"
    assert [s.shift_id for s in store.list_shifts(employee_id="E1", work_date=MON)] == ["S1", shift.shift_id]


def test_same_slot_for_other_employee_or_pool_is_allowed(store):
    store.create_shift(new_shift("E3", MON, "09:00", "17:00"))
    store.create_shift(new_shift(None, MON, "09:00", "17:00"))
    store.create_shift(new_shift(None, MON, "09:00", "17:00"))

    assert len(store.list_shifts(work_date=MON)) == 5


@pytest.mark.parametrize("start,end", [("17:00", "09:00"), ("09:00", "09:00")])
def test_create_rejects_non_positive_range(store, start, end):
    with pytest.raises(ValidationError):
        store.create_shift(new_shift("E3", MON, start, end))


def test_create_requires_department(store):
    with pytest.raises(ValidationError):
        store.create_shift(new_shift("E3", MON, "09:00", "10:00", department="  "))


def test_create_generates_fresh_ids():
    store = ShiftStore(
        InMemoryShiftRepository([make_shift("S1", "E1", MON, "09:00", "10:00"), make_shift("S3", "E1", MON, "11:00", "12:00")])
    )
    shift = store.create_shift(new_shift("E2", MON, "09:00", "10:00"))
    assert shift.shift_id == "S4"


def test_create_rejects_duplicate_explicit_id(store):
    with pytest.raises(ConflictError):
        store.create_shift(new_shift("E3", TUE, "09:00", "10:00", shift_id="S1"))


def test_list_filters_are_anded_and_keep_insertion_order(store):
    store.create_shift(new_shift("E3", MON, "06:00", "08:00", department="Sales"))

    assert [s.shift_id for s in store.list_shifts()] == ["S1", "S2", "S3", "S4"]
    assert [s.shift_id for s in store.list_shifts(work_date=MON, department="Sales")] == ["S2", "S4"]
    assert store.list_shifts(work_date=TUE, employee_id="E1") == []


def test_get_unassigned_returns_pool(store):
    assert [s.shift_id for s in store.get_unassigned()] == ["S3"]


def test_shift_requires_end_after_start():
    with pytest.raises(ValidationError):
        make_shift("X1", "E1", MON, "17:00", "09:00")
    with pytest.raises(ValidationError):
        make_shift("X2", "E1", MON, "09:00", "09:00")


def test_seed_rejects_overlap_and_leaves_store_unchanged(store):
    before = store.list_shifts()

    with pytest.raises(ConflictError):
        store.seed([make_shift("S9", "E1", MON, "16:00", "18:00")])

    assert store.list_shifts() == before


def test_seed_can_skip_existing_ids(store):
    added = store.seed(
        [make_shift("S1", "E1", MON, "09:00", "17:00"), make_shift("S9", "E1", TUE, "09:00", "17:00")],
        skip_existing=True,
    )

    assert added == 1
    assert [s.shift_id for s in store.list_shifts(employee_id="E1")] == ["S1", "S9"]


def test_get_shift_unknown_id(store):
    with pytest.raises(NotFoundError):
        store.get_shift("nope")


def test_replace_conflict_leaves_store_unchanged(store):
    before = store.list_shifts()
    moved = make_shift("S2", "E1", MON, "13:00", "21:00", department="Sales")

    with pytest.raises(ConflictError):
        store.replace_shift(moved)

    assert store.list_shifts() == before
