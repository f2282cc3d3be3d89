from __future__ import annotations

import threading
from datetime import date

import pytest

from src.shift_planner.shift_planner.assignments.model import ReassignRequest
from src.shift_planner.shift_planner.assignments.service import AssignmentService
from src.shift_planner.shift_planner.core.exceptions import ConflictError, NotFoundError, RangeError, ValidationError
from src.shift_planner.shift_planner.employees.in_memory_employee_directory import InMemoryEmployeeDirectory
from src.shift_planner.shift_planner.employees.model import Employee
from src.shift_planner.shift_planner.slots.model import TimeOfDay

from conftest import MON, TUE


def test_reassign_to_free_employee_keeps_times(store):
    svc = AssignmentService(store)

    moved = svc.reassign("S1", "E2", TUE)

    assert moved.employee_id == "E2"
    assert moved.work_date == TUE
    assert str(moved.start) == "09:00"
    assert str(moved.end) == "17:00"
    assert store.get_shift("S1") == moved


def test_reassign_with_new_start_preserves_duration(store):
    moved = AssignmentService(store).reassign("S1", "E1", MON, TimeOfDay.parse("06:30"))

    assert str(moved.start) == "06:30"
    assert str(moved.end) == "14:30"


def test_reassign_excludes_the_moving_shift_itself(store):
    # Sliding S1 by an hour overlaps its own old slot, which must not count.
    moved = AssignmentService(store).reassign("S1", "E1", MON, TimeOfDay.parse("10:00"))
    assert str(moved.end) == "18:00"


def test_conflicting_reassign_is_atomic(store):
    before = store.list_shifts()

    with pytest.raises(ConflictError):
        AssignmentService(store).reassign("S1", "E2", MON)

    assert store.list_shifts() == before


def test_reassign_twice_yields_same_state(store):
    svc = AssignmentService(store)

    first = svc.reassign("S3", "E1", TUE, TimeOfDay.parse("13:00"))
    second = svc.reassign("S3", "E1", TUE, TimeOfDay.parse("13:00"))

    assert first == second
    assert store.get_shift("S3") == second


def test_reassign_unknown_shift(store):
    with pytest.raises(NotFoundError):
        AssignmentService(store).reassign("S99", "E1", MON)


def test_reassign_unknown_employee_when_directory_wired(store):
    directory = InMemoryEmployeeDirectory([Employee("E1", "Alice"), Employee("E2", "Bob")])

    with pytest.raises(NotFoundError):
        AssignmentService(store, directory).reassign("S3", "E9", TUE)

    assert store.get_shift("S3").employee_id is None


def test_reassign_past_midnight_is_range_error(store):
    before = store.list_shifts()

    with pytest.raises(RangeError):
        AssignmentService(store).reassign("S1", "E1", MON, TimeOfDay.parse("20:00"))

    assert store.list_shifts() == before


def test_reassign_to_pool(store):
    moved = AssignmentService(store).reassign("S2", None, MON)

    assert moved.employee_id is None
    assert [s.shift_id for s in store.get_unassigned()] == ["S2", "S3"]


def test_apply_parses_drop_request(store):
    request = ReassignRequest.from_raw({"targetEmployeeId": "E3", "targetDate": "2024-06-04", "targetStart": "09:00"})

    moved = AssignmentService(store).apply("S3", request)

    assert moved.employee_id == "E3"
    assert str(moved.start) == "09:00"
    assert str(moved.end) == "13:00"


def test_drop_request_rejects_bad_date():
    with pytest.raises(ValidationError):
        ReassignRequest.from_raw({"targetEmployeeId": "E1", "targetDate": "06/04/2024"})


def test_concurrent_moves_into_same_slot_only_one_wins(store):
    svc = AssignmentService(store)
    barrier = threading.Barrier(2)
    outcomes = []

    def move(shift_id):
        barrier.wait()
        try:
            svc.reassign(shift_id, "E3", date(2024, 6, 7), TimeOfDay.parse("09:00"))
            outcomes.append("ok")
        except ConflictError:
            outcomes.append("conflict")

    threads = [threading.Thread(target=move, args=(sid,)) for sid in ("S1", "S3")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(outcomes) == ["conflict", "ok"]
    assert len(store.list_shifts(employee_id="E3")) == 1
