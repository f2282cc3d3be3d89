from __future__ import annotations

import logging
from datetime import date
from typing import AbstractSet, Dict, List, Optional, Sequence, Tuple

from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_TOLERANCE_MINUTES
from ..core.exceptions import ValidationError
from ..shifts.model import Shift
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, ClockEvent

logger = logging.getLogger(__name__)


class AttendanceReconciler:
    """Derive one AttendanceRecord per planned shift of a single day.

    Pure over its inputs: never touches the shift store, output order follows
    the input shift order.
    """

    def __init__(
        self,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES,
    ):
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._tolerance = require_non_negative(tolerance_minutes, "Tolerance minutes")

    @property
    def tolerance_minutes(self) -> int:
        return self._tolerance

    def reconcile(
        self,
        shifts: Sequence[Shift],
        events: Sequence[ClockEvent],
        *,
        approved_leave: Optional[AbstractSet[Tuple[str, date]]] = None,
    ) -> List[AttendanceRecord]:
        self._require_single_date(shifts, events)
        approved_leave = approved_leave or frozenset()
        by_employee = self._index_events(events)

        records: List[AttendanceRecord] = []
        for shift in shifts:
            key = (shift.employee_id, shift.work_date)
            event = by_employee.get(key) if shift.is_assigned else None
            strategy = self._factory.for_shift(
                shift=shift,
                event=event,
                on_leave=key in approved_leave,
                tolerance_minutes=self._tolerance,
            )
            decision = strategy.decide(shift=shift, event=event)
            records.append(
                AttendanceRecord(
                    shift=shift,
                    status=decision.status,
                    actual_start=event.actual_start if event else None,
                    actual_end=event.actual_end if event else None,
                    notes=event.note if event else None,
                    deviation_minutes=decision.deviation_minutes,
                )
            )
        return records

    @staticmethod
    def _require_single_date(shifts: Sequence[Shift], events: Sequence[ClockEvent]) -> None:
        dates = {s.work_date for s in shifts} | {e.work_date for e in events}
        if len(dates) > 1:
            listed = ", ".join(sorted(d.strftime("%Y-%m-%d") for d in dates))
            raise ValidationError(f"Reconciliation covers one date at a time, got: {listed}")

    @staticmethod
    def _index_events(events: Sequence[ClockEvent]) -> Dict[Tuple[str, date], ClockEvent]:
        # First event per employee/date wins.
        index: Dict[Tuple[str, date], ClockEvent] = {}
        for event in events:
            key = (event.employee_id, event.work_date)
            if key in index:
                logger.warning("Ignoring extra clock event for %s on %s", event.employee_id, event.work_date)
                continue
            index[key] = event
        return index
