from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_iso_date
from ..shifts.model import Shift


@dataclass(frozen=True)
class GridRow:
    employee_id: str
    name: str
    cells: Dict[date, List[Shift]] = field(default_factory=dict)


@dataclass(frozen=True)
class WeeklyGrid:
    """employee x day -> shifts, for the planning view."""

    days: List[date]
    rows: List[GridRow]

    def cell(self, employee_id: str, day: date) -> List[Shift]:
        for row in self.rows:
            if row.employee_id == employee_id:
                return row.cells.get(day, [])
        return []

    def to_dict(self) -> dict:
        return {
            "days": [format_iso_date(d) for d in self.days],
            "rows": [
                {
                    "employeeId": row.employee_id,
                    "name": row.name,
                    "cells": {format_iso_date(d): [s.to_dict() for s in row.cells.get(d, [])] for d in self.days},
                }
                for row in self.rows
            ],
        }


@dataclass(frozen=True)
class AttendanceRow:
    employee_name: str
    record: AttendanceRecord

    def to_dict(self) -> dict:
        row = self.record.to_dict()
        row["employeeName"] = self.employee_name
        return row
