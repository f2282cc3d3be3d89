from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status derived by reconciling a planned shift with clock events."""

    ON_TIME = "ON_TIME"
    LATE_IN = "LATE_IN"
    EARLY_OUT = "EARLY_OUT"
    ABSENT = "ABSENT"
    TIME_OFF = "TIME_OFF"
    UNKNOWN = "UNKNOWN"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    AttendanceStatus.ON_TIME: "On Time",
    AttendanceStatus.LATE_IN: "Late In",
    AttendanceStatus.EARLY_OUT: "Early Out",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.TIME_OFF: "Time Off",
    AttendanceStatus.UNKNOWN: "Unknown",
}


class LeaveStatus(str, Enum):
    """Approval state of a leave request (owned by the leave workflow)."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
