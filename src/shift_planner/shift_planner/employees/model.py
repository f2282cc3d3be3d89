from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Directory entry. Referenced by id only; the planner never mutates it."""

    employee_id: str
    name: str
    department: str = ""
