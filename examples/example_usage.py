"""Example: drive the planner through the service layer (no Flask).

Loads the bundled fixtures, moves a shift, then prints the day's attendance.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.shift_planner.shift_planner.container import build_container
from src.shift_planner.shift_planner.core.exceptions import ConflictError
from src.shift_planner.shift_planner.database.fixtures import load_fixtures


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data=load_fixtures(settings.FIXTURES_DIR))

    moved = container.assignment_service.reassign("S6", "E2", date(2024, 6, 5))
    print("moved:", moved.to_dict())

    try:
        container.assignment_service.reassign("S2", "E1", date(2024, 6, 3))
    except ConflictError as e:
        print("rejected:", e)

    for row in container.query_service.daily_attendance(date(2024, 6, 3)):
        print(row.to_dict())


if __name__ == "__main__":
    main()
