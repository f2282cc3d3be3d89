from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.shift_planner.shift_planner.database.bootstrap import seed_from_fixtures
from src.shift_planner.shift_planner.database.connection import DBConfig, DatabaseConnection
from src.shift_planner.shift_planner.database.fixtures import load_fixtures


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    seed_from_fixtures(conn, load_fixtures(settings.FIXTURES_DIR))

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
