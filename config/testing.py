import os

SECRET_KEY = "test-secret"

DATA_SOURCE = "fixtures"
FIXTURES_DIR = os.getenv("FIXTURES_DIR", os.path.join(os.path.dirname(os.path.dirname(__file__)), "data"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shift_planner_test"),
}

TOLERANCE_MINUTES = 0

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
