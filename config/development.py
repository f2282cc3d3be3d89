import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# 'fixtures' keeps everything in memory, seeded from FIXTURES_DIR; 'mysql' persists shifts and clock events
DATA_SOURCE = os.getenv("DATA_SOURCE", "fixtures")
FIXTURES_DIR = os.getenv("FIXTURES_DIR", os.path.join(os.path.dirname(os.path.dirname(__file__)), "data"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shift_planner"),
}

# Minutes of lateness/earliness tolerated before LATE_IN / EARLY_OUT
TOLERANCE_MINUTES = int(os.getenv("TOLERANCE_MINUTES", "0"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled (mysql only), apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also load fixtures into MySQL on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
