"""Application configuration and constants."""
import os
from pathlib import Path

# Directory paths
BASE_DIR = Path(__file__).resolve().parent.parent

# SQLite database file (override with EMPLOYEES_DATABASE_PATH)
DATABASE_PATH = Path(os.environ.get("EMPLOYEES_DATABASE_PATH", str(BASE_DIR / "employees.db")))
DATABASE_PATH.parent.mkdir(parents=True, exist_ok=True)

# Record store backend: "sqlite" or "memory"
STORE_BACKEND = os.environ.get("EMPLOYEES_STORE", "sqlite").strip().lower()
STORE_BACKENDS = {"sqlite", "memory"}

# Logging
LOG_LEVEL = os.environ.get("EMPLOYEES_LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("EMPLOYEES_LOG_FILE") or None

# API metadata
API_TITLE = os.environ.get("EMPLOYEES_API_TITLE", "Employee Records API")
API_VERSION = "1.0.0"
API_PREFIX = "/api/employees"
