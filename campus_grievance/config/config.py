import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str) -> list[str]:
    raw = os.getenv(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Wire-level status strings that may not be left once reached, e.g. "Closed".
GRIEVANCE_LOCKED_STATUSES = _env_list("GRIEVANCE_LOCKED_STATUSES")

# When enabled, an assignee must exist in the users table with role "authority".
GRIEVANCE_VERIFY_ASSIGNEE = _env_flag("GRIEVANCE_VERIFY_ASSIGNEE")
