"""Environment-variable-based configuration for the daily workout job."""

from __future__ import annotations

import os
from pathlib import Path

PROFILE_PATH: Path = Path(
    os.environ.get("PLAN_PROFILE_PATH", "profiles/my_profile.json")
).expanduser()
REMINDER_HOUR: int = int(os.environ.get("PLAN_REMINDER_HOUR", "6"))
REMINDER_MINUTE: int = int(os.environ.get("PLAN_REMINDER_MINUTE", "0"))
LOG_LEVEL: str = os.environ.get("PLAN_LOG_LEVEL", "INFO").upper()
EXPORT_PATH: Path | None = (
    Path(os.environ["PLAN_EXPORT_PATH"]).expanduser()
    if os.environ.get("PLAN_EXPORT_PATH")
    else None
)
