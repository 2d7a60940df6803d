"""Daily workout job — logs today's workout and plan status for a profile.

Usage:
    python -m plan_scheduler.daily --once               # single run (for cron)
    python -m plan_scheduler.daily --daemon             # APScheduler loop
    python -m plan_scheduler.daily --export plan.csv    # write the full plan
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from pathlib import Path

from plan_engine.engine import PlanEngine
from plan_engine.exceptions import ProfileError
from plan_engine.export import plan_to_dataframe
from plan_engine.models.profile import UserProfile
from plan_engine.validation import validate_profile

from plan_scheduler.config import (
    EXPORT_PATH,
    LOG_LEVEL,
    PROFILE_PATH,
    REMINDER_HOUR,
    REMINDER_MINUTE,
)

logger = logging.getLogger(__name__)


def load_profile(path: Path) -> UserProfile:
    """Load a stored profile document from disk.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ProfileError: If the document cannot be parsed into a profile.
    """
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ProfileError(f"Profile {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ProfileError(f"Profile {path} must be a JSON object")
    return UserProfile.from_dict(data)


def daily_job(
    profile_path: Path = PROFILE_PATH,
    engine: PlanEngine | None = None,
    today: date | None = None,
) -> str | None:
    """Execute one daily cycle: load the profile, log today's workout.

    Returns the workout text, or None when the profile could not be read.
    """
    logger.info("Starting daily workout job")

    try:
        profile = load_profile(profile_path)
    except FileNotFoundError:
        logger.error("Profile not found at %s", profile_path)
        return None
    except ProfileError as exc:
        logger.error("Invalid profile at %s: %s", profile_path, exc)
        return None

    engine = engine or PlanEngine()
    for problem in validate_profile(profile, engine.catalog):
        logger.warning("Profile problem: %s", problem)

    workout = engine.todays_workout(profile, today)
    logger.info("Today's workout: %s", workout)

    notice = engine.plan_status_notice(profile, today)
    if notice:
        logger.info("Plan status: %s", notice)

    logger.info("Daily workout job complete")
    return workout


def export_plan(
    destination: Path,
    profile_path: Path = PROFILE_PATH,
    engine: PlanEngine | None = None,
) -> int:
    """Write the expanded plan as CSV. Returns the number of rows written."""
    profile = load_profile(profile_path)
    workouts = (engine or PlanEngine()).expand(profile)
    if not workouts:
        logger.warning("No plan to export for profile %s", profile_path)
    frame = plan_to_dataframe(workouts)
    frame.to_csv(destination, index=False)
    logger.info("Exported %d plan days to %s", len(frame), destination)
    return len(frame)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Training plan daily workout job")
    parser.add_argument(
        "--profile", type=Path, default=PROFILE_PATH, help="Profile JSON document"
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    group.add_argument(
        "--export",
        type=Path,
        nargs="?",
        const=EXPORT_PATH,
        help="Write the full plan as CSV and exit",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.once:
        daily_job(args.profile)
    elif args.daemon:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            daily_job,
            "cron",
            hour=REMINDER_HOUR,
            minute=REMINDER_MINUTE,
            args=[args.profile],
            id="daily_workout_job",
        )
        logger.info(
            "Scheduler started — daily job at %02d:%02d",
            REMINDER_HOUR,
            REMINDER_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")
    else:
        if args.export is None:
            parser.error("--export needs a path or PLAN_EXPORT_PATH")
        try:
            export_plan(args.export, args.profile)
        except (FileNotFoundError, ProfileError) as exc:
            logger.error("Cannot export plan: %s", exc)


if __name__ == "__main__":
    main()
