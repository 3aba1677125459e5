"""Plan runner — builds and prints one adjusted 7-day plan.

Usage:
    python -m runner.plan                                  # default profile, no history
    python -m runner.plan --profile me.json --history log.json
    python -m runner.plan --start-date 2026-02-09 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from triathlon_engine.exceptions import ConfigError, PlanEngineError, PlanValidationError
from triathlon_engine.history import build_rules_context
from triathlon_engine.models.profile import UserProfile, default_profile
from triathlon_engine.models.rules_context import RulesContext
from triathlon_engine.planner import build_week_plan
from triathlon_engine.rendering import render_plan_text
from triathlon_engine.serialization import (
    as_json_list,
    as_json_object,
    fatigue_entry_from_dict,
    plan_to_json_string,
    profile_from_dict,
    workout_log_from_dict,
)

from runner.config import (
    DEFAULT_TIMEZONE,
    PLAN_HISTORY_PATH,
    PLAN_PROFILE_PATH,
    load_log_level,
    load_output_format,
)

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> object:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_profile(path: Path | None) -> UserProfile:
    """Load a profile from disk, or the default profile when *path* is None."""
    if path is None:
        logger.info("No profile given, using default profile")
        return default_profile()
    return profile_from_dict(_load_json(path))


def load_context(path: Path | None, start_date: date) -> RulesContext:
    """Load logged workouts and readiness reports and aggregate them."""
    if path is None:
        return RulesContext.empty()
    data = as_json_object(_load_json(path), "history")
    workouts = [workout_log_from_dict(w) for w in as_json_list(data.get("workouts"), "workouts")]
    fatigue = [fatigue_entry_from_dict(f) for f in as_json_list(data.get("fatigue"), "fatigue")]
    return build_rules_context(workouts, start_date, fatigue)


def today_in(timezone: str) -> date:
    """Current calendar date in *timezone*, falling back to DEFAULT_TIMEZONE."""
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using %s", timezone, DEFAULT_TIMEZONE)
        tz = ZoneInfo(DEFAULT_TIMEZONE)
    return datetime.now(tz).date()


def _parse_start_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date (YYYY-MM-DD): {raw!r}") from None


def run(args: argparse.Namespace) -> str:
    """Build the plan described by *args* and return it formatted."""
    profile = load_profile(args.profile)
    start_date = args.start_date or today_in(profile.timezone)
    context = load_context(args.history, start_date)

    plan = build_week_plan(profile, start_date, context)
    logger.info(
        "Generated plan starting %s with %d warning(s)",
        start_date.isoformat(),
        len(plan.warnings),
    )

    if load_output_format("json" if args.json else None) == "json":
        return plan_to_json_string(plan)
    return render_plan_text(plan)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a safety-adjusted 7-day training plan")
    parser.add_argument(
        "--profile", type=Path, default=PLAN_PROFILE_PATH, help="Profile JSON file"
    )
    parser.add_argument(
        "--history",
        type=Path,
        default=PLAN_HISTORY_PATH,
        help="History JSON file with 'workouts' and 'fatigue' lists",
    )
    parser.add_argument(
        "--start-date",
        type=_parse_start_date,
        default=None,
        help="First day of the plan (default: today in the profile's timezone)",
    )
    parser.add_argument("--json", action="store_true", help="Print the plan as JSON")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        level = load_log_level(args.log_level)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        output = run(args)
    except (PlanValidationError, ConfigError) as exc:
        logger.error("Invalid input: %s", exc)
        return 2
    except FileNotFoundError as exc:
        logger.error("File not found: %s", exc.filename)
        return 2
    except json.JSONDecodeError as exc:
        logger.error("Malformed JSON input: %s", exc)
        return 2
    except PlanEngineError as exc:
        logger.error("Plan generation failed: %s", exc)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
