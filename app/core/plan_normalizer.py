"""Normalizes a plan parsed from the model reply."""

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional


def today_utc() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def stamp_start_date(
    plan: Dict[str, Any], today: Optional[date] = None
) -> Dict[str, Any]:
    """
    Returns a copy of the plan with ``startDate`` set to today (UTC, YYYY-MM-DD).

    The model has no reliable clock, so whatever date it produced is replaced.
    All other fields pass through unchanged.
    """
    stamped = dict(plan)
    stamped["startDate"] = (today or today_utc()).isoformat()
    return stamped


def plan_shape_problems(plan: Dict[str, Any]) -> List[str]:
    """Lists missing or malformed top-level plan fields. Empty means well formed."""
    problems = []
    if not isinstance(plan.get("planName"), str) or not plan.get("planName"):
        problems.append("missing planName")
    if "days" not in plan:
        problems.append("missing days")
    elif not isinstance(plan["days"], list):
        problems.append("days is not a list")
    return problems
