"""Tests for plan normalization."""

import re
from datetime import date
import pytest
from app.core import plan_normalizer
from app.core.plan_normalizer import plan_shape_problems, stamp_start_date


def make_plan(start_date="1999-12-31"):
    return {
        "planName": "Your 10-Day Plan for Smoking",
        "startDate": start_date,
        "days": [
            {"day": 1, "tasks": [{"id": "d1_t1", "title": "Count cigarettes", "completed": False}]}
        ],
    }


@pytest.mark.parametrize("start_date", ["1999-12-31", "2030-01-01", "", None, "tomorrow"])
def test_start_date_is_overwritten(start_date):
    """Test that the model's date is never kept."""
    stamped = stamp_start_date(make_plan(start_date), today=date(2024, 3, 5))
    assert stamped["startDate"] == "2024-03-05"


def test_start_date_defaults_to_today_utc(monkeypatch):
    """Test the default time source."""
    monkeypatch.setattr(plan_normalizer, "today_utc", lambda: date(2025, 11, 2))
    assert stamp_start_date({})["startDate"] == "2025-11-02"


def test_real_clock_format():
    """Test the YYYY-MM-DD format with the real clock."""
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", stamp_start_date({})["startDate"])


def test_other_fields_pass_through():
    """Test that nothing else changes and the input is not mutated."""
    plan = make_plan()
    stamped = stamp_start_date(plan, today=date(2024, 3, 5))
    assert plan["startDate"] == "1999-12-31"
    assert stamped["planName"] == plan["planName"]
    assert stamped["days"] == plan["days"]


def test_well_formed_plan_has_no_problems():
    """Test a complete plan."""
    assert plan_shape_problems(make_plan()) == []


@pytest.mark.parametrize(
    "plan, problems",
    [
        ({}, ["missing planName", "missing days"]),
        ({"planName": "x"}, ["missing days"]),
        ({"planName": "x", "days": {}}, ["days is not a list"]),
        ({"planName": "", "days": []}, ["missing planName"]),
    ],
)
def test_shape_problems(plan, problems):
    """Test incomplete plans."""
    assert plan_shape_problems(plan) == problems
