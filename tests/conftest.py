"""Shared test fixtures: user profiles and plan construction."""

from __future__ import annotations

from datetime import date
from typing import Callable

import pytest

from triathlon_engine.models.enums import Weekday
from triathlon_engine.models.profile import UserProfile
from triathlon_engine.models.session import Session
from triathlon_engine.models.week_plan import WeekPlan

# 2026-02-09 is a Monday
MONDAY = date(2026, 2, 9)


@pytest.fixture
def default_user() -> UserProfile:
    """Defaults of a freshly created user: swims Wed/Fri/Sun-optional, VO2 Thu, long ride Sun."""
    return UserProfile()


@pytest.fixture
def no_swim_user() -> UserProfile:
    """Never swims; VO2 work moved off Thursday, long ride moved off Sunday."""
    return UserProfile(
        swim_days=frozenset(),
        bike_vo2_day=Weekday.TUE,
        long_bike_day=Weekday.SAT,
    )


@pytest.fixture
def plan_factory() -> Callable[..., WeekPlan]:
    def _make(*sessions: Session, start_date: date = MONDAY) -> WeekPlan:
        return WeekPlan(start_date=start_date, sessions=tuple(sessions))

    return _make
