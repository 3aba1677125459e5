"""Tests for the plan runner CLI."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

import pytest

from runner.config import load_log_level, load_output_format
from runner.plan import load_context, load_profile, main, today_in
from triathlon_engine.exceptions import ConfigError
from triathlon_engine.models.enums import Weekday
from triathlon_engine.models.profile import UserProfile

START = date(2026, 2, 9)


@pytest.fixture
def profile_file(tmp_path: Path) -> Path:
    path = tmp_path / "profile.json"
    path.write_text(
        json.dumps(
            {
                "ftp": 300,
                "timezone": "Europe/Prague",
                "swim_days": ["Wed", "Fri"],
                "bike_vo2_day": "Thu",
                "long_bike_day": "Sun",
                "no_long_run_day": "Sun",
            }
        )
    )
    return path


@pytest.fixture
def history_file(tmp_path: Path) -> Path:
    path = tmp_path / "history.json"
    path.write_text(
        json.dumps(
            {
                "workouts": [
                    {"date": "2026-02-07", "sport": "bike", "duration_min": 120},
                    {"date": "2026-02-05", "sport": "run", "duration_min": 60, "intensity": "z3"},
                ],
                "fatigue": [{"date": "2026-02-09", "readiness": 2}],
            }
        )
    )
    return path


class TestConfig:
    def test_log_level_names(self) -> None:
        assert load_log_level("debug") == logging.DEBUG
        assert load_log_level("INFO") == logging.INFO

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigError):
            load_log_level("chatty")

    def test_output_format(self) -> None:
        assert load_output_format("JSON") == "json"
        with pytest.raises(ConfigError):
            load_output_format("xml")


class TestLoaders:
    def test_default_profile_without_path(self) -> None:
        assert load_profile(None) == UserProfile()

    def test_profile_from_file(self, profile_file: Path) -> None:
        profile = load_profile(profile_file)
        assert profile.ftp == 300
        assert not profile.wants_optional_sunday_swim
        assert profile.bike_vo2_day == Weekday.THU

    def test_context_from_file(self, history_file: Path) -> None:
        context = load_context(history_file, START)
        assert context.last7d_stats.total_minutes == 180
        assert context.today_fatigue is not None
        assert context.today_fatigue.readiness == 2

    def test_empty_context_without_path(self) -> None:
        assert load_context(None, START).last7d_stats.total_minutes == 0

    def test_today_in_unknown_timezone_falls_back(self) -> None:
        assert isinstance(today_in("Not/AZone"), date)


class TestMain:
    def test_json_output(
        self, profile_file: Path, history_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(
            [
                "--profile", str(profile_file),
                "--history", str(history_file),
                "--start-date", "2026-02-09",
                "--json",
            ]
        )
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["start_date"] == "2026-02-09"
        assert len(data["sessions"]) == 7
        assert any(r.startswith("WeeklyLoadCap") for r in data["applied_rules"])

    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--start-date", "2026-02-09"]) == 0
        assert "7-Day Training Plan" in capsys.readouterr().out

    def test_invalid_history_exits_2(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"fatigue": [{"date": "2026-02-09", "readiness": 9}]}))
        assert main(["--history", str(bad), "--start-date", "2026-02-09"]) == 2

    def test_missing_file_exits_2(self, tmp_path: Path) -> None:
        assert main(["--profile", str(tmp_path / "nope.json"), "--start-date", "2026-02-09"]) == 2

    def test_bad_log_level_exits_2(self) -> None:
        assert main(["--log-level", "chatty", "--start-date", "2026-02-09"]) == 2


class TestMalformedInput:
    def _write(self, tmp_path: Path, name: str, payload: object) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(payload))
        return str(path)

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"fatigue": [{"date": "2026-02-09", "readiness": 3, "sleep_score": "good"}]},
            {"workouts": ["oops"]},
            {"workouts": {"date": "2026-02-07"}},
            {"fatigue": "tired"},
        ],
        ids=["top-level-list", "text-sleep-score", "string-workout", "workouts-object", "fatigue-string"],
    )
    def test_bad_history_shape_exits_2(self, tmp_path: Path, payload: object) -> None:
        history = self._write(tmp_path, "history.json", payload)
        assert main(["--history", history, "--start-date", "2026-02-09"]) == 2

    @pytest.mark.parametrize(
        "payload",
        [
            [{"ftp": 300}],
            "profile",
            {"swim_days": ["Wed", 5]},
            {"swim_days": {"Wed": True}},
        ],
        ids=["top-level-list", "top-level-string", "mixed-swim-days", "swim-days-object"],
    )
    def test_bad_profile_shape_exits_2(self, tmp_path: Path, payload: object) -> None:
        profile = self._write(tmp_path, "profile.json", payload)
        assert main(["--profile", profile, "--start-date", "2026-02-09"]) == 2

    def test_empty_timezone_falls_back(self, tmp_path: Path) -> None:
        profile = self._write(tmp_path, "profile.json", {"timezone": ""})
        assert main(["--profile", profile]) == 0

    def test_empty_timezone_today(self) -> None:
        assert isinstance(today_in(""), date)
