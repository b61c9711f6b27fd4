"""Tests for cmd_validate CLI function."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pandas as pd
import pytest

from student_registry.interfaces.cli.main import build_parser, cmd_validate


def make_args(input_path: Path, **overrides) -> argparse.Namespace:
    values = {
        "kind": "HOLIDAY_REPORT_FORM",
        "input": str(input_path),
        "now": "2025-05-20",
        "config": None,
        "report": False,
        "report_json": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.fixture
def holiday_json(tmp_path: Path, holiday_form: dict) -> Path:
    path = tmp_path / "holiday.json"
    path.write_text(json.dumps(holiday_form), encoding="utf-8")
    return path


class TestCmdValidate:
    """Tests for cmd_validate function."""

    def test_cmd_validate_missing_input(self, tmp_path):
        """Test error when the input file doesn't exist."""
        result = cmd_validate(make_args(tmp_path / "nonexistent.csv"))
        assert result == 1

    def test_cmd_validate_success(self, holiday_json):
        assert cmd_validate(make_args(holiday_json)) == 0

    def test_cmd_validate_rejected_record(self, holiday_json):
        """Running after the holiday started turns the form into a rejection."""
        assert cmd_validate(make_args(holiday_json, now="2025-06-02")) == 2

    def test_cmd_validate_empty_csv(self, tmp_path):
        csv_path = tmp_path / "empty.csv"
        pd.DataFrame(columns=["holidayType", "startDate"]).to_csv(csv_path, index=False)

        assert cmd_validate(make_args(csv_path)) == 1

    def test_cmd_validate_unsupported_format(self, tmp_path):
        path = tmp_path / "holiday.txt"
        path.write_text("Medical Leave", encoding="utf-8")

        assert cmd_validate(make_args(path)) == 1

    def test_cmd_validate_invalid_now(self, holiday_json):
        assert cmd_validate(make_args(holiday_json, now="next tuesday")) == 2

    def test_cmd_validate_missing_config(self, holiday_json, tmp_path):
        assert cmd_validate(make_args(holiday_json, config=str(tmp_path / "nope.yaml"))) == 2

    def test_cmd_validate_config_applies(self, tmp_path, student_form):
        """A raised minimum age rejects a 20-year-old applicant."""
        config_path = tmp_path / "validation.yaml"
        config_path.write_text("eligibility:\n  min_age: 21\n  max_age: 40\n", encoding="utf-8")
        input_path = tmp_path / "students.json"
        input_path.write_text(json.dumps([student_form]), encoding="utf-8")

        args = make_args(input_path, kind="STUDENT_REGISTRATION_FORM")
        assert cmd_validate(args) == 0

        args = make_args(input_path, kind="STUDENT_REGISTRATION_FORM", config=str(config_path))
        assert cmd_validate(args) == 2

    def test_cmd_validate_with_report_flags(self, holiday_json, tmp_path):
        """Test --report and --report-json writing next to the input."""
        result = cmd_validate(make_args(holiday_json, report=True, report_json=True))

        assert result == 0
        md_path = tmp_path / "holiday_validation.md"
        json_path = tmp_path / "holiday_validation.json"
        assert md_path.exists()
        assert "## ✅ All Records Accepted" in md_path.read_text(encoding="utf-8")
        assert json.loads(json_path.read_text(encoding="utf-8"))["summary"]["records"] == 1

    def test_cmd_validate_report_custom_dir(self, holiday_json, tmp_path):
        report_dir = tmp_path / "reports" / "nested"
        cmd_validate(make_args(holiday_json, report=str(report_dir)))

        assert (report_dir / "holiday_validation.md").exists()


class TestParser:
    """Tests for argument parsing."""

    def test_kind_is_case_insensitive(self):
        args = build_parser().parse_args(["validate", "--kind", "exam_filters", "--input", "f.csv"])
        assert args.kind == "EXAM_FILTERS"
        assert args.report is False
        assert args.func is cmd_validate

    def test_report_without_value(self):
        args = build_parser().parse_args(
            ["validate", "--kind", "EXAM", "--input", "f.csv", "--report", "--report-json", "out"]
        )
        assert args.report is True
        assert args.report_json == "out"

    def test_unknown_kind_exits(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["validate", "--kind", "COURSE", "--input", "f.csv"])
