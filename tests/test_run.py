"""Tests for the `income-report` command-line entry point."""

from __future__ import annotations

import json

import pytest

from income_report import run
from income_report.config import load_report_config


def test_no_arguments_prints_report(capsys) -> None:
    run.main([])

    out = capsys.readouterr().out
    assert "Quarterly Sales Report" in out
    assert "Q1: Sales: $" in out


def test_seeded_json_report(capsys) -> None:
    run.main(["--seed", "5", "--count", "40", "--format", "json", "--top", "2"])

    document = json.loads(capsys.readouterr().out)
    assert sum(q["order_count"] for q in document["quarters"]) == 40
    assert all(len(q["top_orders"]) <= 2 for q in document["quarters"])


def test_seeded_runs_are_identical(capsys) -> None:
    run.main(["--seed", "3", "--format", "text"])
    first = capsys.readouterr().out
    run.main(["--seed", "3", "--format", "text"])
    second = capsys.readouterr().out

    assert first == second
    assert first.startswith("Quarterly Sales Report")


def test_validate_flag(capsys) -> None:
    run.main(["--validate", "--profile", "test"])

    out = capsys.readouterr().out
    assert "Validation Results" in out
    assert "sales" in out
    assert "50 rows" in out


@pytest.mark.parametrize("argv", [["--top", "0"], ["--profile", "nope"], ["--format", "html"]])
def test_bad_arguments_exit_with_usage_error(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run.main(argv)

    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    "setting",
    ['output_format = "html"', 'log_level = "loud"', 'top_n = "3"'],
)
def test_bad_pyproject_setting_exits_with_usage_error(tmp_path, monkeypatch, capsys, setting: str) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(f"[tool.income_report]\n{setting}\n")
    monkeypatch.setattr(
        run, "load_report_config", lambda profile: load_report_config(profile, pyproject=pyproject)
    )

    with pytest.raises(SystemExit) as excinfo:
        run.main([])

    assert excinfo.value.code == 2
    assert "Quarterly Sales Report" not in capsys.readouterr().out
