"""Tests for the langtour command-line interface."""
from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from langtour.cli.main import cli
from langtour.registry import Demo, get_default_registry


def _make_runner() -> CliRunner:
    return CliRunner()


def _raise_runtime_error() -> None:
    raise RuntimeError("boom")


@pytest.fixture()
def failing_demo() -> Iterator[str]:
    """Register a demo that raises, and remove it again after the test."""
    registry = get_default_registry()
    registry.register_demo(
        Demo(
            name="failing",
            title="Failing",
            topic="errors",
            summary="Raises on purpose.",
            tags=("errors",),
            entry_point=_raise_runtime_error,
        )
    )
    yield "failing"
    registry.deregister("failing")


class TestVersion:
    def test_version_command(self, expected_version: str) -> None:
        result = _make_runner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert expected_version in result.output


class TestList:
    def test_lists_all_demos(self) -> None:
        result = _make_runner().invoke(cli, ["list"])
        assert result.exit_code == 0
        for name in ("money", "loops", "nullsafety"):
            assert name in result.output

    def test_filter_by_topic(self) -> None:
        result = _make_runner().invoke(cli, ["list", "--topic", "functions"])
        assert result.exit_code == 0
        assert "lambdas" in result.output
        assert "money" not in result.output

    def test_filter_by_tag(self) -> None:
        result = _make_runner().invoke(cli, ["list", "--tag", "ranges"])
        assert result.exit_code == 0
        assert "loops" in result.output
        assert "money" not in result.output

    def test_no_matches(self) -> None:
        result = _make_runner().invoke(cli, ["list", "--topic", "nonexistent"])
        assert result.exit_code == 0
        assert "No demos match" in result.output


class TestRun:
    def test_run_prints_single_line(self) -> None:
        result = _make_runner().invoke(cli, ["run", "hello-world"])
        assert result.exit_code == 0
        assert result.output == "Hello World\n"

    def test_run_strict(self) -> None:
        result = _make_runner().invoke(cli, ["run", "loops", "--strict"])
        assert result.exit_code == 0
        assert result.output.startswith("0..10 step 2")

    def test_unknown_demo_exits_nonzero(self) -> None:
        result = _make_runner().invoke(cli, ["run", "does-not-exist"])
        assert result.exit_code == 1

    def test_failing_demo_reports_without_traceback(self, failing_demo: str) -> None:
        result = _make_runner().invoke(cli, ["run", failing_demo])
        assert result.exit_code == 1
        assert "Demo failed" in result.output
        assert "RuntimeError: boom" in result.output
        assert "Traceback" not in result.output


class TestRunAll:
    def test_all_pass(self) -> None:
        result = _make_runner().invoke(cli, ["run-all", "--strict"])
        assert result.exit_code == 0
        assert "9 passed, 0 failed" in result.output

    def test_topics_from_config(self, tmp_path: Path) -> None:
        config = tmp_path / "langtour.yaml"
        config.write_text("topics: [basics]\n", encoding="utf-8")
        result = _make_runner().invoke(cli, ["--config", str(config), "run-all"])
        assert result.exit_code == 0
        assert "2 passed, 0 failed" in result.output


class TestShow:
    def test_show_source(self) -> None:
        result = _make_runner().invoke(cli, ["show", "money"])
        assert result.exit_code == 0
        assert "CalcMoneyOperator" in result.output

    def test_show_unknown(self) -> None:
        result = _make_runner().invoke(cli, ["show", "nope"])
        assert result.exit_code == 1


class TestCatalog:
    def test_json_to_stdout(self) -> None:
        result = _make_runner().invoke(cli, ["catalog"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert "money" in [d["name"] for d in data["demos"]]

    def test_yaml_to_file(self, tmp_path: Path) -> None:
        out = tmp_path / "catalog.yaml"
        result = _make_runner().invoke(cli, ["catalog", "--format", "yaml", "-o", str(out)])
        assert result.exit_code == 0
        data = yaml.safe_load(out.read_text(encoding="utf-8"))
        assert len(data["demos"]) == 9

    def test_format_from_config(self, tmp_path: Path) -> None:
        config = tmp_path / "langtour.yaml"
        config.write_text("output_format: yaml\n", encoding="utf-8")
        result = _make_runner().invoke(cli, ["--config", str(config), "catalog"])
        assert result.exit_code == 0
        assert isinstance(yaml.safe_load(result.output), dict)
        assert not result.output.lstrip().startswith("{")


    def test_unwritable_output_exits_nonzero(self, tmp_path: Path) -> None:
        out = tmp_path / "missing-dir" / "catalog.json"
        result = _make_runner().invoke(cli, ["catalog", "-o", str(out)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
        assert "Cannot write" in result.output
        assert not out.exists()


class TestConfigErrors:
    def test_bad_config_exits_nonzero(self, tmp_path: Path) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("unknown_key: 1\n", encoding="utf-8")
        result = _make_runner().invoke(cli, ["--config", str(config), "list"])
        assert result.exit_code == 1
