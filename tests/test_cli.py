"""
Tests for CLI interface.
"""
import copy
from pathlib import Path
from typing import Any, Dict

import pandas as pd
import yaml
from rich.logging import RichHandler
from typer.testing import CliRunner

from cli import app

# Default CliRunner mixes stderr and stdout into the .output attribute,
# which is what we want for testing console output.
runner = CliRunner()

FULL_CONFIG_DICT: Dict[str, Any] = {
    "run": {"name": "test_cli_run", "seed": 42, "output_dir": ""},
    "data": {"input_path": None, "price_low": 1, "price_high": 100},
    "benchmark": {"sizes": [4, 8, 16], "repeats": 1, "algorithms": ["exhaustive", "divide_and_conquer"]},
    "reporting": {"output_formats": ["json", "csv", "markdown"]},
}


def create_temp_config(tmp_path: Path, **data_overrides: Any) -> Path:
    """Creates a temporary, valid YAML config file for testing."""
    config_path = tmp_path / "test_config.yaml"
    config_dict = copy.deepcopy(FULL_CONFIG_DICT)
    config_dict["run"]["output_dir"] = str(tmp_path / "run")
    config_dict["data"].update(data_overrides)
    config_path.write_text(yaml.dump(config_dict))
    return config_path


def create_price_file(tmp_path: Path, text: str = "6\n10\n7\n5\n8\n11\n9\n") -> Path:
    path = tmp_path / "test.txt"
    path.write_text(text)
    return path


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "run" in result.output
    assert "benchmark" in result.output


def test_cli_run_reports_both_algorithms(tmp_path: Path) -> None:
    result = runner.invoke(app, ["run", "--input", str(create_price_file(tmp_path))])

    assert result.exit_code == 0, f"CLI exited with error: {result.output}"
    assert "Brute Force" in result.output
    assert "Divide & Conquer" in result.output
    assert "nano seconds" in result.output
    assert result.output.count("Buy Date:   2") == 2
    assert result.output.count("Profit:     6") == 2


def test_cli_run_with_missing_input_file() -> None:
    """Test that `run` exits if the price file does not exist."""
    result = runner.invoke(app, ["run", "--input", "nonexistent.txt"])
    assert result.exit_code == 2
    assert "does not exist" in result.output


def test_cli_run_with_too_short_series(tmp_path: Path) -> None:
    result = runner.invoke(app, ["run", "--input", str(create_price_file(tmp_path, "1\n5\n"))])
    assert result.exit_code == 1
    assert "Input Error" in result.output


def test_cli_run_with_malformed_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["run", "--input", str(create_price_file(tmp_path, "5\n1\n2\n"))])
    assert result.exit_code == 1
    assert "Expected 5 prices" in result.output


def test_cli_run_without_input() -> None:
    result = runner.invoke(app, ["run"])
    assert result.exit_code == 1
    assert "Provide --input" in result.output


def test_cli_run_uses_config_input_path(tmp_path: Path) -> None:
    price_file = create_price_file(tmp_path, "3\n3\n1\n6\n")
    config_path = create_temp_config(tmp_path, input_path=str(price_file))

    result = runner.invoke(app, ["run", "--config", str(config_path)])

    assert result.exit_code == 0, f"CLI exited with error: {result.output}"
    assert "Profit:     5" in result.output


def test_cli_generate_writes_price_file(tmp_path: Path) -> None:
    output = tmp_path / "generated.txt"
    result = runner.invoke(app, ["generate", "--size", "10", "--output", str(output), "--seed", "3"])

    assert result.exit_code == 0, f"CLI exited with error: {result.output}"
    lines = output.read_text().split()
    assert lines[0] == "10"
    assert len(lines) == 11
    assert all(1 <= int(p) <= 500 for p in lines[1:])


def test_cli_generate_rejects_bad_range(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["generate", "--size", "3", "--output", str(tmp_path / "x.txt"), "--low", "9", "--high", "1"]
    )
    assert result.exit_code == 1
    assert not (tmp_path / "x.txt").exists()


def test_cli_benchmark_command_runs(tmp_path: Path) -> None:
    config_path = create_temp_config(tmp_path)
    result = runner.invoke(app, ["benchmark", "--config", str(config_path)])

    assert result.exit_code == 0, f"CLI exited with error: {result.output}"
    assert "Benchmark command finished" in result.output
    run_dir = tmp_path / "run"
    assert (run_dir / "summary.json").exists()
    assert len(pd.read_csv(run_dir / "benchmark.csv")) == 6


def test_cli_benchmark_invalid_config(tmp_path: Path) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(yaml.dump({**FULL_CONFIG_DICT, "benchmark": {**FULL_CONFIG_DICT["benchmark"], "repeats": 0}}))

    result = runner.invoke(app, ["benchmark", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "Configuration Error" in result.output


def test_cli_benchmark_disagreement_exits(mocker, tmp_path: Path) -> None:
    mocker.patch("cli.run_benchmark", side_effect=RuntimeError("Algorithms disagree"))
    result = runner.invoke(app, ["benchmark", "--config", str(create_temp_config(tmp_path))])

    assert result.exit_code == 1
    assert "Benchmark Error" in result.output


def test_cli_run_verbose_enables_rich_logging(mocker, tmp_path: Path) -> None:
    m_basic_config = mocker.patch("cli.logging.basicConfig")
    result = runner.invoke(app, ["run", "--input", str(create_price_file(tmp_path)), "--verbose"])

    assert result.exit_code == 0, f"CLI exited with error: {result.output}"
    m_basic_config.assert_called_once()
    handlers = m_basic_config.call_args.kwargs["handlers"]
    assert any(isinstance(h, RichHandler) for h in handlers)


def test_cli_benchmark_verbose_enables_rich_logging(mocker, tmp_path: Path) -> None:
    m_basic_config = mocker.patch("cli.logging.basicConfig")
    mocker.patch("cli.run_benchmark", side_effect=RuntimeError("stop"))
    runner.invoke(app, ["benchmark", "--config", str(create_temp_config(tmp_path)), "-v"])

    m_basic_config.assert_called_once()


def test_cli_run_without_verbose_leaves_logging_alone(mocker, tmp_path: Path) -> None:
    m_basic_config = mocker.patch("cli.logging.basicConfig")
    result = runner.invoke(app, ["run", "--input", str(create_price_file(tmp_path))])

    assert result.exit_code == 0
    m_basic_config.assert_not_called()


def test_cli_run_with_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"2\n\xff\xfe\n3\n")

    result = runner.invoke(app, ["run", "--input", str(path)])

    assert result.exit_code == 1
    assert "Input Error" in result.output


def test_cli_benchmark_non_numeric_sizes(tmp_path: Path) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(yaml.dump({**FULL_CONFIG_DICT, "benchmark": {**FULL_CONFIG_DICT["benchmark"], "sizes": ["big"]}}))

    result = runner.invoke(app, ["benchmark", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "Configuration Error" in result.output
