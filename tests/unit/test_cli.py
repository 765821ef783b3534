from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from char_ranges import __version__
from char_ranges.cli.main import app

runner = CliRunner()

TEXT = "Hello 👋 World 🌏"


@pytest.fixture()
def sample(tmp_path: Path) -> Path:
    path = tmp_path / "sample.txt"
    path.write_bytes(TEXT.encode("utf-8"))
    return path


def _records(output: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_cli_reports_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_ranges_emits_json_lines(sample: Path) -> None:
    result = runner.invoke(app, ["ranges", str(sample)])
    assert result.exit_code == 0, result.output
    records = _records(result.stdout)
    assert records[0] == {"start": 0, "end": 1, "char": "H"}
    assert records[6] == {"start": 6, "end": 10, "char": "👋"}
    assert records[-1] == {"start": 17, "end": 21, "char": "🌏"}


def test_ranges_slice_reports_whole_file_positions(sample: Path) -> None:
    result = runner.invoke(app, ["ranges", str(sample), "--start", "11", "--end", "16", "--format", "json"])
    assert result.exit_code == 0, result.output
    records = json.loads(result.stdout)
    assert [record["char"] for record in records] == list("World")
    assert records[0] == {"start": 11, "end": 12, "char": "W"}
    assert records[-1] == {"start": 15, "end": 16, "char": "d"}


def test_ranges_reverse(sample: Path) -> None:
    result = runner.invoke(app, ["ranges", str(sample), "--reverse"])
    assert result.exit_code == 0, result.output
    records = _records(result.stdout)
    assert records[0]["char"] == "🌏"
    assert records[-1]["char"] == "H"


def test_ranges_rejects_misaligned_slice(sample: Path) -> None:
    result = runner.invoke(app, ["ranges", str(sample), "--start", "7"])
    assert result.exit_code == 2


def test_ranges_rejects_inverted_slice(sample: Path) -> None:
    result = runner.invoke(app, ["ranges", str(sample), "--start", "5", "--end", "2"])
    assert result.exit_code == 2


def test_ranges_table_format(sample: Path) -> None:
    result = runner.invoke(app, ["ranges", str(sample), "--end", "1", "--format", "table"])
    assert result.exit_code == 0, result.output
    assert result.stdout.split() == ["0", "1", '"H"']


def test_count(sample: Path) -> None:
    result = runner.invoke(app, ["count", str(sample)])
    assert result.exit_code == 0
    assert result.stdout.strip() == "15"


@pytest.mark.parametrize("byte", [6, 7, 9])
def test_locate_inside_multi_byte_char(sample: Path, byte: int) -> None:
    result = runner.invoke(app, ["locate", str(sample), str(byte)])
    assert result.exit_code == 0, result.output
    assert _records(result.stdout) == [{"start": 6, "end": 10, "char": "👋"}]


def test_locate_out_of_range(sample: Path) -> None:
    result = runner.invoke(app, ["locate", str(sample), "21"])
    assert result.exit_code == 2


def test_config_init_and_use(tmp_path: Path, sample: Path) -> None:
    target = tmp_path / "cfg" / "config.yaml"
    result = runner.invoke(app, ["config-init", str(target)])
    assert result.exit_code == 0
    assert target.is_file()

    target.write_text("output:\n  format: json\n  indent: 0\n", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(target), "ranges", str(sample), "--end", "2"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [
        {"start": 0, "end": 1, "char": "H"},
        {"start": 1, "end": 2, "char": "e"},
    ]


def test_invalid_config_exits(tmp_path: Path, sample: Path) -> None:
    target = tmp_path / "config.yaml"
    target.write_text("output:\n  format: xml\n", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(target), "count", str(sample)])
    assert result.exit_code == 2


def test_ranges_reads_config_from_the_root_context(tmp_path: Path, sample: Path) -> None:
    target = tmp_path / "config.yaml"
    target.write_text("output:\n  format: table\n", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(target), "locate", str(sample), "12"])
    assert result.exit_code == 0, result.output
    assert result.exception is None
    assert result.stdout.split() == ["12", "13", '"o"']


def test_commands_log_completion_to_stderr(sample: Path) -> None:
    result = runner.invoke(app, ["count", str(sample)])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "15"
    records = [json.loads(line) for line in result.stderr.splitlines() if line.startswith("{")]
    done = [record for record in records if record.get("msg") == "count.done"]
    assert done
    assert done[0]["level"] == "info"
    assert done[0]["chars"] == 15
    assert done[0]["component"] == "char_ranges.cli"
