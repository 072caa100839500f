from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from lexdist.cli import app

runner = CliRunner()


def test_distance_command() -> None:
    result = runner.invoke(app, ["distance", "sitting", "kitten", "--fast"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "3"


def test_distance_command_modes() -> None:
    chars = runner.invoke(app, ["distance", "شاهنامه", "شهنامه"])
    raw = runner.invoke(app, ["distance", "شاهنامه", "شهنامه", "--fast"])
    assert chars.stdout.strip() == "1"
    assert raw.stdout.strip() == "2"


def test_matrix_command() -> None:
    result = runner.invoke(app, ["matrix", "kitten", "sitting"])
    assert result.exit_code == 0
    assert "Edit distance: 3" in result.stdout


def test_pairs_command_writes_run(tmp_path: Path) -> None:
    run_dir = tmp_path / "run"
    result = runner.invoke(app, ["pairs", "examples", "--run-path", str(run_dir)])
    assert result.exit_code == 0, result.stdout
    assert (run_dir / "trace.jsonl").exists()
    assert (run_dir / "summary.json").exists()

    report = runner.invoke(app, ["report", str(run_dir), "--write"])
    assert report.exit_code == 0
    assert "num_pairs" in report.stdout
    assert (run_dir / "report.json").exists()


def test_pairs_command_unknown_set() -> None:
    result = runner.invoke(app, ["pairs", "missing-set"])
    assert result.exit_code == 1


def test_pairs_command_length_ceiling() -> None:
    result = runner.invoke(app, ["pairs", "examples", "--max-length", "3"])
    assert result.exit_code == 2


def test_report_missing_path(tmp_path: Path) -> None:
    result = runner.invoke(app, ["report", str(tmp_path / "absent")])
    assert result.exit_code == 1


def test_pairs_command_rejects_malformed_settings(tmp_path: Path) -> None:
    settings = tmp_path / "broken.yaml"
    settings.write_text("fast_mode: [unclosed\n", encoding="utf-8")
    result = runner.invoke(app, ["pairs", "examples", "--settings", str(settings)])
    assert result.exit_code == 1
    assert "Invalid input" in result.stdout


def test_report_accepts_trace_file(tmp_path: Path) -> None:
    run_dir = tmp_path / "run"
    runner.invoke(app, ["pairs", "examples", "--run-path", str(run_dir)])
    result = runner.invoke(app, ["report", str(run_dir / "trace.jsonl"), "--write"])
    assert result.exit_code == 0
    assert "num_pairs" in result.stdout
    assert (run_dir / "report.json").exists()


def test_report_rejects_corrupt_trace(tmp_path: Path) -> None:
    trace = tmp_path / "trace.jsonl"
    trace.write_text('{"pair_id": "x", "distance": 1}\n{"pair_id": \n', encoding="utf-8")
    result = runner.invoke(app, ["report", str(trace)])
    assert result.exit_code == 1
    assert "Invalid trace" in result.stdout
