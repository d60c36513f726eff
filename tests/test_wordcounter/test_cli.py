"""Tests for wordcounter.cli module."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from wordcounter.cli import app

runner = CliRunner()


def test_cli_writes_report(sample_text_file: Path, tmp_path: Path, clean_env):
    """Test a non-interactive run."""
    out_dir = tmp_path / "reports"
    result = runner.invoke(
        app, [str(sample_text_file), "counts", "--output-dir", str(out_dir)]
    )

    assert result.exit_code == 0, result.output
    report = out_dir / "counts.html"
    assert report.exists()
    assert "<td>cat</td>\n<td>1</td>" in report.read_text(encoding="utf-8")
    assert "Saved word counts to" in result.output


def test_cli_prompts_for_missing_names(sample_text_file: Path, tmp_path: Path, clean_env):
    """Test that omitted file names are asked for interactively."""
    result = runner.invoke(
        app,
        ["--output-dir", str(tmp_path)],
        input=f"{sample_text_file}\nprompted\n",
    )

    assert result.exit_code == 0, result.output
    assert "Please enter the name of the input file" in result.output
    assert "Please enter the name of the output file" in result.output
    assert (tmp_path / "prompted.html").exists()


def test_cli_print_table(tmp_path: Path, clean_env):
    """Test --print echoes rows in report order."""
    src = tmp_path / "in.txt"
    src.write_text("the cat and the dog\n", encoding="utf-8")

    result = runner.invoke(
        app, [str(src), "out", "--output-dir", str(tmp_path), "--print"]
    )

    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if "\t" in line]
    assert lines == ["and\t1", "cat\t1", "dog\t1", "the\t2"]


def test_cli_missing_input(tmp_path: Path, clean_env):
    """Test that an unreadable input file exits with code 2."""
    result = runner.invoke(
        app, [str(tmp_path / "missing.txt"), "out", "--output-dir", str(tmp_path)]
    )

    assert result.exit_code == 2
    assert not (tmp_path / "out.html").exists()


def test_cli_unwritable_output(sample_text_file: Path, tmp_path: Path, clean_env):
    """Test that an unwritable report location exits with code 1."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    result = runner.invoke(
        app, [str(sample_text_file), "out", "--output-dir", str(blocker)]
    )

    assert result.exit_code == 1


def test_cli_invalid_log_level(sample_text_file: Path, tmp_path: Path, clean_env):
    """Test that a bad --log-level is rejected."""
    result = runner.invoke(
        app,
        [str(sample_text_file), "out", "--output-dir", str(tmp_path), "--log-level", "LOUD"],
    )

    assert result.exit_code == 2


def test_cli_empty_output_dir(sample_text_file: Path, clean_env):
    """Test that an empty --output-dir is rejected before anything is written."""
    result = runner.invoke(app, [str(sample_text_file), "out", "--output-dir", ""])

    assert result.exit_code == 2
    assert "Saved word counts" not in result.output


def test_cli_print_stdout_has_only_table_and_summary(tmp_path: Path, clean_env):
    """Test --print output on stdout is the table plus one closing line."""
    src = tmp_path / "in.txt"
    src.write_text("b a b\n", encoding="utf-8")

    result = runner.invoke(
        app, [str(src), "out", "--output-dir", str(tmp_path), "--print"]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "a\t1",
        "b\t2",
        f"Saved word counts to {tmp_path / 'out.html'}",
    ]
