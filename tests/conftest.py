"""Shared pytest fixtures for wordcounter tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """Create a sample text file for testing.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / "sample.txt"
    file_path.write_text("the cat and the dog\nThe Dog, the end.\n", encoding="utf-8")
    return file_path


@pytest.fixture
def empty_text_file(tmp_path: Path) -> Path:
    """Create an empty input file.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to empty file
    """
    file_path = tmp_path / "empty.txt"
    file_path.write_text("", encoding="utf-8")
    return file_path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove WORDCOUNTER_* variables so defaults apply."""
    for var in (
        "WORDCOUNTER_OUTPUT_DIR",
        "WORDCOUNTER_INPUT_ENCODING",
        "WORDCOUNTER_OUTPUT_ENCODING",
        "WORDCOUNTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
