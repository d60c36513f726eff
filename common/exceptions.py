"""Shared exception classes for wordcounter."""

from __future__ import annotations


class WordCounterError(Exception):
    """Base exception for all user-facing wordcounter errors."""

    pass


class FileOperationError(WordCounterError):
    """Error reading the input file or writing the report."""

    pass


class ValidationError(WordCounterError):
    """Configuration or input validation error."""

    pass


class ConsistencyError(RuntimeError):
    """Internal defect: the word list and the count map disagree.

    Not a WordCounterError; CLI error handling must let it propagate.
    """
