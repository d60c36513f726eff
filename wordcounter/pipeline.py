"""End-to-end word counting: lines in, ordered counts and report out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from common.file_helpers import read_lines
from wordcounter.aggregator import WordCounts, count_words
from wordcounter.config import Settings
from wordcounter.ordering import ordered_words
from wordcounter.report import normalize_output_name, write_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordCountResult:
    counts: Dict[str, int]
    words: List[str]
    total: int

    @property
    def distinct(self) -> int:
        return len(self.words)


def summarize(aggregate: WordCounts) -> WordCountResult:
    return WordCountResult(
        counts=dict(aggregate.counts),
        words=ordered_words(aggregate.occurrences),
        total=aggregate.total,
    )


def count_lines(lines: Iterable[str]) -> WordCountResult:
    """Count words in `lines` and order the distinct words for reporting."""
    return summarize(count_words(lines))


def count_file(path: Union[str, Path], encoding: str = "utf-8") -> WordCountResult:
    """Count words in a text file.

    Raises:
        FileOperationError: If the file cannot be read
    """
    lines = read_lines(path, encoding=encoding)
    logger.debug(f"Read {len(lines)} line(s) from {path}")
    result = count_lines(lines)
    logger.info(f"Counted {result.total} word(s) ({result.distinct} distinct)")
    return result


def write_result(
    result: WordCountResult,
    output_name: str,
    title: str,
    settings: Optional[Settings] = None,
) -> Path:
    """Write the report for `result` under the normalized output name.

    Raises:
        FileOperationError: If the report cannot be written
    """
    settings = settings or Settings()
    target = normalize_output_name(output_name, settings.output_dir)
    write_report(
        target,
        result.words,
        result.counts,
        title=title,
        encoding=settings.output_encoding,
    )
    return target

