"""Shared file operation utilities."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterator, List, Optional, Union

from common.exceptions import FileOperationError

logger = logging.getLogger(__name__)


@contextmanager
def file_manager(
    filename: Union[str, Path],
    mode: str = "r",
    encoding: Optional[str] = "utf-8",
) -> Iterator[IO[Any]]:
    """Open a file with consistent defaults and ensure closure.

    Failures to open are raised as FileOperationError.
    """
    logger.debug(f"Opening file {filename!s} with mode={mode!r}")
    try:
        f: IO[Any] = open(filename, mode, encoding=encoding)
    except OSError as ex:
        raise FileOperationError(f"Cannot open '{filename}': {ex.strerror or ex}") from ex
    try:
        yield f
    finally:
        f.close()
        logger.debug(f"Closed file {filename!s}")


def read_lines(path: Union[str, Path], encoding: str = "utf-8") -> List[str]:
    """Read a text file as a list of lines without their terminators.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        Lines in file order; an empty file gives an empty list

    Raises:
        FileOperationError: If the file cannot be opened or decoded
    """
    with file_manager(path, mode="r", encoding=encoding) as f:
        try:
            return [line.rstrip("\r\n") for line in f]
        except (OSError, UnicodeDecodeError) as ex:
            raise FileOperationError(f"Failed to read '{path}': {ex}") from ex


def write_text(
    path: Union[str, Path],
    text: str,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> None:
    """Write text to a file, creating missing parent directories.

    The text is encoded before the file is opened, so an encoding failure
    leaves any existing file untouched and creates no empty one.

    Args:
        path: Target file
        text: Content to write
        encoding: Text encoding for the file
        errors: Codec error handler, e.g. "xmlcharrefreplace"

    Raises:
        FileOperationError: If the text cannot be encoded or written
    """
    target = Path(path)
    try:
        data = text.encode(encoding, errors)
    except (UnicodeEncodeError, LookupError) as ex:
        raise FileOperationError(f"Cannot encode '{target}' as {encoding}: {ex}") from ex
    try:
        if target.parent and not target.parent.exists():
            target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as ex:
        raise FileOperationError(f"Cannot create directory '{target.parent}': {ex}") from ex
    with file_manager(target, mode="wb", encoding=None) as f:
        try:
            f.write(data)
        except OSError as ex:
            raise FileOperationError(f"Failed to write '{target}': {ex}") from ex
