"""Runtime settings read from the environment (and a local .env file)."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from common.cli_helpers import validate_log_level
from common.exceptions import ValidationError

DEFAULT_OUTPUT_DIR = "data"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    output_dir: str = DEFAULT_OUTPUT_DIR
    input_encoding: str = DEFAULT_ENCODING
    output_encoding: str = DEFAULT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL


def _check_encoding(name: str, var: str) -> str:
    name = name.strip()
    try:
        codecs.lookup(name)
    except LookupError as ex:
        raise ValidationError(f"{var}: unknown encoding '{name}'") from ex
    return name


def validate_output_dir(value: str, source: str = "output directory") -> str:
    """Strip `value` and reject an empty directory prefix.

    Raises:
        ValidationError: If nothing but whitespace is left
    """
    value = value.strip()
    if not value:
        raise ValidationError(f"{source} must not be empty")
    return value


def load_settings(
    environ: Optional[Mapping[str, str]] = None, use_dotenv: bool = True
) -> Settings:
    """Build Settings from WORDCOUNTER_* variables.

    Args:
        environ: Mapping to read instead of os.environ (used by tests)
        use_dotenv: Load a .env file into os.environ first

    Raises:
        ValidationError: If a value is empty or invalid
    """
    if use_dotenv:
        load_dotenv()
    env = os.environ if environ is None else environ

    return Settings(
        output_dir=validate_output_dir(
            env.get("WORDCOUNTER_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
            "WORDCOUNTER_OUTPUT_DIR",
        ),
        input_encoding=_check_encoding(
            env.get("WORDCOUNTER_INPUT_ENCODING", DEFAULT_ENCODING),
            "WORDCOUNTER_INPUT_ENCODING",
        ),
        output_encoding=_check_encoding(
            env.get("WORDCOUNTER_OUTPUT_ENCODING", DEFAULT_ENCODING),
            "WORDCOUNTER_OUTPUT_ENCODING",
        ),
        log_level=validate_log_level(
            env.get("WORDCOUNTER_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        ),
    )
