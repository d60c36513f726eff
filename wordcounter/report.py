"""XHTML word count report rendering.

Install: pip install jinja2
"""

from __future__ import annotations

import codecs
import logging
import re
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

from jinja2 import Environment, select_autoescape

from common.exceptions import ConsistencyError
from common.file_helpers import write_text

logger = logging.getLogger(__name__)

REPORT_SUFFIX = ".html"

# Python codec names whose IANA charset label is not just the upper-cased name.
_CHARSET_LABELS = {
    "ascii": "US-ASCII",
    "utf-8-sig": "UTF-8",
    "utf-16-le": "UTF-16LE",
    "utf-16-be": "UTF-16BE",
    "utf-32-le": "UTF-32LE",
    "utf-32-be": "UTF-32BE",
    "shift_jis": "Shift_JIS",
    "euc_jp": "EUC-JP",
    "euc_kr": "EUC-KR",
    "mac-roman": "macintosh",
}

REPORT_TEMPLATE = """\
<?xml version='1.0' encoding='{{ encoding }}' ?>
<!DOCTYPE html PUBLIC '-//W3C//DTD XHTML 1.0 Strict//EN' \
'http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd'>
<html xmlns='http://www.w3.org/1999/xhtml'>
<head>
<meta http-equiv='Content-Type' content='text/html; charset={{ encoding }}' />
<title>WordCounts</title>
</head>
<body>
<h1>Words Counted in {{ title }}</h1>
<hr style="height:2px;color:purple;background-color:purple"></hr>
<table border="1">
<tr>
<th>Words</th>
<th>Counts</th>
</tr>
{% for word, count in rows %}
<tr>
<td>{{ word }}</td>
<td>{{ count }}</td>
</tr>
{% endfor %}
</table>
</body>
</html>
"""

_env = Environment(
    autoescape=select_autoescape(default_for_string=True),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)
_template = _env.from_string(REPORT_TEMPLATE)


def report_rows(words: Sequence[str], counts: Dict[str, int]) -> List[Tuple[str, int]]:
    """Pair each word, in the given order, with its count.

    Raises:
        ConsistencyError: If a word has no entry in `counts`
    """
    rows: List[Tuple[str, int]] = []
    for word in words:
        if word not in counts:
            raise ConsistencyError(f"word {word!r} is missing from the count map")
        rows.append((word, counts[word]))
    return rows


def charset_label(encoding: str) -> str:
    """Return the IANA charset label for a Python encoding name.

    `latin-1` becomes `ISO-8859-1`, `utf8` becomes `UTF-8`, `cp1252`
    becomes `windows-1252`.
    """
    name = codecs.lookup(encoding).name
    if name in _CHARSET_LABELS:
        return _CHARSET_LABELS[name]
    match = re.fullmatch(r"iso8859-(\d+)", name)
    if match:
        return f"ISO-8859-{match.group(1)}"
    match = re.fullmatch(r"cp(125\d)", name)
    if match:
        return f"windows-{match.group(1)}"
    return name.upper()


def render_report(
    words: Sequence[str],
    counts: Dict[str, int],
    title: str,
    encoding: str = "UTF-8",
) -> str:
    """Render the XHTML document for an ordered word list."""
    rows = report_rows(words, counts)
    logger.debug(f"Rendering {len(rows)} row(s)")
    return _template.render(rows=rows, title=title, encoding=charset_label(encoding))


def normalize_output_name(name: str, directory: str = "data") -> Path:
    """Apply the report naming convention.

    Appends `.html` when missing and prefixes `directory/` unless the name
    already starts with it.

    Raises:
        ValueError: If `directory` is empty
    """
    if not directory.strip():
        raise ValueError("output directory must not be empty")
    if not name.endswith(REPORT_SUFFIX):
        name += REPORT_SUFFIX
    prefix = directory.rstrip("/\\") + "/"
    if not name.startswith(prefix):
        name = prefix + name
    return Path(name)


def write_report(
    path: Union[str, Path],
    words: Sequence[str],
    counts: Dict[str, int],
    title: str,
    encoding: str = "utf-8",
) -> None:
    """Render and write the report to `path`.

    Characters the encoding cannot represent become numeric character
    references, so the document stays well-formed and loses nothing.

    Raises:
        FileOperationError: If the file cannot be written
    """
    write_text(
        path,
        render_report(words, counts, title, encoding),
        encoding=encoding,
        errors="xmlcharrefreplace",
    )
    logger.debug(f"Wrote report to {path}")
