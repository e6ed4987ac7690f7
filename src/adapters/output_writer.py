"""Escritura del resultado.

Two targets: a file, which receives the raw bytes untouched, or standard
output, which receives a printable rendering. Valid UTF-8 is shown as a
quoted, escaped string; anything else as the list of byte values.
"""

from __future__ import annotations

import logging
import sys
import unicodedata
from pathlib import Path
from typing import TextIO

from core.domain.errors import OutputWriteError

logger = logging.getLogger(__name__)

_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def quote_text(text: str) -> str:
    """Render `text` between double quotes with control characters escaped.

    Non-printable characters and combining marks become `\\u{XXXX}` with
    lowercase hex digits.
    """

    out: list[str] = ['"']
    for ch in text:
        escaped = _SIMPLE_ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ch.isprintable() and not unicodedata.combining(ch):
            out.append(ch)
        else:
            out.append(f"\\u{{{ord(ch):x}}}")
    out.append('"')
    return "".join(out)


def render_for_stdout(data: bytes) -> str:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return "[" + ", ".join(str(b) for b in data) + "]"
    return quote_text(text)


def print_output(data: bytes, *, stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    stream.write(render_for_stdout(data) + "\n")
    stream.flush()


def write_output_file(data: bytes, path: Path, *, create_parents: bool = False) -> Path:
    """Create or truncate `path` and write `data` to it."""

    try:
        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as fh:
            fh.write(data)
    except OSError as exc:
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc

    logger.debug("wrote %d bytes to %s", len(data), path)
    return path
