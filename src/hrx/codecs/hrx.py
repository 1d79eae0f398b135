"""Human Readable Archive (`.hrx`) codec (read-only).

An HRX buffer starts with a boundary `<` + `=`*N + `>`; every later
`\\n` + boundary separates items. Items are classified as:

- comment: empty, or starting with a newline (ignored)
- entry: `" " + name + "\\n" + content`, content running verbatim to the next
  boundary (or end of buffer)
- empty entry: `" " + name` alone (directory marker or zero-byte file)

Anything else is an `InvalidItemError`. Entries are addressed by exact name; a
repeated name keeps its last content.
"""

from __future__ import annotations

import logging
from pathlib import Path

from hrx.codecs._hrx_parser import collect_entries
from hrx.core.archive import Archive
from hrx.errors import ArchiveParseError, ArchiveReadError, HrxFormatError

logger = logging.getLogger(__name__)


# ----------------------------
# Public API
# ----------------------------


def parse_hrx_text(text: str, *, strict: bool = False) -> Archive:
    """Parse HRX text into an `Archive`.

    Args:
        text: The whole archive as a string.
        strict: If True, an entry header with no newline after the name is
            rejected instead of being read as an empty entry.

    Raises:
        NoBoundaryError: `text` does not begin with a boundary.
        InvalidItemError: an item is malformed.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_hrx_text: expected str, got {type(text).__name__}")
    return Archive(collect_entries(text, strict=strict))


def read_hrx(
    path: str | Path,
    *,
    strict: bool = False,
    encoding: str = "utf-8",
) -> Archive:
    """Read an `.hrx` file from disk and parse.

    Raises:
        ArchiveReadError: the file could not be read (missing, permissions, ...).
        ArchiveParseError: the file is not valid text in `encoding`, or is not
            a valid archive. The underlying error is kept as `cause`.
    """
    p = Path(path)
    logger.debug("hrx: loading %s", p)
    try:
        data = p.read_bytes()
    except OSError as e:
        raise ArchiveReadError(path, e) from e

    try:
        text = data.decode(encoding)
        return parse_hrx_text(text, strict=strict)
    except (UnicodeDecodeError, HrxFormatError) as e:
        raise ArchiveParseError(path, e) from e
