"""hrx — reader for Human Readable Archive (`.hrx`) text archives.

Read-only: parse an in-memory buffer or load a file into an immutable,
name-sorted `Archive`.
"""

from __future__ import annotations

from hrx.codecs import find_boundary, parse_hrx_text, read_hrx
from hrx.core import Archive
from hrx.errors import (
    ArchiveParseError,
    ArchiveReadError,
    HrxError,
    HrxFormatError,
    InvalidItemError,
    NoBoundaryError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Archive",
    "find_boundary",
    "parse_hrx_text",
    "read_hrx",
    "HrxError",
    "HrxFormatError",
    "NoBoundaryError",
    "InvalidItemError",
    "ArchiveReadError",
    "ArchiveParseError",
]
