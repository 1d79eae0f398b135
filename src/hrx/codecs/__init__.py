"""Codecs for reading HRX archives.

Read-only: `parse_hrx_text` for in-memory text, `read_hrx` for files.
"""

from __future__ import annotations

from ._hrx_parser import find_boundary
from .hrx import parse_hrx_text, read_hrx

__all__ = [
    "find_boundary",
    "parse_hrx_text",
    "read_hrx",
]
