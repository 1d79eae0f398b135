"""Shared fixtures for the hrx test suite.

- `SIMPLE_HRX`: two entries around a comment, `<===>` boundary; `hello.md`
  ends with a blank line so its content keeps a trailing newline.
- `WIDE_BOUNDARY_HRX`: `<=====>` boundary with an empty `dir/whatever` entry.
- `write_text()`: writes archive text byte-exact for `read_hrx` tests.

`src/` is put on `sys.path` so tests run without an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared sample archives
# =============================================================================


SIMPLE_HRX = (
    "<===> hello.md\n"
    "# Hello world\n"
    "This is a simple markdown file.\n"
    "\n"
    "<===>\n"
    "This is just a comment.\n"
    "<===> foo.txt\n"
    "This is something else.\n"
)

WIDE_BOUNDARY_HRX = (
    "<=====> hello.md\n"
    "# Hello world\n"
    "This is a simple markdown file.\n"
    "\n"
    "<=====> dir/whatever\n"
    "<=====> foo.txt\n"
    "This is something else.\n"
)


def write_text(path: Path, text: str) -> Path:
    """Write `text` exactly (no newline translation) and return `path`."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
    return path
