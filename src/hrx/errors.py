"""Error taxonomy for HRX reading.

Every failure raised by this package is an `HrxError`. The concrete classes are
a closed set so callers can branch on the kind of failure without parsing
messages:

- `NoBoundaryError`: the buffer does not start with a `<=+>` boundary.
- `InvalidItemError`: an item is neither a comment nor a header-prefixed entry.
- `ArchiveReadError`: reading a file failed (I/O kind, also an `OSError`).
- `ArchiveParseError`: a file was read but its contents are not valid HRX
  (data kind, also a `ValueError`).

Messages are stable and suitable for test assertions.
"""

from __future__ import annotations

from pathlib import Path


class HrxError(Exception):
    """Base class for all HRX errors."""


class HrxFormatError(HrxError, ValueError):
    """Base class for data errors (the input is not valid HRX)."""


class NoBoundaryError(HrxFormatError):
    """The input does not begin with a boundary marker."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix[:16]
        super().__init__("No archive boundary found")


class InvalidItemError(HrxFormatError):
    """An item is neither a comment nor a valid header-prefixed entry.

    `item` holds the literal text of the offending item.
    """

    def __init__(self, item: str, reason: str | None = None):
        self.item = item
        self.reason = reason
        msg = f"Invalid item: {item!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class ArchiveReadError(HrxError, OSError):
    """Reading an archive file from disk failed."""

    def __init__(self, path: str | Path, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f'Failed to read "{path}": {_describe(cause)}')


class ArchiveParseError(HrxFormatError):
    """An archive file was read but its contents could not be parsed."""

    def __init__(self, path: str | Path, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f'Failed to parse "{path}": {_describe(cause)}')


def _describe(cause: BaseException) -> str:
    if isinstance(cause, OSError) and cause.strerror:
        return f"{cause.strerror} (os error {cause.errno})"
    return str(cause)
