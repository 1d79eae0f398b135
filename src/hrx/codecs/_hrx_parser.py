"""Internal parsing helpers for the HRX codec.

Private module for parsing logic; public API is in `hrx.py`.
"""
from __future__ import annotations

import logging

from hrx.errors import InvalidItemError, NoBoundaryError

logger = logging.getLogger(__name__)


# Item kinds returned by `classify_item`.
COMMENT = "comment"
ENTRY = "entry"


def find_boundary(text: str) -> str | None:
    """Return the `<=*>` boundary at the very start of `text`, or None.

    The boundary is `<`, any run of `=`, then `>`. Any other character before
    the closing `>` means there is no boundary.
    """
    if not text or text[0] != "<":
        return None
    for i in range(1, len(text)):
        ch = text[i]
        if ch == "=":
            continue
        if ch == ">":
            return text[: i + 1]
        return None
    return None


def split_items(text: str, boundary: str) -> list[str]:
    """Split `text` into raw items on every `\\n` + boundary occurrence.

    The leading boundary marks the start of the stream and is not a separator:
    the first item starts right after it.
    """
    delimiter = "\n" + boundary
    return text[len(delimiter) - 1 :].split(delimiter)


def classify_item(item: str, *, strict: bool = False) -> tuple[str, str | None, str | None]:
    """Classify one raw item.

    Returns:
        (kind, name, content) where kind is `COMMENT` (name/content None) or
        `ENTRY`.

    Raises:
        InvalidItemError: the item is neither a comment nor a header-prefixed
            entry. In strict mode also when the name is empty or has no
            newline after it.
    """
    if item == "" or item.startswith("\n"):
        return COMMENT, None, None
    if not item.startswith(" "):
        raise InvalidItemError(item)

    header, nl, body = item[1:].partition("\n")
    if strict:
        if not nl:
            raise InvalidItemError(item, "missing newline after entry name")
        if not header:
            raise InvalidItemError(item, "empty entry name")
    return ENTRY, header, body


def collect_entries(text: str, *, strict: bool = False) -> dict[str, str]:
    """Run boundary detection + segmentation over `text`.

    Returns a plain dict of name -> content in encounter order; a repeated
    name keeps its last content.
    """
    boundary = find_boundary(text)
    if boundary is None:
        raise NoBoundaryError(text)
    logger.debug("hrx: boundary %r", boundary)

    items = split_items(text, boundary)
    files: dict[str, str] = {}
    comments = 0
    for item in items:
        kind, name, content = classify_item(item, strict=strict)
        if kind == COMMENT:
            comments += 1
            continue
        if name in files:
            logger.debug("hrx: duplicate entry %r; keeping the last occurrence", name)
        files[name] = content

    logger.debug("hrx: %d items, %d comments, %d entries", len(items), comments, len(files))
    return files
