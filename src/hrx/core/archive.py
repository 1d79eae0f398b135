"""Parsed archive data model.

An `Archive` is the product of one successful parse: an immutable mapping from
entry name to content, ordered by name so enumeration is deterministic and
independent of the order entries appeared in the source buffer.

This module must not import codecs; parsing lives in `hrx.codecs`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Mapping

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


# Logical dtypes for the tabular view; see `Archive.to_frame()`.
ENTRY_TABLE_SCHEMA: dict[str, str] = {
    "name": "string",
    "content": "string",
    "size": "Int64",
    "is_empty": "boolean",
}

ENTRY_TABLE_COLUMNS: list[str] = list(ENTRY_TABLE_SCHEMA.keys())


def _iter_pairs(files: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(files, Mapping):
        return files.items()
    if isinstance(files, (str, bytes)):
        raise TypeError(f"Archive: expected a mapping or iterable of pairs, got {type(files).__name__}")
    return files


def _canonicalize_files(files: Any) -> Mapping[str, str]:
    """Copy `files` into a name-sorted, read-only mapping.

    Later pairs overwrite earlier ones with the same name.
    """
    out: dict[str, str] = {}
    for i, pair in enumerate(_iter_pairs(files)):
        try:
            name, content = pair
        except (TypeError, ValueError) as e:
            raise TypeError(f"Archive: files[{i}]: expected (name, content) pair") from e
        if not isinstance(name, str):
            raise TypeError(f"Archive: entry name must be str, got {type(name).__name__}")
        if not isinstance(content, str):
            raise TypeError(f"Archive: content of {name!r} must be str, got {type(content).__name__}")
        out[name] = content
    return MappingProxyType({k: out[k] for k in sorted(out)})


@dataclass(frozen=True)
class Archive:
    """Immutable, name-sorted collection of (name, content) entries.

    Construct via `hrx.parse_hrx_text()` / `hrx.read_hrx()`, or directly from a
    mapping or an iterable of `(name, content)` pairs.
    """

    files: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", _canonicalize_files(self.files))

    # ----------------------------
    # Accessors
    # ----------------------------

    def names(self) -> list[str]:
        """Entry names in lexicographic order."""
        return list(self.files)

    def get(self, name: str) -> str | None:
        """Content of the entry called exactly `name`, or None if absent."""
        return self.files.get(name)

    def entries(self) -> Iterator[tuple[str, str]]:
        """Iterate `(name, content)` pairs in lexicographic order.

        Each call returns a fresh iterator.
        """
        return iter(self.files.items())

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, name: object) -> bool:
        return name in self.files

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def __getitem__(self, name: str) -> str:
        return self.files[name]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Archive):
            return NotImplemented
        return dict(self.files) == dict(other.files)

    def __hash__(self) -> int:
        return hash(tuple(self.files.items()))

    def __repr__(self) -> str:
        return f"Archive(names={self.names()!r})"

    # ----------------------------
    # Tabular view
    # ----------------------------

    def to_frame(self) -> "pd.DataFrame":
        """Return the entries as a pandas DataFrame.

        Columns (canonical order): `name`, `content`, `size` (UTF-8 byte length
        of content), `is_empty`. Rows are sorted by name with a 0..n-1 index.
        """
        import pandas as pd  # local import to keep module import-light

        rows = [
            {
                "name": name,
                "content": content,
                "size": len(content.encode("utf-8")),
                "is_empty": content == "",
            }
            for name, content in self.entries()
        ]
        df = pd.DataFrame(rows, columns=ENTRY_TABLE_COLUMNS)
        for col, dtype in ENTRY_TABLE_SCHEMA.items():
            df[col] = df[col].astype(dtype)
        return df.reset_index(drop=True)
