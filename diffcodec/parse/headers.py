# diffcodec/parse/headers.py
from __future__ import annotations

import enum
from typing import Iterable, List, Tuple

__all__ = ["XHeaderKind", "classify_xheader", "xheaders_less", "sort_extended_headers"]


class XHeaderKind(enum.IntEnum):
    """Extended header line kinds, in the order git emits them."""

    DIFF_GIT = 0
    OLD_MODE = 1
    NEW_MODE = 2
    OTHER = 3
    UNKNOWN = 4


_PREFIXES: Tuple[Tuple[str, XHeaderKind], ...] = (
    ("diff --git", XHeaderKind.DIFF_GIT),
    ("old mode", XHeaderKind.OLD_MODE),
    ("new mode", XHeaderKind.NEW_MODE),
    ("new file mode", XHeaderKind.OTHER),
    ("deleted file mode", XHeaderKind.OTHER),
    ("similarity index", XHeaderKind.OTHER),
    ("dissimilarity index", XHeaderKind.OTHER),
    ("rename from", XHeaderKind.OTHER),
    ("rename to", XHeaderKind.OTHER),
    ("copy from", XHeaderKind.OTHER),
    ("copy to", XHeaderKind.OTHER),
    ("index ", XHeaderKind.OTHER),
    ("Binary files ", XHeaderKind.OTHER),
)


def classify_xheader(line: str) -> XHeaderKind:
    for prefix, kind in _PREFIXES:
        if line.startswith(prefix):
            return kind
    return XHeaderKind.UNKNOWN


def _sort_key(line: str) -> Tuple[int, str]:
    kind = classify_xheader(line)
    # Only unrecognized lines compare by text; recognized kinds tie so a stable sort keeps their order.
    return kind, (line if kind is XHeaderKind.UNKNOWN else "")


def xheaders_less(a: str, b: str) -> bool:
    """
    Strict weak order over extended header lines: `diff --git` first, then
    `old mode`, then `new mode`, then the other known kinds, then anything
    unrecognized in lexical order.
    """
    return _sort_key(a) < _sort_key(b)


def sort_extended_headers(lines: Iterable[str]) -> List[str]:
    """Return `lines` in canonical order; recognized lines of the same kind keep their relative order."""
    return sorted(lines, key=_sort_key)
