# diffcodec/render/hunks.py
from __future__ import annotations

from typing import Iterable, List

from ..models.diff import Hunk
from ..parse.core import NO_NEWLINE_MESSAGE

__all__ = ["print_hunks"]

_NO_NEWLINE_LINE = NO_NEWLINE_MESSAGE + b"\n"


def _range_header(hunk: Hunk) -> bytes:
    header = f"@@ -{hunk.orig_start_line},{hunk.orig_lines} +{hunk.new_start_line},{hunk.new_lines} @@"
    if hunk.section:
        header += " " + hunk.section
    return header.encode("utf-8", "surrogateescape") + b"\n"


def print_hunks(hunks: Iterable[Hunk]) -> bytes:
    """
    Render hunks in unified diff format.

    The no-newline marker goes at `orig_no_newline_at` when that is set, and
    after the body when the body's last line has no terminating newline.
    """
    out: List[bytes] = []
    for hunk in hunks:
        out.append(_range_header(hunk))

        if hunk.orig_no_newline_at == 0:
            out.append(hunk.body)
        else:
            out.append(hunk.body[:hunk.orig_no_newline_at])
            out.append(_NO_NEWLINE_LINE)
            out.append(hunk.body[hunk.orig_no_newline_at:])

        if not hunk.body.endswith(b"\n"):
            out.append(b"\n")
            out.append(_NO_NEWLINE_LINE)
    return b"".join(out)
