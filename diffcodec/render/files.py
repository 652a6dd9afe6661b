# diffcodec/render/files.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from .._logging import resolve_logger
from ..models.diff import FileDiff
from ..parse.names import quote_filename
from ..utils.paths import split_dir_base
from ..utils.timefmt import format_timestamp
from .hunks import print_hunks

__all__ = ["print_file_diff", "print_multi_file_diff"]

ONLY_IN_MESSAGE = "Only in {}: {}\n"

TimeFormatter = Callable[[datetime], str]


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _quoted_xheader(fd: FileDiff, xheader: str) -> str:
    """Re-quote the filenames carried by an extended header line; other lines pass through."""
    if xheader.startswith("diff --git"):
        return f"diff --git {quote_filename(fd.orig_name)} {quote_filename(fd.new_name)}"
    if xheader.startswith("rename from "):
        return "rename from " + quote_filename(xheader[len("rename from "):])
    if xheader.startswith("rename to "):
        return "rename to " + quote_filename(xheader[len("rename to "):])
    return xheader


def _file_header(
    prefix: str,
    name: str,
    timestamp: Optional[datetime],
    quote_names: bool,
    time_format: TimeFormatter,
) -> bytes:
    if quote_names:
        name = quote_filename(name)
    line = prefix + name
    if timestamp is not None:
        line += "\t" + time_format(timestamp)
    return _encode(line + "\n")


def print_file_diff(
    fd: FileDiff,
    *,
    quote_names: bool = False,
    time_format: TimeFormatter = format_timestamp,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> bytes:
    """
    Render one FileDiff as unified diff bytes.

    Extended headers come first, verbatim unless `quote_names` is set, in
    which case `diff --git` and `rename from/to` lines are rebuilt with quoted
    filenames. A FileDiff without a new name renders as an "Only in" line; one
    whose hunks are None stops after its extended headers.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    out: List[bytes] = []

    for xheader in fd.extended:
        if quote_names:
            xheader = _quoted_xheader(fd, xheader)
        out.append(_encode(xheader + "\n"))

    if fd.new_name == "":
        directory, base = split_dir_base(fd.orig_name)
        out.append(_encode(ONLY_IN_MESSAGE.format(directory, base)))
        lg.debug(f"rendered single-sided entry for {fd.orig_name!r}")
        return b"".join(out)

    if fd.hunks is None:
        lg.debug(f"rendered headers only for {fd.orig_name!r} -> {fd.new_name!r}")
        return b"".join(out)

    out.append(_file_header("--- ", fd.orig_name, fd.orig_time, quote_names, time_format))
    out.append(_file_header("+++ ", fd.new_name, fd.new_time, quote_names, time_format))
    out.append(print_hunks(fd.hunks))
    lg.debug(f"rendered {fd.orig_name!r} -> {fd.new_name!r} with {len(fd.hunks)} hunk(s)")
    return b"".join(out)


def print_multi_file_diff(
    diffs: Iterable[FileDiff],
    *,
    quote_names: bool = False,
    time_format: TimeFormatter = format_timestamp,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> bytes:
    """Render several FileDiffs back to back."""
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    return b"".join(
        print_file_diff(fd, quote_names=quote_names, time_format=time_format, logger=lg)
        for fd in diffs
    )
