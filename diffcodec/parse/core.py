# diffcodec/parse/core.py
from __future__ import annotations

import logging
import posixpath
import re
from datetime import datetime
from typing import List, Optional, Tuple

from .._logging import resolve_logger
from ..errors.parse import ParseError
from ..errors.quote import MalformedTokenError
from ..models.diff import FileDiff, Hunk
from ..utils.timefmt import parse_timestamp
from .names import DEV_NULL, parse_diff_git_args, read_quoted_filename

__all__ = ["parse_hunks", "parse_file_diff", "parse_multi_file_diff", "NO_NEWLINE_MESSAGE"]

NO_NEWLINE_MESSAGE = b"\\ No newline at end of file"

_HUNK_HEADER_RE = re.compile(rb"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(?: (.*))?$")
_ONLY_IN_RE = re.compile(r"^Only in (.+?): (.+)$")


def _split_lines(data: bytes) -> List[bytes]:
    """Split on '\\n' only, keeping terminators; a trailing partial line is kept as-is."""
    parts = data.split(b"\n")
    lines = [p + b"\n" for p in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def _text(line: bytes) -> str:
    if line.endswith(b"\n"):
        line = line[:-1]
    return line.decode("utf-8", "surrogateescape")


class _Reader:
    """Line cursor over the raw diff with 1-based line numbers for errors."""

    def __init__(self, data: bytes):
        self.lines = _split_lines(data)
        self.pos = 0

    @property
    def lineno(self) -> int:
        return self.pos + 1

    def peek(self) -> Optional[bytes]:
        if self.pos < len(self.lines):
            return self.lines[self.pos]
        return None

    def next(self) -> bytes:
        line = self.lines[self.pos]
        self.pos += 1
        return line

    def at_end(self) -> bool:
        return self.pos >= len(self.lines)


# ---------- hunks ----------


def _parse_hunk_header(line: bytes, lineno: int) -> Hunk:
    m = _HUNK_HEADER_RE.match(line.rstrip(b"\n"))
    if not m:
        raise ParseError(f"malformed hunk header {_text(line)!r}", lineno)
    orig_start, orig_count, new_start, new_count, section = m.groups()
    return Hunk(
        orig_start_line=int(orig_start),
        orig_lines=int(orig_count) if orig_count is not None else 1,
        new_start_line=int(new_start),
        new_lines=int(new_count) if new_count is not None else 1,
        section=section.decode("utf-8", "surrogateescape") if section else "",
    )


def _is_no_newline(line: Optional[bytes]) -> bool:
    return line is not None and line.rstrip(b"\n") == NO_NEWLINE_MESSAGE


def _read_hunk(reader: _Reader) -> Hunk:
    hunk = _parse_hunk_header(reader.next(), reader.lineno - 1)
    orig_left, new_left = hunk.orig_lines, hunk.new_lines
    body = bytearray()

    while orig_left > 0 or new_left > 0 or _is_no_newline(reader.peek()):
        line = reader.peek()
        if line is None:
            raise ParseError(
                f"unexpected end of input: hunk is missing {orig_left} original and {new_left} new line(s)",
                reader.lineno,
            )
        if _is_no_newline(line):
            reader.next()
            if not body:
                raise ParseError("no-newline marker before any hunk line", reader.lineno - 1)
            last = body[body.rfind(b"\n", 0, len(body) - 1) + 1:]
            if last.startswith(b"-"):
                hunk.orig_no_newline_at = len(body)
            elif body.endswith(b"\n"):
                del body[-1]
            continue

        tag = line[:1]
        if tag == b"-" and orig_left > 0:
            orig_left -= 1
        elif tag == b"+" and new_left > 0:
            new_left -= 1
        elif tag in (b" ", b"\n") and orig_left > 0 and new_left > 0:
            orig_left -= 1
            new_left -= 1
        else:
            raise ParseError(f"unexpected line in hunk body {_text(line)!r}", reader.lineno)
        if body and not body.endswith(b"\n"):
            raise ParseError("hunk line follows a line marked as lacking a newline", reader.lineno)
        body += reader.next()

    hunk.body = bytes(body)
    return hunk


def _read_hunks(reader: _Reader) -> List[Hunk]:
    hunks: List[Hunk] = []
    while True:
        line = reader.peek()
        if line is None or not line.startswith(b"@@"):
            return hunks
        hunks.append(_read_hunk(reader))


def parse_hunks(data: bytes) -> List[Hunk]:
    """Parse a run of hunks with no file headers. Trailing non-hunk text is an error."""
    reader = _Reader(data)
    hunks = _read_hunks(reader)
    if not reader.at_end():
        raise ParseError(f"expected hunk header, got {_text(reader.peek())!r}", reader.lineno)
    return hunks


# ---------- file headers ----------


def _parse_file_header(line: bytes, prefix: bytes, lineno: int, log) -> Tuple[str, Optional[datetime]]:
    text = _text(line)[len(prefix):]

    if text.startswith('"'):
        try:
            name, rest = read_quoted_filename(text)
        except MalformedTokenError as e:
            raise ParseError(str(e), lineno) from e
        if rest.startswith("\t"):
            ts = parse_timestamp(rest[1:])
            if ts is None:
                log.debug(f"line {lineno}: ignoring unparseable timestamp {rest[1:]!r}")
            return name, ts
        if rest:
            raise ParseError(f"unexpected text after quoted filename: {rest!r}", lineno)
        return name, None

    name, tab, stamp = text.partition("\t")
    if not tab:
        return text, None
    ts = parse_timestamp(stamp)
    if ts is None:
        # Not a timestamp; the tab belongs to the filename.
        log.debug(f"line {lineno}: keeping unparseable timestamp {stamp!r} as part of the name")
        return text, None
    return name, ts


def _names_from_extended(fd: FileDiff) -> None:
    """Fill in orig/new names for a file diff that has no ---/+++ lines."""
    for xheader in fd.extended:
        if xheader.startswith("diff --git "):
            first, second, ok = parse_diff_git_args(xheader[len("diff --git "):])
            if ok:
                fd.orig_name, fd.new_name = first, second
        elif xheader.startswith("new file mode "):
            fd.orig_name = DEV_NULL
        elif xheader.startswith("deleted file mode "):
            fd.new_name = DEV_NULL
        elif xheader.startswith("rename from "):
            fd.orig_name = xheader[len("rename from "):]
        elif xheader.startswith("rename to "):
            fd.new_name = xheader[len("rename to "):]


def _read_file_diff(reader: _Reader, log) -> Optional[FileDiff]:
    if reader.at_end():
        return None

    fd = FileDiff()
    start = reader.lineno
    seen_diff_cmd = False

    while True:
        line = reader.peek()
        if line is None:
            break
        if line.startswith(b"--- "):
            break
        if line.startswith(b"@@"):
            raise ParseError("hunk found before file headers", reader.lineno)
        if line.startswith(b"diff "):
            if seen_diff_cmd:
                break
            seen_diff_cmd = True
        text = _text(line)
        m = _ONLY_IN_RE.match(text)
        if m:
            reader.next()
            fd.orig_name = posixpath.normpath(posixpath.join(m.group(1), m.group(2)))
            log.debug(f"line {start}: single-sided entry {fd.orig_name!r}")
            return fd
        fd.extended.append(text)
        reader.next()

    line = reader.peek()
    if line is None or not line.startswith(b"--- "):
        _names_from_extended(fd)
        log.debug(f"line {start}: headers-only file diff {fd.orig_name!r} -> {fd.new_name!r}")
        return fd

    reader.next()
    fd.orig_name, fd.orig_time = _parse_file_header(line, b"--- ", reader.lineno - 1, log)
    line = reader.peek()
    if line is None or not line.startswith(b"+++ "):
        raise ParseError("'---' file header not followed by '+++'", reader.lineno)
    reader.next()
    fd.new_name, fd.new_time = _parse_file_header(line, b"+++ ", reader.lineno - 1, log)

    fd.hunks = _read_hunks(reader)
    log.debug(f"line {start}: file diff {fd.orig_name!r} -> {fd.new_name!r} with {len(fd.hunks)} hunk(s)")
    return fd


def parse_multi_file_diff(
    data: bytes,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[FileDiff]:
    """
    Parse a diff covering any number of files (`git diff`, `diff -ruN`, ...).

    Text ahead of the first file header (a commit message, `diff -r` command
    lines) is kept in the first file's extended headers, so printing the
    result reproduces the input.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    reader = _Reader(data)
    diffs: List[FileDiff] = []
    while True:
        fd = _read_file_diff(reader, lg)
        if fd is None:
            break
        diffs.append(fd)
    lg.debug(f"parsed {len(diffs)} file diff(s)")
    return diffs


def parse_file_diff(
    data: bytes,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> FileDiff:
    """Parse a diff of exactly one file."""
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    reader = _Reader(data)
    fd = _read_file_diff(reader, lg)
    if fd is None:
        raise ParseError("no file diff found", 1)
    if not reader.at_end():
        raise ParseError("input holds more than one file diff", reader.lineno)
    return fd
