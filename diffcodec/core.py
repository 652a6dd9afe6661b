# diffcodec/core.py
from __future__ import annotations

import dataclasses
from typing import Iterable, List

import pathspec

from .models.diff import FileDiff
from .parse.headers import sort_extended_headers
from .parse.names import DEV_NULL
from .utils.paths import strip_path_prefix

__all__ = ["canonicalize_file_diff", "select_file_diffs", "file_diff_path"]


def canonicalize_file_diff(fd: FileDiff) -> FileDiff:
    """Return a copy of `fd` with its extended headers in git's order."""
    return dataclasses.replace(fd, extended=sort_extended_headers(fd.extended))


def file_diff_path(fd: FileDiff) -> str:
    """
    The repository path a FileDiff is about: the new name, or the original
    name for deletions and single-sided entries, without git's a/ or b/ prefix.
    """
    name = fd.new_name
    if not name or name == DEV_NULL:
        name = fd.orig_name
    return strip_path_prefix(name)


def select_file_diffs(diffs: Iterable[FileDiff], patterns: Iterable[str]) -> List[FileDiff]:
    """
    Keep the FileDiffs whose path matches `patterns` (gitignore syntax,
    negation included), in their original order.
    """
    spec = pathspec.PathSpec.from_lines("gitwildmatch", list(patterns))
    return [fd for fd in diffs if spec.match_file(file_diff_path(fd))]
