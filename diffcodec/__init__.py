from .core import canonicalize_file_diff, file_diff_path, select_file_diffs
from .errors import DiffError, MalformedTokenError, ParseError
from .models import FileDiff, Hunk
from .parse import (
    XHeaderKind,
    classify_xheader,
    parse_diff_git_args,
    parse_file_diff,
    parse_hunks,
    parse_multi_file_diff,
    quote_filename,
    read_quoted_filename,
    sort_extended_headers,
    xheaders_less,
)
from .render import print_file_diff, print_hunks, print_multi_file_diff

__all__ = [
    "FileDiff",
    "Hunk",
    "parse_file_diff",
    "parse_multi_file_diff",
    "parse_hunks",
    "print_file_diff",
    "print_multi_file_diff",
    "print_hunks",
    "read_quoted_filename",
    "quote_filename",
    "parse_diff_git_args",
    "XHeaderKind",
    "classify_xheader",
    "xheaders_less",
    "sort_extended_headers",
    "canonicalize_file_diff",
    "select_file_diffs",
    "file_diff_path",
    "DiffError",
    "MalformedTokenError",
    "ParseError",
]
