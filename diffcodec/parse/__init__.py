from .core import NO_NEWLINE_MESSAGE, parse_file_diff, parse_hunks, parse_multi_file_diff
from .headers import XHeaderKind, classify_xheader, sort_extended_headers, xheaders_less
from .names import parse_diff_git_args, quote_filename, read_quoted_filename

__all__ = [
    "NO_NEWLINE_MESSAGE",
    "parse_file_diff",
    "parse_hunks",
    "parse_multi_file_diff",
    "XHeaderKind",
    "classify_xheader",
    "sort_extended_headers",
    "xheaders_less",
    "parse_diff_git_args",
    "quote_filename",
    "read_quoted_filename",
]
