# diffcodec/utils/__init__.py
from .paths import split_dir_base, strip_path_prefix
from .timefmt import format_timestamp, parse_timestamp

__all__ = [
    "split_dir_base",
    "strip_path_prefix",
    "format_timestamp",
    "parse_timestamp",
]
