# diffcodec/utils/paths.py
import posixpath
from typing import Tuple


def split_dir_base(path: str) -> Tuple[str, str]:
    """
    Split a diff path into (directory, basename) the way `diff -r` names
    one-sided entries. Paths are always '/'-separated regardless of platform.

    split_dir_base("a/b/c.txt") -> ("a/b", "c.txt")
    split_dir_base("c.txt")     -> (".", "c.txt")
    split_dir_base("a/b/")      -> ("a/b", "b")
    """
    directory = posixpath.normpath(posixpath.dirname(path))

    stripped = path.rstrip("/")
    if not stripped:
        base = "/" if path else "."
    else:
        base = stripped.rsplit("/", 1)[-1]
    return directory, base


def strip_path_prefix(name: str) -> str:
    """Drop git's `a/` or `b/` side prefix, if present."""
    if name.startswith(("a/", "b/")):
        return name[2:]
    return name
