from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Hunk:
    """One `@@ -a,b +c,d @@` block and its raw body lines."""

    orig_start_line: int = 0
    orig_lines: int = 0
    new_start_line: int = 0
    new_lines: int = 0
    section: str = ""          # text after the closing '@@', without the separating space
    body: bytes = b""          # ' '/'-'/'+' lines, last one may lack its '\n'
    orig_no_newline_at: int = 0  # offset in body where the orig side ran out of newline; 0 = none


@dataclass
class FileDiff:
    """
    A single file's section of a unified diff.

    An empty `new_name` marks a single-sided entry ("Only in dir: name").
    `hunks` is None when the file has extended headers only (pure renames,
    mode changes, binary notes); an empty list still prints the ---/+++ pair.
    """

    orig_name: str = ""
    orig_time: Optional[datetime] = None
    new_name: str = ""
    new_time: Optional[datetime] = None
    extended: List[str] = field(default_factory=list)
    hunks: Optional[List[Hunk]] = None
