from .files import print_file_diff, print_multi_file_diff
from .hunks import print_hunks

__all__ = ["print_file_diff", "print_multi_file_diff", "print_hunks"]
