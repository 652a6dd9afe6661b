# diffcodec/parse/names.py
"""
Filename tokens as they appear on `diff --git`, `rename from/to` and ---/+++ lines.

git wraps a path in double quotes and C-escapes it whenever the path holds a
quote, a backslash or a control character. Unquoted paths are written as-is,
spaces included, which is what makes the two arguments of `diff --git`
ambiguous.
"""
from __future__ import annotations

from typing import Iterator, Optional, Tuple

from ..errors.quote import MalformedTokenError

__all__ = ["read_quoted_filename", "quote_filename", "parse_diff_git_args"]

DEV_NULL = "/dev/null"

_UNESCAPE = {
    '"': '"',
    "\\": "\\",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}
_ESCAPE = {v: k for k, v in _UNESCAPE.items()}
_OCTAL = "01234567"


def _closing_quote(text: str) -> int:
    """Index of the first '"' after text[0] not preceded by an odd run of backslashes, or -1."""
    backslashes = 0
    for i in range(1, len(text)):
        ch = text[i]
        if ch == '"' and backslashes % 2 == 0:
            return i
        if ch == "\\":
            backslashes += 1
        else:
            backslashes = 0
    return -1


def _unescape(inner: str, token: str) -> str:
    out = bytearray()
    i, n = 0, len(inner)
    while i < n:
        ch = inner[i]
        if ch != "\\":
            out += ch.encode("utf-8", "surrogateescape")
            i += 1
            continue
        if i + 1 >= n:
            raise MalformedTokenError(f"dangling escape in {token!r}", token)
        esc = inner[i + 1]
        if esc in _UNESCAPE:
            out += _UNESCAPE[esc].encode("ascii")
            i += 2
            continue
        digits = inner[i + 1:i + 4]
        if len(digits) == 3 and all(d in _OCTAL for d in digits) and digits[0] in "0123":
            out.append(int(digits, 8))
            i += 4
            continue
        raise MalformedTokenError(f"unsupported escape '\\{esc}' in {token!r}", token)
    return out.decode("utf-8", "surrogateescape")


def read_quoted_filename(text: str) -> Tuple[str, str]:
    """
    Decode the quoted filename at the start of `text`.

    Returns (value, remainder) where remainder is whatever follows the closing
    quote, untouched. Raises MalformedTokenError when `text` does not open
    with a quote, the quote is never closed, or an escape is not one git
    writes.

    The closing quote is the first one preceded by an even number of
    backslashes, so `"uh \\\\"oh"` ends right after `uh \\\\`.
    """
    if not text or text[0] != '"':
        raise MalformedTokenError(f"filename must start with '\"': {text!r}", text)
    end = _closing_quote(text)
    if end < 0:
        raise MalformedTokenError(f"end of string found while searching for '\"': {text!r}", text)
    token = text[:end + 1]
    return _unescape(text[1:end], token), text[end + 1:]


def quote_filename(name: str) -> str:
    """
    Quote `name` for a header line. `/dev/null` and names that are already
    quoted pass through unchanged.

    Quotes, backslashes and control characters are escaped; printable
    characters, non-ASCII included, are written as-is. Anything else
    (undecodable bytes kept as surrogates, invisible format characters) is
    written as octal escapes of its UTF-8 bytes.
    """
    if name == DEV_NULL:
        return name
    if name.startswith('"'):
        return name

    out = ['"']
    for ch in name:
        if ch in _ESCAPE:
            out.append("\\" + _ESCAPE[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            out.extend(f"\\{b:03o}" for b in ch.encode("utf-8", "surrogateescape"))
    out.append('"')
    return "".join(out)


# ---------- diff --git argument splitting ----------


def _valid_unquoted(arg: str) -> bool:
    return bool(arg) and not arg.startswith('"') and not arg.endswith('"')


def _read_last_arg(text: str) -> Optional[str]:
    """Read `text` as exactly one argument; None if anything is left over or malformed."""
    if text.startswith('"'):
        try:
            value, rest = read_quoted_filename(text)
        except MalformedTokenError:
            return None
        return value if rest == "" else None
    return text if _valid_unquoted(text) else None


def _unquoted_splits(args: str) -> Iterator[Tuple[str, str]]:
    """Yield every (first, second) reading with an unquoted first argument, left to right."""
    pos = args.find(" ")
    while pos != -1:
        first = args[:pos]
        if _valid_unquoted(first):
            second = _read_last_arg(args[pos + 1:])
            if second is not None:
                yield first, second
        pos = args.find(" ", pos + 1)


def _same_path(first: str, second: str) -> bool:
    # "a/foo bar" and "b/foo bar" name the same file once the side prefix is gone.
    return first.split("/", 1)[-1] == second.split("/", 1)[-1]


def parse_diff_git_args(args: str) -> Tuple[str, str, bool]:
    """
    Split the text after `diff --git ` into its two filenames.

    Returns (first, second, True) on success and ("", "", False) when the
    text cannot be read as exactly two non-empty arguments.

    When neither side is quoted and the names contain spaces, several splits
    may be valid. The first split whose two halves are the same path apart
    from their leading component wins (`a/x y b/x y`); failing that, the
    leftmost valid split is used.
    """
    if args.startswith('"'):
        try:
            first, rest = read_quoted_filename(args)
        except MalformedTokenError:
            return "", "", False
        if not rest.startswith(" "):
            return "", "", False
        second = _read_last_arg(rest[1:])
        if not first or not second:
            return "", "", False
        return first, second, True

    candidates = list(_unquoted_splits(args))
    if not candidates:
        return "", "", False
    for first, second in candidates:
        if _same_path(first, second):
            return first, second, True
    first, second = candidates[0]
    return first, second, True
