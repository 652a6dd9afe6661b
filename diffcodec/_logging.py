"""
Debug tracing for the parser and printers.

`parse_multi_file_diff`, `parse_file_diff`, `print_file_diff` and
`print_multi_file_diff` all take `logger=` and `log=`. Pass a logger to
receive debug records for each file diff (and for each timestamp the parser
left inside a filename), or `log=True` to get them on the module's own
`diffcodec.*` logger. With neither, the calls go to a NoopLogger and nothing
reaches the root logger.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def _ensure_default_handler(lg: logging.Logger) -> None:
    # Bubble to the root so pytest's caplog sees the records.
    lg.propagate = True


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "diffcodec")
        lg.setLevel(level)
        _ensure_default_handler(lg)
        return lg
    return NoopLogger()
