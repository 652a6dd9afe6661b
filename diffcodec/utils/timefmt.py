# diffcodec/utils/timefmt.py
import re
from datetime import datetime, timedelta, timezone
from typing import Optional


_TIMESTAMP_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2}) (?P<clock>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d{1,9}))?"
    r"(?: (?P<tz>[+-]\d{4}))?$"
)


def format_timestamp(ts: datetime) -> str:
    """
    Render a file header timestamp, e.g. `2013-05-24 12:31:12.000000000 -0700`.
    Naive datetimes are taken to be UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    nanos = ts.microsecond * 1000
    return f"{ts.strftime('%Y-%m-%d %H:%M:%S')}.{nanos:09d} {ts.strftime('%z')}"


def parse_timestamp(text: str) -> Optional[datetime]:
    """
    Parse the timestamp part of a file header line. Fractional seconds and
    the zone offset are optional; sub-microsecond digits are truncated.
    Returns None when `text` is not a timestamp.
    """
    m = _TIMESTAMP_RE.match(text)
    if not m:
        return None

    tz = timezone.utc
    if m.group("tz"):
        raw = m.group("tz")
        hours, minutes = int(raw[1:3]), int(raw[3:5])
        if hours > 23 or minutes > 59:
            return None
        offset = timedelta(hours=hours, minutes=minutes)
        tz = timezone(-offset if raw[0] == "-" else offset)

    try:
        ts = datetime.strptime(f"{m.group('date')} {m.group('clock')}", "%Y-%m-%d %H:%M:%S")
    except ValueError:
        return None

    frac = m.group("frac")
    micros = int(frac.ljust(9, "0")[:6]) if frac else 0
    return ts.replace(microsecond=micros, tzinfo=tz)
