"""
Date helpers: Java-style date patterns, ISO-8601 detection and epoch
millisecond conversion.

Patterns use the ``yyyy MM dd HH mm ss SSS XXX`` tokens (quoted text is
literal), e.g. ``MM/dd/yyyy`` or ``yyyy-MM-dd'T'HH:mm:ssXXX``.  Values
without an explicit offset are read and printed in the configured time zone
(``SHEETBOOK_TIMEZONE``).
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import List, Optional, Tuple

from config import get_timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

ISO_FORMAT_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)

_TOKEN_RE = re.compile(r"'[^']*'|yyyy|MM|dd|HH|mm|ss|SSS|XXX")

_STRPTIME = {
    "yyyy": "%Y",
    "MM": "%m",
    "dd": "%d",
    "HH": "%H",
    "mm": "%M",
    "ss": "%S",
    "SSS": "%f",
    "XXX": "%z",
}


def _tokenize(pattern: str) -> List[Tuple[bool, str]]:
    """Split *pattern* into ``(is_token, text)`` pieces."""
    pieces: List[Tuple[bool, str]] = []
    pos = 0
    for m in _TOKEN_RE.finditer(pattern):
        if m.start() > pos:
            pieces.append((False, pattern[pos:m.start()]))
        tok = m.group(0)
        if tok.startswith("'"):
            pieces.append((False, tok[1:-1]))
        else:
            pieces.append((True, tok))
        pos = m.end()
    if pos < len(pattern):
        pieces.append((False, pattern[pos:]))
    return pieces


def _strptime_format(pattern: str) -> str:
    out = []
    for is_token, text in _tokenize(pattern):
        out.append(_STRPTIME[text] if is_token else text.replace("%", "%%"))
    return "".join(out)


def _format_offset(dt: datetime) -> str:
    offset = dt.utcoffset() or timedelta(0)
    if not offset:
        return "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


# ---------------------------------------------------------------------------
# Epoch conversion
# ---------------------------------------------------------------------------


def to_epoch_millis(dt: datetime) -> int:
    """Milliseconds since the Unix epoch.  Naive values use the configured zone."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=get_timezone())
    return (dt - _EPOCH) // timedelta(milliseconds=1)


def from_epoch_millis(millis: float, tz: Optional[tzinfo] = None) -> datetime:
    return (_EPOCH + timedelta(milliseconds=millis)).astimezone(tz or get_timezone())


def localize(value: date) -> datetime:
    """Attach the configured zone to a naive ``date``/``datetime``."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=get_timezone())
    return value


# ---------------------------------------------------------------------------
# ISO-8601
# ---------------------------------------------------------------------------


def is_iso_datetime(text: str) -> bool:
    """``YYYY-MM-DDThh:mm:ss[.fraction](Z|+hh:mm)``, nothing more, nothing less."""
    return ISO_FORMAT_RE.match(text) is not None


def parse_iso(text: str) -> int:
    """Parse an ISO-8601 date-time (see ``is_iso_datetime``) into epoch millis."""
    m = ISO_FORMAT_RE.match(text)
    if m is None:
        raise ValueError(f"Not an ISO-8601 date-time: {text!r}")
    base, fraction, offset = m.groups()
    micros = ((fraction or "") + "000000")[:6]
    if offset == "Z":
        offset = "+00:00"
    dt = datetime.fromisoformat(f"{base}.{micros}{offset}")
    return to_epoch_millis(dt)


def format_iso(value: date) -> str:
    """Render a date/datetime as ISO-8601 with an offset (``Z`` for UTC)."""
    dt = localize(value)
    text = dt.strftime("%Y-%m-%dT%H:%M:%S")
    if dt.microsecond:
        text += f".{dt.microsecond // 1000:03d}"
    return text + _format_offset(dt)


# ---------------------------------------------------------------------------
# Pattern-based parse / print
# ---------------------------------------------------------------------------


def parse_date(text: str, pattern: str) -> Optional[int]:
    """
    Parse *text* with a Java-style *pattern*.  Returns epoch milliseconds,
    or ``None`` when the text is not a valid date under that pattern.
    """
    try:
        dt = datetime.strptime(text, _strptime_format(pattern))
    except ValueError:
        return None
    return to_epoch_millis(dt)


def format_date(millis: float, pattern: str) -> str:
    """Print epoch milliseconds with a Java-style *pattern*."""
    dt = from_epoch_millis(millis)
    out = []
    for is_token, text in _tokenize(pattern):
        if not is_token:
            out.append(text)
        elif text == "SSS":
            out.append(f"{dt.microsecond // 1000:03d}")
        elif text == "XXX":
            out.append(_format_offset(dt))
        else:
            out.append(dt.strftime(_STRPTIME[text]))
    return "".join(out)
