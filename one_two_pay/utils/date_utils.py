"""Timestamp parsing for the gateway's textual dates"""

import re
from datetime import datetime

# Gateway patterns, written without the optional fraction of a second
TRANSFER_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"  # 2022-03-02T20:30:04+07:00
QUERY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"  # 2022-05-17 08:41:48.320

_FRACTION = re.compile(r"(?<=:\d\d)\.(\d+)")


def parse_timestamp(text: str, fmt: str) -> datetime:
    """
    Parse `text` against `fmt`, accepting an optional fraction right after the seconds.

    Fractions of any length are accepted; digits past microseconds are dropped.

    Raises:
        ValueError: If text does not match the pattern
    """
    match = _FRACTION.search(text)
    if match is None:
        return datetime.strptime(text, fmt)

    micros = match.group(1)[:6].ljust(6, "0")
    value = f"{text[:match.start()]}.{micros}{text[match.end():]}"
    return datetime.strptime(value, fmt.replace("%S", "%S.%f", 1))
