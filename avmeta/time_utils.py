"""Conversion between whole seconds and ``H:MM:SS.fff`` duration strings."""

import re

_SEC_PER_MIN = 60
_SEC_PER_HOUR = 3600

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def _leading_float(text):
    """Read the number at the start of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def seconds_from_time(time_str):
    """Return the whole seconds in an ``H:MM:SS[.fff]`` string, or -1 if unreadable.

    Each field is read from its leading number; trailing garbage is ignored,
    as are fields after the third. Fractions of a second are truncated.
    """
    if time_str is None:
        return -1

    tokens = time_str.split(":")
    if len(tokens) < 3:
        return -1

    hours, minutes, seconds = tokens[:3]
    total = _leading_float(seconds)
    total += _leading_float(minutes) * _SEC_PER_MIN
    total += _leading_float(hours) * _SEC_PER_HOUR
    return int(total)


def seconds_to_time(seconds):
    """Format ``seconds`` as ``H:MM:SS.000``; ``None`` for negative input."""
    if seconds < 0:
        return None
    hours, rest = divmod(seconds, _SEC_PER_HOUR)
    minutes, secs = divmod(rest, _SEC_PER_MIN)
    return f"{hours}:{minutes:02d}:{secs:02d}.000"