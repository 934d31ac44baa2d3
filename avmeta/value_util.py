"""Conversion of state-variable strings into typed values."""

import math
import re
import string
import struct

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _wrap(value, bits, signed):
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _strtol(text):
    """Leading decimal integer, clamped to the 64-bit range; 0 if none."""
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    return min(max(int(match.group(1)), _INT64_MIN), _INT64_MAX)


def _atoi(text):
    return _wrap(_strtol(text), 32, True)


def _atof(text):
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _to_single(number):
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _first_byte(text):
    data = text.encode("utf-8")
    return data[0] if data else 0


def _boolean(text):
    folded = text.translate(_ASCII_LOWER)
    if folded in ("true", "yes"):
        return True
    if folded in ("false", "no"):
        return False
    return _atoi(text) != 0


_CONVERTERS = {
    "string": lambda text: text,
    "char": lambda text: _wrap(_first_byte(text), 8, True),
    "uchar": _first_byte,
    "int": _atoi,
    "uint": lambda text: _wrap(_atoi(text), 32, False),
    "int64": _atoi,
    "uint64": lambda text: _wrap(_atoi(text), 64, False),
    "long": _strtol,
    "ulong": lambda text: _wrap(_strtol(text), 64, False),
    "float": lambda text: _to_single(_atof(text)),
    "double": _atof,
    "boolean": _boolean,
}

_BUILTIN_NAMES = {str: "string", bool: "boolean", int: "long", float: "double"}


def _convert_other(value_type, text):
    try:
        return value_type(text)
    except (TypeError, ValueError):
        pass
    try:
        return value_type(_atoi(text))
    except (TypeError, ValueError) as exc:
        name = getattr(value_type, "__name__", repr(value_type))
        raise ValueError(f"cannot convert {text!r} to {name}") from exc


def value_from_string(value_type, text):
    """Convert ``text`` to a value of ``value_type``.

    ``value_type`` is one of the names ``string``, ``char``, ``uchar``,
    ``int``, ``uint``, ``int64``, ``uint64``, ``long``, ``ulong``, ``float``,
    ``double`` and ``boolean``; one of the built-in types ``str``, ``bool``,
    ``int`` and ``float``; or any other callable, which is given the string
    and, failing that, its leading integer.
    """
    if not isinstance(text, str):
        raise TypeError("text must be a string")

    if isinstance(value_type, str):
        try:
            converter = _CONVERTERS[value_type]
        except KeyError:
            raise ValueError(f"unknown value type {value_type!r}") from None
        return converter(text)

    if value_type in _BUILTIN_NAMES:
        return _CONVERTERS[_BUILTIN_NAMES[value_type]](text)

    if not callable(value_type):
        raise TypeError(f"unsupported value type {value_type!r}")

    return _convert_other(value_type, text)