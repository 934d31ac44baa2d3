"""Enumerations shared across the DIDL-Lite tooling."""

from enum import IntEnum


class FragmentResult(IntEnum):
    """Possible outcomes of applying a set of DIDL-Lite fragments to an object."""

    OK = 0
    CURRENT_BAD_XML = 1
    NEW_BAD_XML = 2
    CURRENT_INVALID = 3
    NEW_INVALID = 4
    REQUIRED_TAG = 5
    READONLY_TAG = 6
    MISMATCH = 7
    UNKNOWN_ERROR = 8