"""Compatibility checks between two ProtocolInfo values."""

import string

from .protocol_info import ProtocolInfo

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_LPCM = "audio/l16"


def _fold(text):
    return text.translate(_ASCII_LOWER)


def _is_wildcard(text):
    return text.startswith("*")


def _require(info):
    if not isinstance(info, ProtocolInfo):
        raise TypeError(f"expected a ProtocolInfo, got {type(info).__name__}")
    return info


def _text(value, field):
    if value is None:
        raise ValueError(f"{field} is not set")
    return value


def is_transport_compatible(first, second):
    """True if the transports of ``first`` and ``second`` can work together.

    Protocols match when either is a wildcard or they are equal ignoring
    ASCII case. For the ``internal`` protocol the networks must be equal too.
    """
    protocol1 = _text(_require(first).protocol, "protocol")
    protocol2 = _text(_require(second).protocol, "protocol")

    if (
        not _is_wildcard(protocol1)
        and not _is_wildcard(protocol2)
        and _fold(protocol1) != _fold(protocol2)
    ):
        return False
    if _fold(protocol1) == "internal" and first.network != second.network:
        return False
    return True


def _is_lpcm_pair(exact, with_params):
    return _fold(exact) == _LPCM and _fold(with_params[: len(_LPCM)]) == _LPCM


def is_content_format_compatible(first, second):
    """True if the MIME types match, allowing wildcards and LPCM parameters.

    ``audio/L16`` is the one content type known to carry parameters, so a
    bare ``audio/L16`` matches any ``audio/L16;...`` type.
    """
    mime1 = _text(_require(first).mime_type, "mime_type")
    mime2 = _text(_require(second).mime_type, "mime_type")

    if _is_wildcard(mime1) or _is_wildcard(mime2):
        return True
    if _fold(mime1) == _fold(mime2):
        return True
    return _is_lpcm_pair(mime1, mime2) or _is_lpcm_pair(mime2, mime1)


def is_additional_info_compatible(first, second):
    """True unless both DLNA profiles are set, not wildcards, and differ."""
    profile1 = _require(first).dlna_profile
    profile2 = _require(second).dlna_profile

    if profile1 is None or profile2 is None:
        return True
    if _is_wildcard(profile1) or _is_wildcard(profile2):
        return True
    return _fold(profile1) == _fold(profile2)


def is_compatible(first, second):
    """True if transport, content format and additional info all match."""
    return (
        is_transport_compatible(first, second)
        and is_content_format_compatible(first, second)
        and is_additional_info_compatible(first, second)
    )