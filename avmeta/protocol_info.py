"""The ProtocolInfo strings of UPnP AV resources and connection managers."""

import re
from dataclasses import dataclass

_ULONG_MASK = (1 << 64) - 1
_UINT_MASK = (1 << 32) - 1

_HEX_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)"
)
_DEC_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_PROFILE_KEY = "DLNA.ORG_PN="
_SPEEDS_KEY = "DLNA.ORG_PS="
_CONVERSION_KEY = "DLNA.ORG_CI="
_OPERATION_KEY = "DLNA.ORG_OP="
_FLAGS_KEY = "DLNA.ORG_FLAGS="

# Protocols for which the OP parameter may be written.
_OPERATION_PROTOCOLS = ("http-get", "rtsp-rtp-udp")
_RESERVED_FLAG_DIGITS = "0" * 24


class ProtocolError(ValueError):
    """A ProtocolInfo string does not have the required syntax."""


def _hex_value(text):
    """Leading hexadecimal number of ``text`` as a 32-bit unsigned value."""
    match = _HEX_PREFIX.match(text)
    digits = match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    if value > _ULONG_MASK:
        value = _ULONG_MASK
    elif match.group(1) == "-":
        value = -value & _ULONG_MASK
    return value & _UINT_MASK


def _decimal_value(text):
    """Leading decimal number of ``text`` as a signed 32-bit value."""
    match = _DEC_PREFIX.match(text)
    if not match:
        return 0
    value = int(match.group(1)) & _UINT_MASK
    if value >= 1 << 31:
        value -= 1 << 32
    return value


def _after(token, key):
    """Text following the first occurrence of ``key`` in ``token``, or None."""
    position = token.find(key)
    if position < 0:
        return None
    return token[position + len(key):]


@dataclass
class ProtocolInfo:
    """A ProtocolInfo value: transport, network, content format and DLNA details.

    ``dlna_conversion``, ``dlna_operation`` and ``dlna_flags`` hold the DLNA
    bit sets as integers; zero means none are set.
    """

    protocol: str | None = None
    network: str | None = None
    mime_type: str | None = None
    dlna_profile: str | None = None
    play_speeds: tuple | None = None
    dlna_conversion: int = 0
    dlna_operation: int = 0
    dlna_flags: int = 0

    def __post_init__(self):
        if self.play_speeds is not None:
            self.play_speeds = tuple(self.play_speeds)

    @classmethod
    def from_string(cls, protocol_info):
        """Parse a ``protocol:network:contentFormat:additionalInfo`` string."""
        if protocol_info is None:
            raise TypeError("protocol_info must not be None")

        tokens = protocol_info.split(":", 3)
        if len(tokens) < 4:
            raise ProtocolError(
                f"Failed to parse protocolInfo string: \n{protocol_info}"
            )

        protocol, network, mime_type, additional_info = tokens
        info = cls(protocol=protocol, network=network, mime_type=mime_type)
        info._parse_additional_info(additional_info)
        return info

    def _parse_additional_info(self, additional_info):
        if additional_info == "*":
            return

        for token in additional_info.split(";"):
            value = _after(token, _PROFILE_KEY)
            if value is not None:
                self.dlna_profile = value
                continue

            value = _after(token, _SPEEDS_KEY)
            if value is not None:
                self.play_speeds = tuple(value.split(",")) if value else ()
                continue

            value = _after(token, _CONVERSION_KEY)
            if value is not None:
                self.dlna_conversion = _decimal_value(value)
                continue

            value = _after(token, _OPERATION_KEY)
            if value is not None:
                self.dlna_operation = _hex_value(value)
                continue

            value = _after(token, _FLAGS_KEY)
            if value is not None:
                self.dlna_flags = _hex_value(value[:8])
                continue

    def _dlna_info(self):
        parts = [":"]
        if self.dlna_profile is not None:
            parts.append(f"{_PROFILE_KEY}{self.dlna_profile};")

        if self.dlna_operation and self.protocol in _OPERATION_PROTOCOLS:
            parts.append(f"{_OPERATION_KEY}{self.dlna_operation:02x};")

        if self.play_speeds is not None:
            parts.append(f"{_SPEEDS_KEY}{','.join(self.play_speeds)};")

        if self.dlna_conversion:
            parts.append(f"{_CONVERSION_KEY}{self.dlna_conversion:d};")

        if self.dlna_flags and self.dlna_profile is not None:
            parts.append(
                f"{_FLAGS_KEY}{self.dlna_flags:08x}{_RESERVED_FLAG_DIGITS}"
            )

        text = "".join(parts)
        if text.endswith(":"):
            return text + "*"
        if text.endswith(";"):
            return text[:-1]
        return text

    def to_string(self):
        """The ProtocolInfo string for this value.

        Raises ValueError if the protocol or the MIME type is not set.
        """
        if self.protocol is None:
            raise ValueError("protocol is not set")
        if self.mime_type is None:
            raise ValueError("mime_type is not set")

        network = self.network if self.network is not None else "*"
        return f"{self.protocol}:{network}:{self.mime_type}{self._dlna_info()}"

    def __str__(self):
        return self.to_string()