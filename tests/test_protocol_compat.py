import pytest

from avmeta.protocol_compat import (
    is_additional_info_compatible,
    is_compatible,
    is_content_format_compatible,
    is_transport_compatible,
)
from avmeta.protocol_info import ProtocolInfo


def info(text):
    return ProtocolInfo.from_string(text)


MP3 = "http-get:*:audio/mpeg:DLNA.ORG_PN=MP3"


def test_identical_infos_are_compatible():
    assert is_compatible(info(MP3), info(MP3)) is True


def test_wildcard_protocol_matches_any():
    assert is_transport_compatible(info("*:*:audio/mpeg:*"), info(MP3)) is True
    assert is_transport_compatible(info(MP3), info("*:*:audio/mpeg:*")) is True


def test_different_protocols_do_not_match():
    assert is_transport_compatible(info("rtsp-rtp-udp:*:audio/mpeg:*"), info(MP3)) is False
    assert is_compatible(info("rtsp-rtp-udp:*:audio/mpeg:*"), info(MP3)) is False


def test_protocol_comparison_ignores_case():
    assert is_transport_compatible(info("HTTP-GET:*:audio/mpeg:*"), info(MP3)) is True


def test_internal_protocol_requires_same_network():
    a = info("internal:host-a:audio/mpeg:*")
    b = info("internal:host-b:audio/mpeg:*")
    assert is_transport_compatible(a, b) is False
    assert is_transport_compatible(a, info("internal:host-a:audio/mpeg:*")) is True


def test_different_mime_types_do_not_match():
    assert is_content_format_compatible(info("http-get:*:video/mp4:*"), info(MP3)) is False


def test_wildcard_mime_type_matches():
    assert is_content_format_compatible(info("http-get:*:*:*"), info(MP3)) is True


def test_mime_comparison_ignores_case():
    assert is_content_format_compatible(info("http-get:*:AUDIO/MPEG:*"), info(MP3)) is True


def test_lpcm_parameters_are_accepted_either_way():
    bare = info("http-get:*:audio/L16:*")
    with_params = info("http-get:*:audio/L16;rate=44100;channels=2:*")
    assert is_content_format_compatible(bare, with_params) is True
    assert is_content_format_compatible(with_params, bare) is True


def test_lpcm_with_different_parameters_do_not_match():
    a = info("http-get:*:audio/L16;rate=44100;channels=2:*")
    b = info("http-get:*:audio/L16;rate=48000;channels=2:*")
    assert is_content_format_compatible(a, b) is False


def test_missing_profile_is_compatible():
    assert is_additional_info_compatible(info("http-get:*:audio/mpeg:*"), info(MP3)) is True


def test_different_profiles_do_not_match():
    other = info("http-get:*:audio/mpeg:DLNA.ORG_PN=AAC_ISO")
    assert is_additional_info_compatible(other, info(MP3)) is False
    assert is_compatible(other, info(MP3)) is False


def test_profile_comparison_ignores_case():
    lower = info("http-get:*:audio/mpeg:DLNA.ORG_PN=mp3")
    assert is_additional_info_compatible(lower, info(MP3)) is True


@pytest.mark.parametrize(
    "a, b",
    [
        (MP3, "*:*:*:*"),
        (MP3, "rtsp-rtp-udp:*:audio/mpeg:*"),
        ("http-get:*:audio/L16:*", "http-get:*:audio/L16;rate=44100:*"),
        (MP3, "http-get:*:audio/mpeg:DLNA.ORG_PN=AAC_ISO"),
        ("internal:x:audio/mpeg:*", "internal:y:audio/mpeg:*"),
    ],
)
def test_compatibility_is_symmetric(a, b):
    assert is_compatible(info(a), info(b)) == is_compatible(info(b), info(a))


def test_non_protocol_info_is_rejected():
    with pytest.raises(TypeError):
        is_compatible(MP3, info(MP3))


def test_missing_protocol_is_rejected():
    with pytest.raises(ValueError):
        is_transport_compatible(ProtocolInfo(mime_type="audio/mpeg"), info(MP3))