import pytest

from avmeta.time_utils import seconds_from_time, seconds_to_time


@pytest.mark.parametrize("seconds", [0, 59, 60, 61, 3599, 3600, 86399, 360000, 1234567])
def test_round_trip(seconds):
    assert seconds_from_time(seconds_to_time(seconds)) == seconds


def test_pinned_format():
    assert seconds_to_time(3723) == "1:02:03.000"


def test_negative_seconds_have_no_representation():
    assert seconds_to_time(-1) is None


@pytest.mark.parametrize("text", [None, "", "12", "12:34"])
def test_too_few_fields(text):
    assert seconds_from_time(text) == -1


def test_fraction_is_truncated():
    assert seconds_from_time("0:00:01.999") == 1


def test_extra_fields_are_ignored():
    assert seconds_from_time("1:02:03:99") == seconds_from_time("1:02:03")


def test_unparsable_field_reads_as_zero():
    assert seconds_from_time("abc:00:05") == seconds_from_time("0:00:05")


def test_trailing_garbage_in_field_is_ignored():
    assert seconds_from_time("1:02:03xyz") == seconds_from_time("1:02:03")


def test_leading_whitespace_is_skipped():
    assert seconds_from_time(" 1:00:00") == seconds_from_time("1:00:00")


def test_formatted_fields_are_zero_padded():
    text = seconds_to_time(5)
    hours, minutes, rest = text.split(":")
    assert len(minutes) == 2
    assert len(rest.split(".")[0]) == 2
    assert rest.endswith(".000")