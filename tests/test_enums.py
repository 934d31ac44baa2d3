import pytest

from avmeta.enums import FragmentResult

DECLARED_NAMES = [
    "OK",
    "CURRENT_BAD_XML",
    "NEW_BAD_XML",
    "CURRENT_INVALID",
    "NEW_INVALID",
    "REQUIRED_TAG",
    "READONLY_TAG",
    "MISMATCH",
    "UNKNOWN_ERROR",
]


def test_members_are_in_declared_order():
    assert [
        FragmentResult(index).name for index in range(len(DECLARED_NAMES))
    ] == DECLARED_NAMES


def test_values_are_consecutive_from_zero():
    assert FragmentResult(0) is FragmentResult.OK
    assert FragmentResult(1) is FragmentResult.CURRENT_BAD_XML
    assert FragmentResult(7) is FragmentResult.MISMATCH
    assert FragmentResult(8) is FragmentResult.UNKNOWN_ERROR


def test_ok_is_the_only_falsy_result():
    assert not FragmentResult(0)
    assert all(FragmentResult(value) for value in range(1, len(DECLARED_NAMES)))


@pytest.mark.parametrize("member", list(FragmentResult))
def test_lookup_by_value_round_trips(member):
    assert FragmentResult(member.value) is member


def test_value_past_the_end_is_rejected():
    with pytest.raises(ValueError):
        FragmentResult(len(DECLARED_NAMES))