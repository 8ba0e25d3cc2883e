import pytest

from kswap_farming.errors import FarmingSDKError
from kswap_farming.uint256 import MAX_UINT256, ZERO, UInt256, format_units, parse_units


def test_uint256_accepts_range_bounds():
    assert UInt256(0) == 0
    assert UInt256(MAX_UINT256) == MAX_UINT256
    assert UInt256("0x10") == 16


def test_uint256_rejects_out_of_range():
    with pytest.raises(FarmingSDKError) as excinfo:
        UInt256(-1)
    assert excinfo.value.code == "UINT256_UNDERFLOW"

    with pytest.raises(FarmingSDKError) as excinfo:
        UInt256(MAX_UINT256 + 1)
    assert excinfo.value.code == "UINT256_OVERFLOW"


def test_uint256_checked_arithmetic():
    total = UInt256(5) + 7
    assert isinstance(total, UInt256)
    assert total == 12
    assert UInt256(10) - 4 == 6
    assert UInt256(3) * 4 == 12
    assert UInt256(10) // 3 == 3

    with pytest.raises(FarmingSDKError):
        ZERO - 1
    with pytest.raises(FarmingSDKError):
        UInt256(MAX_UINT256) + 1
    with pytest.raises(FarmingSDKError):
        UInt256(2**200) * 2**100


def test_uint256_str_and_repr():
    assert str(UInt256(42)) == "42"
    assert repr(UInt256(42)) == "UInt256(42)"


def test_parse_units():
    assert parse_units("1.5") == 1_500_000_000_000_000_000
    assert parse_units("1", decimals=6) == 1_000_000
    assert parse_units(0) == 0


@pytest.mark.parametrize("amount", ["abc", "NaN", "Infinity", "0.0000001", "-1"])
def test_parse_units_rejects(amount):
    with pytest.raises(FarmingSDKError):
        parse_units(amount, decimals=6)


def test_format_units():
    assert format_units(1_500_000_000_000_000_000) == "1.5"
    assert format_units(1_000_000, decimals=6) == "1"
    assert format_units(0) == "0"
