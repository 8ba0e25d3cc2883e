import pytest
from web3 import Web3

from kswap_farming import validation
from kswap_farming.constants import ZERO_ADDRESS
from kswap_farming.errors import FarmingSDKError

ADDRESS = "0x" + "ab" * 20


def test_validate_address_returns_checksum():
    assert validation.validate_address(f" {ADDRESS} ") == Web3.to_checksum_address(ADDRESS)
    assert validation.validate_address(ADDRESS.upper().replace("0X", "0x")) == Web3.to_checksum_address(ADDRESS)


@pytest.mark.parametrize("address", [None, "", "0x1234", "not-an-address", 42])
def test_validate_address_rejects_invalid(address):
    with pytest.raises(FarmingSDKError) as excinfo:
        validation.validate_address(address, "pair_address")
    assert excinfo.value.code == "VALIDATION_ERROR"
    assert excinfo.value.details["parameter_name"] == "pair_address"


def test_is_empty_address():
    assert validation.is_empty_address(None)
    assert validation.is_empty_address("")
    assert validation.is_empty_address(ZERO_ADDRESS)
    assert not validation.is_empty_address(ADDRESS)


def test_validate_amount_positive():
    value = validation.validate_amount(10**18)
    assert value == 10**18


@pytest.mark.parametrize("amount", [0, -1, "1", 1.5, True])
def test_validate_amount_rejects(amount):
    with pytest.raises(FarmingSDKError) as excinfo:
        validation.validate_amount(amount)
    assert excinfo.value.code == "VALIDATION_ERROR"


def test_validate_amount_allows_zero_when_asked():
    assert validation.validate_amount(0, "native_value", allow_zero=True) == 0
