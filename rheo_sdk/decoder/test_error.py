from __future__ import annotations

import pytest
from eth_abi import encode as abi_encode

from rheo_sdk.core.errors import ErrorDecodingError
from rheo_sdk.core.utils.helpers import selector
from rheo_sdk.decoder import ErrorDecoder

TOKEN = "0x4200000000000000000000000000000000000006"
ALICE = "0x0000000000000000000000000000000000011111"


def _revert(signature: str, types: list[str], args: list) -> str:
    return "0x" + selector(signature) + abi_encode(types, args).hex()


@pytest.fixture(scope="module")
def decoder():
    return ErrorDecoder()


class TestErrorDecoder:
    def test_error_string(self, decoder):
        data = _revert("Error(string)", ["string"], ["ERC20: insufficient allowance"])
        assert decoder.decode(data) == "ERC20: insufficient allowance"

    def test_panic_code(self, decoder):
        data = _revert("Panic(uint256)", ["uint256"], [0x11])
        assert decoder.decode(data) == "17"

    def test_custom_error_without_arguments(self, decoder):
        assert decoder.decode("0x" + selector("NULL_AMOUNT()")) == "NULL_AMOUNT()"

    def test_custom_error_with_arguments(self, decoder):
        data = _revert("INVALID_MATURITY(uint256)", ["uint256"], [123])
        assert decoder.decode(data) == "INVALID_MATURITY(123)"

    def test_address_arguments_are_checksummed(self, decoder):
        data = _revert(
            "ERC20InsufficientBalance(address,uint256,uint256)",
            ["address", "uint256", "uint256"],
            [ALICE, 1, 2],
        )
        assert decoder.decode(data) == f"ERC20InsufficientBalance({ALICE},1,2)"

    def test_invalid_token(self, decoder):
        data = _revert("INVALID_TOKEN(address)", ["address"], [TOKEN])
        assert decoder.decode(data) == f"INVALID_TOKEN({TOKEN})"

    @pytest.mark.parametrize("data", ["", "0x", "0xdeadbeef", "zz"])
    def test_unknown_data_raises(self, decoder, data):
        with pytest.raises(ErrorDecodingError):
            decoder.decode(data)

    def test_malformed_error_string_raises(self, decoder):
        with pytest.raises(ErrorDecodingError) as exc_info:
            decoder.decode("0x" + selector("Error(string)") + "00")
        assert exc_info.value.__cause__ is not None

    def test_non_utf8_reason_raises(self, decoder):
        body = abi_encode(["bytes"], [b"\xff\xfe"]).hex()
        with pytest.raises(ErrorDecodingError) as exc_info:
            decoder.decode("0x" + selector("Error(string)") + body)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_erc721_error(self, decoder):
        data = _revert("ERC721NonexistentToken(uint256)", ["uint256"], [5])
        assert decoder.decode(data) == "ERC721NonexistentToken(5)"

    def test_erc1155_error(self, decoder):
        data = _revert(
            "ERC1155InsufficientBalance(address,uint256,uint256,uint256)",
            ["address", "uint256", "uint256", "uint256"],
            [ALICE, 1, 2, 3],
        )
        assert decoder.decode(data) == f"ERC1155InsufficientBalance({ALICE},1,2,3)"

    def test_collections_manager_error(self, decoder):
        role = b"\x01" * 32
        data = _revert(
            "AccessControlUnauthorizedAccount(address,bytes32)",
            ["address", "bytes32"],
            [ALICE, role],
        )
        assert decoder.decode(data) == (
            f"AccessControlUnauthorizedAccount({ALICE},0x{role.hex()})"
        )
