import pytest

from rheo_sdk.core.utils.abi_caster import cast_args, cast_single

TOKEN_COMPONENTS = [
    {"name": "token", "type": "address"},
    {"name": "amount", "type": "uint256"},
]


class TestCastSingle:
    def test_hex_string_to_int(self):
        assert cast_single("0x10", "uint256") == 16

    def test_decimal_string_to_int(self):
        assert cast_single("42", "int256") == 42

    def test_bool_from_string(self):
        assert cast_single("true", "bool") is True
        assert cast_single("no", "bool") is False

    def test_address_is_checksummed(self):
        addr = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"
        assert cast_single(addr, "address") == "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

    def test_bytes_from_hex(self):
        assert cast_single("0x1234", "bytes") == b"\x12\x34"


class TestCastArgs:
    def test_struct_from_mapping_ignores_extra_keys(self):
        inputs = [{"name": "params", "type": "tuple", "components": TOKEN_COMPONENTS}]
        out = cast_args(
            [{"amount": "5", "token": "0x" + "00" * 19 + "01", "memo": "x"}], inputs
        )
        assert out == [("0x0000000000000000000000000000000000000001", 5)]

    def test_struct_missing_field(self):
        inputs = [{"name": "params", "type": "tuple", "components": TOKEN_COMPONENTS}]
        with pytest.raises(ValueError, match="amount"):
            cast_args([{"token": "0x" + "00" * 20}], inputs)

    def test_array_of_ints(self):
        out = cast_args([["1", "0x2"]], [{"name": "ids", "type": "uint256[]"}])
        assert out == [[1, 2]]

    def test_count_mismatch(self):
        with pytest.raises(ValueError, match="count mismatch"):
            cast_args([1, 2], [{"name": "a", "type": "uint256"}])

    def test_struct_from_sequence(self):
        inputs = [{"name": "params", "type": "tuple", "components": TOKEN_COMPONENTS}]
        out = cast_args([("0x" + "00" * 19 + "02", "0x0A")], inputs)
        assert out == [("0x0000000000000000000000000000000000000002", 10)]

    def test_struct_rejects_scalar(self):
        inputs = [{"name": "params", "type": "tuple", "components": TOKEN_COMPONENTS}]
        with pytest.raises(TypeError):
            cast_args([7], inputs)
