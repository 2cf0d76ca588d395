from __future__ import annotations

import random

import pytest

from rheo_sdk.actions.types import FactoryOperation
from rheo_sdk.core.constants.base import (
    DEFAULT_LABELS,
    MAX_UINT256,
    UNKNOWN_CALLDATA,
    ZERO_ADDRESS,
)
from rheo_sdk.core.utils.abi_coder import to_hex
from rheo_sdk.decoder import CalldataDecoder, DecodedCall, DecodedList, RawBytes
from rheo_sdk.tx.encoding import OperationEncoder

WETH = "0x4200000000000000000000000000000000000006"
RECEIVER = "0x0000000000000000000000000000000000001337"
BOB = "0x0000000000000000000000000000000000022222"

DEPOSIT_CALLDATA = (
    "0x0cf8542f"
    "0000000000000000000000004200000000000000000000000000000000000006"
    "0000000000000000000000000000000000000000000000000000000000000064"
    "0000000000000000000000000000000000000000000000000000000000001337"
)

DEPOSIT_TEXT = (
    "deposit(\n"
    "  {\n"
    f"    token: {WETH},\n"
    "    amount: 100,\n"
    f"    to: {RECEIVER}\n"
    "  }\n"
    ")"
)


@pytest.fixture
def decoder():
    return CalldataDecoder()


@pytest.fixture
def encoder():
    return OperationEncoder("v1.8")


class TestCalldataDecoder:
    def test_deposit(self, decoder):
        assert decoder.decode(DEPOSIT_CALLDATA) == DEPOSIT_TEXT

    def test_accepts_raw_bytes(self, decoder):
        assert decoder.decode(bytes.fromhex(DEPOSIT_CALLDATA[2:])) == DEPOSIT_TEXT

    @pytest.mark.parametrize(
        "data", ["", "0x", "0x12", "0xdeadbeef", "not hex", DEPOSIT_CALLDATA[:40]]
    )
    def test_unknown_or_invalid_data(self, decoder, data):
        assert decoder.decode(data) == UNKNOWN_CALLDATA
        assert decoder.decode_tree(data) is None

    def test_set_authorization_shows_actions(self, decoder, encoder):
        data = encoder.encode(
            FactoryOperation(function_name="setAuthorization", params=[BOB, 0b11])
        )
        assert data.startswith("0x91c769ce")
        assert decoder.decode(data) == (
            f"setAuthorization(\n  {BOB},\n  [DEPOSIT,WITHDRAW]\n)"
        )

    def test_nested_multicall(self, decoder, encoder):
        data = encoder.encode_multicall([DEPOSIT_CALLDATA, DEPOSIT_CALLDATA])
        tree = decoder.decode_tree(data)
        assert tree.name == "multicall"
        assert isinstance(tree.args[0], DecodedList)
        assert [c.name for c in tree.args[0].items] == ["deposit", "deposit"]

        nested = "\n".join("    " + line for line in DEPOSIT_TEXT.splitlines())
        assert decoder.decode(data) == (
            f"multicall(\n  [\n{nested},\n{nested}\n  ]\n)"
        )

    def test_call_market_decodes_inner_call(self, decoder, encoder):
        data = encoder.encode_call_market(RECEIVER, DEPOSIT_CALLDATA)
        tree = decoder.decode_tree(data)
        assert tree.name == "callMarket"
        assert isinstance(tree.args[1], DecodedCall)
        assert tree.args[1].name == "deposit"

    def test_depth_guard_leaves_bytes_raw(self, encoder):
        decoder = CalldataDecoder(max_depth=0)
        data = encoder.encode_multicall([DEPOSIT_CALLDATA])
        assert decoder.decode_tree(data).args[0] == DecodedList(
            (RawBytes(DEPOSIT_CALLDATA),)
        )
        assert decoder.decode(data) == f"multicall(\n  [{DEPOSIT_CALLDATA}]\n)"

    def test_self_nesting_is_bounded(self, encoder):
        data = DEPOSIT_CALLDATA
        for _ in range(5):
            data = encoder.encode_multicall([data])
        tree = CalldataDecoder(max_depth=2).decode_tree(data)
        inner = tree.args[0].items[0].args[0].items[0]
        assert inner.args[0].items[0] == RawBytes(
            encoder.encode_multicall(
                [encoder.encode_multicall([DEPOSIT_CALLDATA])]
            )
        )

    def test_labels(self, encoder):
        decoder = CalldataDecoder({**DEFAULT_LABELS, RECEIVER.upper(): "receiver"})
        data = encoder.market.encode_function_data(
            "withdraw", [{"token": ZERO_ADDRESS, "amount": MAX_UINT256, "to": RECEIVER}]
        )
        assert decoder.decode(data) == (
            "withdraw(\n"
            "  {\n"
            "    token: address(0),\n"
            "    amount: type(uint256).max,\n"
            "    to: receiver\n"
            "  }\n"
            ")"
        )

    def test_scalar_arrays_render_inline(self, decoder, encoder):
        data = encoder.encode(
            FactoryOperation(function_name="subscribeToCollections", params=[1, 2, 3])
        )
        assert decoder.decode(data) == "subscribeToCollections(\n  [1, 2, 3]\n)"

    def test_no_arguments(self, decoder, encoder):
        data = encoder.encode(FactoryOperation(function_name="revokeAllAuthorizations"))
        assert decoder.decode(data) == "revokeAllAuthorizations()"

    def test_nested_failure_only_affects_that_argument(
        self, decoder, encoder, monkeypatch
    ):
        data = encoder.encode_call_market(RECEIVER, DEPOSIT_CALLDATA)
        parse = decoder.coder.parse

        def parse_outer_only(raw):
            if to_hex(raw) == DEPOSIT_CALLDATA:
                raise RuntimeError("boom")
            return parse(raw)

        monkeypatch.setattr(decoder.coder, "parse", parse_outer_only)
        tree = decoder.decode_tree(data)
        assert tree.name == "callMarket"
        assert tree.args[1] == RawBytes(DEPOSIT_CALLDATA)


class TestCalldataDecoderIsTotal:
    def test_known_selectors_with_random_tails(self, decoder):
        rng = random.Random(1337)
        selectors = [f.selector for f in decoder.coder.fragments]
        for _ in range(500):
            tail = rng.randbytes(rng.choice([0, 1, 31, 32, 64, 100, 256]))
            data = rng.choice(selectors) + tail
            assert isinstance(decoder.decode(data), str)
            assert isinstance(decoder.decode(to_hex(data)), str)

    def test_truncated_nested_calldata(self, decoder, encoder):
        data = encoder.encode_call_market(
            RECEIVER, encoder.encode_multicall([DEPOSIT_CALLDATA, DEPOSIT_CALLDATA])
        )
        for end in range(2, len(data), 7):
            assert isinstance(decoder.decode(data[:end]), str)

    def test_random_bytes(self, decoder):
        rng = random.Random(42)
        for _ in range(300):
            assert isinstance(decoder.decode(rng.randbytes(rng.randrange(64))), str)
