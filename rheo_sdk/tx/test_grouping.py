from __future__ import annotations

import pytest

from rheo_sdk.actions import ERC20Actions, MarketActions
from rheo_sdk.actions.types import FactoryOperation
from rheo_sdk.core.constants.base import FULL_COPY, MAX_UINT256, NULL_COPY
from rheo_sdk.core.errors import NoOperationsError
from rheo_sdk.core.utils.helpers import selector
from rheo_sdk.decoder import CalldataDecoder, DecodedCall
from rheo_sdk.tx import TxBuilder, group_operations
from rheo_sdk.tx.grouping import GroupingComposer, MarketGroup, SingletonGroup

FACTORY = "0x00000000000000000000000000000000000000ff"
MARKET_A = "0x00000000000000000000000000000000000000aa"
MARKET_B = "0x00000000000000000000000000000000000000bb"
WETH = "0x4200000000000000000000000000000000000006"
ALICE = "0x0000000000000000000000000000000000011111"

MULTICALL_SELECTOR = "0x" + selector("multicall(bytes[])")


@pytest.fixture
def builder():
    return TxBuilder(FACTORY, "v1.7")


@pytest.fixture
def market():
    return MarketActions("v1.7")


def _deposit(market, target, amount=100, value=None):
    return market.deposit(
        target, {"token": WETH, "amount": amount, "to": ALICE}, value=value
    )


class TestGroupOperations:
    def test_consecutive_same_market_ops_share_a_group(self, market):
        groups = group_operations(
            [
                _deposit(market, MARKET_A),
                _deposit(market, "0x00000000000000000000000000000000000000AA"),
            ]
        )
        assert len(groups) == 1
        assert isinstance(groups[0], MarketGroup)
        assert len(groups[0].operations) == 2

    def test_interleaved_markets_are_not_merged(self, market):
        groups = group_operations(
            [
                _deposit(market, MARKET_A),
                _deposit(market, MARKET_B),
                _deposit(market, MARKET_A),
            ]
        )
        assert [g.market for g in groups] == [MARKET_A, MARKET_B, MARKET_A]

    def test_approval_is_a_singleton(self, market):
        approval = ERC20Actions().approve(WETH, MARKET_A, 100)
        groups = group_operations([approval, _deposit(market, MARKET_A)])
        assert groups[0] == SingletonGroup(operation=approval)


class TestGroupingComposer:
    def test_builder_picks_grouping_composer(self, builder):
        assert isinstance(builder.composer, GroupingComposer)

    def test_single_operation_is_sent_directly(self, builder, market):
        op = _deposit(market, MARKET_A, value=7)
        txs = builder.build(ALICE, [op])
        assert len(txs) == 1
        assert txs[0].target == MARKET_A
        assert txs[0].data == builder.encoder.encode(op)
        assert txs[0].value == 7

    def test_same_market_ops_become_one_multicall(self, builder, market):
        ops = [
            _deposit(market, MARKET_A, value=1),
            market.withdraw(MARKET_A, {"token": WETH, "amount": 5, "to": ALICE}),
            _deposit(market, MARKET_A, value=2),
        ]
        txs = builder.build(ALICE, ops)
        assert len(txs) == 1
        assert txs[0].target == MARKET_A
        assert txs[0].data.startswith(MULTICALL_SELECTOR)
        assert txs[0].value == 3

        tree = CalldataDecoder().decode_tree(txs[0].data)
        inner = tree.args[0].items
        assert [c.name for c in inner] == ["deposit", "withdraw", "deposit"]
        assert all(isinstance(c, DecodedCall) for c in inner)

    def test_multicall_without_value(self, builder, market):
        txs = builder.build(ALICE, [_deposit(market, MARKET_A), _deposit(market, MARKET_A)])
        assert txs[0].value is None

    def test_one_call_per_group(self, builder, market):
        ops = [
            ERC20Actions().approve(WETH, MARKET_A, 100),
            _deposit(market, MARKET_A),
            _deposit(market, MARKET_B),
            FactoryOperation(function_name="revokeAllAuthorizations"),
        ]
        txs = builder.build(ALICE, ops)
        assert [tx.target for tx in txs] == [WETH, MARKET_A, MARKET_B, FACTORY]
        assert txs[0].data.startswith("0x" + selector("approve(address,uint256)"))
        assert txs[3].data == "0x" + selector("revokeAllAuthorizations()")

    def test_config_then_copy_orders_scenario(self, builder, market):
        ops = [
            market.set_user_configuration(
                MARKET_B,
                {
                    "openingLimitBorrowCR": 0,
                    "allCreditPositionsForSaleDisabled": False,
                    "creditPositionIdsForSale": False,
                    "creditPositionIds": [],
                },
            ),
            _deposit(market, MARKET_A),
            market.copy_limit_orders(
                MARKET_A,
                {
                    "copyAddress": ALICE,
                    "copyLoanOffer": FULL_COPY,
                    "copyBorrowOffer": NULL_COPY,
                },
            ),
        ]
        txs = builder.build(ALICE, ops)
        assert [tx.target for tx in txs] == [MARKET_B, MARKET_A]
        assert txs[0].data == builder.encoder.encode(ops[0])
        inner = CalldataDecoder().decode_tree(txs[1].data).args[0].items
        assert [c.name for c in inner] == ["deposit", "copyLimitOrders"]

    def test_approve_trade_authorize_scenario(self, builder, market):
        ops = [
            ERC20Actions().approve(WETH, MARKET_A, 100),
            _deposit(market, MARKET_A),
            market.sell_credit_market(
                MARKET_A,
                {
                    "lender": ALICE,
                    "creditPositionId": MAX_UINT256,
                    "amount": 100,
                    "tenor": 86400,
                    "deadline": 1_700_000_000,
                    "maxAPR": 10**17,
                    "exactAmountIn": False,
                },
            ),
            FactoryOperation(function_name="setAuthorization", params=[ALICE, 1]),
        ]
        txs = builder.build(ALICE, ops)
        assert [tx.target for tx in txs] == [WETH, MARKET_A, FACTORY]
        assert txs[1].data.startswith(MULTICALL_SELECTOR)
        assert txs[2].data.startswith("0x" + selector("setAuthorization(address,uint256)"))

    def test_empty_operations(self, builder):
        with pytest.raises(NoOperationsError, match="no operations to execute"):
            builder.build(ALICE, [])
