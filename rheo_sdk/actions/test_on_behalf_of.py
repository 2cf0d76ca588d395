from rheo_sdk.actions.authorization import Action
from rheo_sdk.actions.on_behalf_of import on_behalf_of_operation, supports_on_behalf_of
from rheo_sdk.actions.types import MarketOperation

MARKET = "0x00000000000000000000000000000000000000aa"
ALICE = "0x0000000000000000000000000000000000011111"
BOB = "0x0000000000000000000000000000000000022222"


def _op(function_name, params=None):
    return MarketOperation(
        market=MARKET, function_name=function_name, params=params or {"x": 1}
    )


class TestOnBehalfOf:
    def test_deposit_is_wrapped_without_recipient(self):
        wrapped = on_behalf_of_operation(_op("deposit"), ALICE)
        assert wrapped.function_name == "depositOnBehalfOf"
        assert wrapped.action is Action.DEPOSIT
        assert wrapped.market == MARKET
        assert wrapped.external_params == {"params": {"x": 1}, "onBehalfOf": ALICE}

    def test_recipient_defaults_to_on_behalf_of(self):
        wrapped = on_behalf_of_operation(_op("sellCreditMarket"), ALICE)
        assert wrapped.external_params["recipient"] == ALICE

    def test_explicit_recipient(self):
        wrapped = on_behalf_of_operation(_op("buyCreditMarket"), ALICE, BOB)
        assert wrapped.action is Action.BUY_CREDIT_MARKET
        assert wrapped.external_params["recipient"] == BOB

    def test_recipient_ignored_where_not_accepted(self):
        wrapped = on_behalf_of_operation(_op("withdraw"), ALICE, BOB)
        assert "recipient" not in wrapped.external_params

    def test_unsupported_functions(self):
        for name in ("repay", "liquidate", "compensate", "copyLimitOrders"):
            assert not supports_on_behalf_of(name)
            assert on_behalf_of_operation(_op(name), ALICE) is None
