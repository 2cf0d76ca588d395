import pytest
from pydantic import ValidationError

from rheo_sdk.actions import ERC20Actions, FactoryActions, MarketActions
from rheo_sdk.actions.types import (
    ApprovalOperation,
    MarketOperation,
    OperationEnvelope,
    TxArgs,
)
from rheo_sdk.core.errors import UnsupportedVersionError

MARKET = "0x00000000000000000000000000000000000000aa"
TOKEN = "0x4200000000000000000000000000000000000006"


class TestMarketActions:
    def test_deposit_operation(self):
        op = MarketActions("v1.8").deposit(MARKET, {"amount": 1}, value=5)
        assert op == MarketOperation(
            market=MARKET, function_name="deposit", params={"amount": 1}, value=5
        )

    def test_function_missing_from_version(self):
        with pytest.raises(ValueError, match="setVault"):
            MarketActions("v1.8").set_vault(MARKET, {})
        with pytest.raises(ValueError, match="compensate"):
            MarketActions("v1.9").compensate(MARKET, {})

    def test_version_is_normalized(self):
        assert MarketActions(" V1.9 ").version == "v1.9"

    def test_unknown_version(self):
        with pytest.raises(UnsupportedVersionError):
            MarketActions("v2.0")

    def test_operations_are_frozen(self):
        op = MarketActions("v1.7").withdraw(MARKET, {"amount": 1})
        with pytest.raises(ValidationError):
            op.market = TOKEN


class TestFactoryActions:
    def test_subscribe(self):
        op = FactoryActions("v1.8").subscribe_to_collections([1, 2])
        assert op.function_name == "subscribeToCollections"
        assert op.params == [1, 2]

    def test_collections_not_available_on_v1_7(self):
        with pytest.raises(ValueError):
            FactoryActions("v1.7").subscribe_to_collections([1])

    def test_collection_configs_only_on_v1_9(self):
        with pytest.raises(ValueError):
            FactoryActions("v1.8").set_user_collection_copy_limit_order_configs(1, {}, {})
        op = FactoryActions("v1.9").set_user_collection_copy_limit_order_configs(
            1, {"minTenor": 0}, {"minTenor": 0}
        )
        assert op.params[0] == 1


class TestTypes:
    def test_approval(self):
        op = ERC20Actions().approve(TOKEN, MARKET, 10)
        assert op == ApprovalOperation(token=TOKEN, params=[MARKET, 10])
        assert op.function_name == "approve"

    def test_envelope_discriminates_on_kind(self):
        env = OperationEnvelope.model_validate(
            {"op": {"kind": "approval", "token": TOKEN, "params": [MARKET, 1]}}
        )
        assert isinstance(env.op, ApprovalOperation)

    def test_tx_args_as_dict(self):
        assert TxArgs(target=MARKET, data="0x").as_dict() == {
            "to": MARKET,
            "data": "0x",
            "value": 0,
        }
