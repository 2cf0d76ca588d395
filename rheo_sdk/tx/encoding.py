from __future__ import annotations

from typing import assert_never

from rheo_sdk.actions.on_behalf_of import OnBehalfOfOperation
from rheo_sdk.actions.types import (
    ApprovalOperation,
    FactoryOperation,
    MarketOperation,
    Operation,
)
from rheo_sdk.core.constants.erc20_abi import ERC20_ABI
from rheo_sdk.core.constants.factory_abi import CALL_MARKET_FUNCTION
from rheo_sdk.core.constants.size_abi import MULTICALL_FUNCTION
from rheo_sdk.core.constants.versions import FACTORY_ABIS, MARKET_ABIS, check_version
from rheo_sdk.core.utils.abi_coder import AbiCoder


def same_address(a: str, b: str) -> bool:
    return str(a).lower() == str(b).lower()


class OperationEncoder:
    """Encodes operations against the market, factory and ERC20 ABIs of a version."""

    def __init__(self, version: str):
        self.version = check_version(version)
        self.market = AbiCoder(MARKET_ABIS[self.version])
        self.factory = AbiCoder(FACTORY_ABIS[self.version])
        self.erc20 = AbiCoder(ERC20_ABI)
        # Outer batching calls used by the composers
        self._multicall = AbiCoder([MULTICALL_FUNCTION])
        self._call_market = AbiCoder([CALL_MARKET_FUNCTION])

    def encode(self, operation: Operation) -> str:
        match operation:
            case MarketOperation():
                return self.market.encode_function_data(
                    operation.function_name, [operation.params]
                )
            case FactoryOperation():
                return self.encode_factory(operation)
            case ApprovalOperation():
                return self.erc20.encode_function_data(
                    operation.function_name, list(operation.params)
                )
            case _:
                assert_never(operation)

    def encode_factory(self, operation: FactoryOperation) -> str:
        fragment = self.factory.get_function(operation.function_name)
        params = list(operation.params)
        # A lone array input takes the whole params list as its single argument
        if len(fragment.inputs) == 1 and str(fragment.inputs[0]["type"]).endswith(
            "[]"
        ):
            params = [params]
        return self.factory.encode_function_data(operation.function_name, params)

    def encode_on_behalf_of(self, operation: OnBehalfOfOperation) -> str:
        return self.market.encode_function_data(
            operation.function_name, [operation.external_params]
        )

    def encode_multicall(self, calldatas: list[str]) -> str:
        return self._multicall.encode_function_data("multicall", [calldatas])

    def encode_call_market(self, market: str, calldata: str) -> str:
        return self._call_market.encode_function_data("callMarket", [market, calldata])

    def encode_set_authorization(self, operator: str, actions_bitmap: int) -> str:
        return self.factory.encode_function_data(
            "setAuthorization", [operator, actions_bitmap]
        )
