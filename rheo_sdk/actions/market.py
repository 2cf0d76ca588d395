"""Parameter builders for market operations.

Each helper returns an immutable ``MarketOperation`` whose ``params`` dict
is keyed by the struct field names of the selected version's market ABI.
"""

from __future__ import annotations

from typing import Any

from rheo_sdk.actions.types import MarketOperation
from rheo_sdk.core.constants.versions import MARKET_ABIS, check_version


class MarketActions:
    def __init__(self, version: str):
        self.version = check_version(version)
        self._functions = frozenset(
            item["name"]
            for item in MARKET_ABIS[self.version]
            if item.get("type") == "function"
        )

    def _operation(
        self,
        function_name: str,
        market: str,
        params: dict[str, Any],
        value: int | None = None,
    ) -> MarketOperation:
        if function_name not in self._functions:
            raise ValueError(
                f"Market function '{function_name}' is not available in {self.version}"
            )
        return MarketOperation(
            market=market, function_name=function_name, params=params, value=value
        )

    def deposit(
        self, market: str, params: dict[str, Any], value: int | None = None
    ) -> MarketOperation:
        return self._operation("deposit", market, params, value)

    def withdraw(self, market: str, params: dict[str, Any]) -> MarketOperation:
        return self._operation("withdraw", market, params)

    def buy_credit_limit(self, market: str, params: dict[str, Any]) -> MarketOperation:
        return self._operation("buyCreditLimit", market, params)

    def buy_credit_market(
        self, market: str, params: dict[str, Any]
    ) -> MarketOperation:
        return self._operation("buyCreditMarket", market, params)

    def sell_credit_limit(
        self, market: str, params: dict[str, Any]
    ) -> MarketOperation:
        return self._operation("sellCreditLimit", market, params)

    def sell_credit_market(
        self, market: str, params: dict[str, Any]
    ) -> MarketOperation:
        return self._operation("sellCreditMarket", market, params)

    def self_liquidate(self, market: str, params: dict[str, Any]) -> MarketOperation:
        return self._operation("selfLiquidate", market, params)

    def repay(self, market: str, params: dict[str, Any]) -> MarketOperation:
        return self._operation("repay", market, params)

    def liquidate(self, market: str, params: dict[str, Any]) -> MarketOperation:
        return self._operation("liquidate", market, params)

    def compensate(self, market: str, params: dict[str, Any]) -> MarketOperation:
        return self._operation("compensate", market, params)

    def set_user_configuration(
        self, market: str, params: dict[str, Any]
    ) -> MarketOperation:
        return self._operation("setUserConfiguration", market, params)

    def copy_limit_orders(
        self, market: str, params: dict[str, Any]
    ) -> MarketOperation:
        return self._operation("copyLimitOrders", market, params)

    def set_copy_limit_order_configs(
        self, market: str, params: dict[str, Any]
    ) -> MarketOperation:
        return self._operation("setCopyLimitOrderConfigs", market, params)

    def set_vault(self, market: str, params: dict[str, Any]) -> MarketOperation:
        return self._operation("setVault", market, params)
