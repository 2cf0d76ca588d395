"""Delegated ("on behalf of") variants of market operations.

Only functions listed in ``ON_BEHALF_OF_CAPABILITIES`` can be executed by an
operator for another account. ``repay``, ``liquidate`` and ``compensate``
are intentionally absent: they never get a delegated variant and never
require an authorization grant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rheo_sdk.actions.authorization import FUNCTION_NAME_TO_ACTION, Action
from rheo_sdk.actions.types import MarketOperation


@dataclass(frozen=True)
class OnBehalfOfCapability:
    function_name: str
    action: Action
    # Trades that pay out to someone also take a recipient
    with_recipient: bool = False


def _capability(name: str, *, with_recipient: bool = False) -> OnBehalfOfCapability:
    return OnBehalfOfCapability(
        function_name=f"{name}OnBehalfOf",
        action=FUNCTION_NAME_TO_ACTION[name],
        with_recipient=with_recipient,
    )


ON_BEHALF_OF_CAPABILITIES: dict[str, OnBehalfOfCapability] = {
    "deposit": _capability("deposit"),
    "withdraw": _capability("withdraw"),
    "buyCreditLimit": _capability("buyCreditLimit"),
    "buyCreditMarket": _capability("buyCreditMarket", with_recipient=True),
    "sellCreditLimit": _capability("sellCreditLimit"),
    "sellCreditMarket": _capability("sellCreditMarket", with_recipient=True),
    "selfLiquidate": _capability("selfLiquidate", with_recipient=True),
    "setUserConfiguration": _capability("setUserConfiguration"),
    "setCopyLimitOrderConfigs": _capability("setCopyLimitOrderConfigs"),
    "setVault": _capability("setVault"),
}


@dataclass(frozen=True)
class OnBehalfOfOperation:
    market: str
    function_name: str
    action: Action
    external_params: dict[str, Any]


def supports_on_behalf_of(function_name: str) -> bool:
    return function_name in ON_BEHALF_OF_CAPABILITIES


def on_behalf_of_operation(
    operation: MarketOperation,
    on_behalf_of: str,
    recipient: str | None = None,
) -> OnBehalfOfOperation | None:
    """Wrap *operation* so that it executes for *on_behalf_of*.

    Returns ``None`` for functions without a delegated counterpart.
    """
    capability = ON_BEHALF_OF_CAPABILITIES.get(operation.function_name)
    if capability is None:
        return None

    external_params: dict[str, Any] = {
        "params": operation.params,
        "onBehalfOf": on_behalf_of,
    }
    if capability.with_recipient:
        external_params["recipient"] = recipient or on_behalf_of

    return OnBehalfOfOperation(
        market=operation.market,
        function_name=capability.function_name,
        action=capability.action,
        external_params=external_params,
    )
