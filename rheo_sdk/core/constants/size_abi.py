"""Size market ABIs (v1.7 and v1.8).

Every state-changing market function takes a single ``params`` struct, and
every v1.8 ``<fn>OnBehalfOf`` variant wraps that struct together with the
principal (and, for trades that pay out, a recipient).
"""

from __future__ import annotations

from typing import Any


def struct_function(
    name: str,
    components: list[dict[str, Any]],
    *,
    state_mutability: str = "payable",
) -> dict[str, Any]:
    return {
        "type": "function",
        "stateMutability": state_mutability,
        "name": name,
        "inputs": [{"name": "params", "type": "tuple", "components": components}],
        "outputs": [],
    }


def on_behalf_of_components(
    components: list[dict[str, Any]], *, with_recipient: bool = False
) -> list[dict[str, Any]]:
    out = [
        {"name": "params", "type": "tuple", "components": components},
        {"name": "onBehalfOf", "type": "address"},
    ]
    if with_recipient:
        out.append({"name": "recipient", "type": "address"})
    return out


MULTICALL_FUNCTION = {
    "type": "function",
    "stateMutability": "payable",
    "name": "multicall",
    "inputs": [{"name": "data", "type": "bytes[]"}],
    "outputs": [{"name": "results", "type": "bytes[]"}],
}

DEPOSIT_PARAMS_COMPONENTS = [
    {"name": "token", "type": "address"},
    {"name": "amount", "type": "uint256"},
    {"name": "to", "type": "address"},
]

WITHDRAW_PARAMS_COMPONENTS = [
    {"name": "token", "type": "address"},
    {"name": "amount", "type": "uint256"},
    {"name": "to", "type": "address"},
]

YIELD_CURVE_COMPONENTS = [
    {"name": "tenors", "type": "uint256[]"},
    {"name": "aprs", "type": "int256[]"},
    {"name": "marketRateMultipliers", "type": "uint256[]"},
]

BUY_CREDIT_LIMIT_PARAMS_COMPONENTS = [
    {"name": "maxDueDate", "type": "uint256"},
    {"name": "curveRelativeTime", "type": "tuple", "components": YIELD_CURVE_COMPONENTS},
]

SELL_CREDIT_LIMIT_PARAMS_COMPONENTS = [
    {"name": "maxDueDate", "type": "uint256"},
    {"name": "curveRelativeTime", "type": "tuple", "components": YIELD_CURVE_COMPONENTS},
]

BUY_CREDIT_MARKET_PARAMS_V1_7_COMPONENTS = [
    {"name": "borrower", "type": "address"},
    {"name": "creditPositionId", "type": "uint256"},
    {"name": "amount", "type": "uint256"},
    {"name": "tenor", "type": "uint256"},
    {"name": "deadline", "type": "uint256"},
    {"name": "minAPR", "type": "uint256"},
    {"name": "exactAmountIn", "type": "bool"},
]

SELL_CREDIT_MARKET_PARAMS_V1_7_COMPONENTS = [
    {"name": "lender", "type": "address"},
    {"name": "creditPositionId", "type": "uint256"},
    {"name": "amount", "type": "uint256"},
    {"name": "tenor", "type": "uint256"},
    {"name": "deadline", "type": "uint256"},
    {"name": "maxAPR", "type": "uint256"},
    {"name": "exactAmountIn", "type": "bool"},
]

# v1.8 adds collection-based pricing to market orders
BUY_CREDIT_MARKET_PARAMS_V1_8_COMPONENTS = [
    *BUY_CREDIT_MARKET_PARAMS_V1_7_COMPONENTS,
    {"name": "collectionId", "type": "uint256"},
    {"name": "rateProvider", "type": "address"},
]

SELL_CREDIT_MARKET_PARAMS_V1_8_COMPONENTS = [
    *SELL_CREDIT_MARKET_PARAMS_V1_7_COMPONENTS,
    {"name": "collectionId", "type": "uint256"},
    {"name": "rateProvider", "type": "address"},
]

SELF_LIQUIDATE_PARAMS_COMPONENTS = [
    {"name": "creditPositionId", "type": "uint256"},
    {"name": "minimumCollateralProfit", "type": "uint256"},
]

REPAY_PARAMS_COMPONENTS = [
    {"name": "debtPositionId", "type": "uint256"},
    {"name": "borrower", "type": "address"},
]

LIQUIDATE_PARAMS_COMPONENTS = [
    {"name": "debtPositionId", "type": "uint256"},
    {"name": "minimumCollateralProfit", "type": "uint256"},
    {"name": "deadline", "type": "uint256"},
]

COMPENSATE_PARAMS_COMPONENTS = [
    {"name": "creditPositionWithDebtToRepayId", "type": "uint256"},
    {"name": "creditPositionToCompensateId", "type": "uint256"},
    {"name": "amount", "type": "uint256"},
]

SET_USER_CONFIGURATION_PARAMS_COMPONENTS = [
    {"name": "openingLimitBorrowCR", "type": "uint256"},
    {"name": "allCreditPositionsForSaleDisabled", "type": "bool"},
    {"name": "creditPositionIdsForSale", "type": "bool"},
    {"name": "creditPositionIds", "type": "uint256[]"},
]

COPY_LIMIT_ORDER_COMPONENTS = [
    {"name": "minTenor", "type": "uint256"},
    {"name": "maxTenor", "type": "uint256"},
    {"name": "minAPR", "type": "uint256"},
    {"name": "maxAPR", "type": "uint256"},
    {"name": "offsetAPR", "type": "int256"},
]

COPY_LIMIT_ORDERS_PARAMS_COMPONENTS = [
    {"name": "copyAddress", "type": "address"},
    {"name": "copyLoanOffer", "type": "tuple", "components": COPY_LIMIT_ORDER_COMPONENTS},
    {"name": "copyBorrowOffer", "type": "tuple", "components": COPY_LIMIT_ORDER_COMPONENTS},
]

# Same shape as CopyLimitOrder, renamed to CopyLimitOrderConfig in v1.8
COPY_LIMIT_ORDER_CONFIG_COMPONENTS = [
    {"name": "minTenor", "type": "uint256"},
    {"name": "maxTenor", "type": "uint256"},
    {"name": "minAPR", "type": "uint256"},
    {"name": "maxAPR", "type": "uint256"},
    {"name": "offsetAPR", "type": "int256"},
]

SET_COPY_LIMIT_ORDER_CONFIGS_PARAMS_COMPONENTS = [
    {
        "name": "copyLoanOfferConfig",
        "type": "tuple",
        "components": COPY_LIMIT_ORDER_CONFIG_COMPONENTS,
    },
    {
        "name": "copyBorrowOfferConfig",
        "type": "tuple",
        "components": COPY_LIMIT_ORDER_CONFIG_COMPONENTS,
    },
]

SIZE_V1_7_ABI = [
    MULTICALL_FUNCTION,
    struct_function("deposit", DEPOSIT_PARAMS_COMPONENTS),
    struct_function("withdraw", WITHDRAW_PARAMS_COMPONENTS),
    struct_function("buyCreditLimit", BUY_CREDIT_LIMIT_PARAMS_COMPONENTS),
    struct_function("buyCreditMarket", BUY_CREDIT_MARKET_PARAMS_V1_7_COMPONENTS),
    struct_function("sellCreditLimit", SELL_CREDIT_LIMIT_PARAMS_COMPONENTS),
    struct_function("sellCreditMarket", SELL_CREDIT_MARKET_PARAMS_V1_7_COMPONENTS),
    struct_function("selfLiquidate", SELF_LIQUIDATE_PARAMS_COMPONENTS),
    struct_function("repay", REPAY_PARAMS_COMPONENTS),
    struct_function("liquidate", LIQUIDATE_PARAMS_COMPONENTS),
    struct_function("compensate", COMPENSATE_PARAMS_COMPONENTS),
    struct_function("setUserConfiguration", SET_USER_CONFIGURATION_PARAMS_COMPONENTS),
    struct_function("copyLimitOrders", COPY_LIMIT_ORDERS_PARAMS_COMPONENTS),
    {
        "type": "function",
        "stateMutability": "view",
        "name": "riskConfig",
        "inputs": [],
        "outputs": [
            {
                "name": "",
                "type": "tuple",
                "components": [
                    {"name": "crOpening", "type": "uint256"},
                    {"name": "crLiquidation", "type": "uint256"},
                    {"name": "minimumCreditBorrowToken", "type": "uint256"},
                    {"name": "minTenor", "type": "uint256"},
                    {"name": "maxTenor", "type": "uint256"},
                ],
            }
        ],
    },
]

SIZE_V1_8_ABI = [
    MULTICALL_FUNCTION,
    struct_function("deposit", DEPOSIT_PARAMS_COMPONENTS),
    struct_function("withdraw", WITHDRAW_PARAMS_COMPONENTS),
    struct_function("buyCreditLimit", BUY_CREDIT_LIMIT_PARAMS_COMPONENTS),
    struct_function("buyCreditMarket", BUY_CREDIT_MARKET_PARAMS_V1_8_COMPONENTS),
    struct_function("sellCreditLimit", SELL_CREDIT_LIMIT_PARAMS_COMPONENTS),
    struct_function("sellCreditMarket", SELL_CREDIT_MARKET_PARAMS_V1_8_COMPONENTS),
    struct_function("selfLiquidate", SELF_LIQUIDATE_PARAMS_COMPONENTS),
    struct_function("repay", REPAY_PARAMS_COMPONENTS),
    struct_function("liquidate", LIQUIDATE_PARAMS_COMPONENTS),
    struct_function("compensate", COMPENSATE_PARAMS_COMPONENTS),
    struct_function("setUserConfiguration", SET_USER_CONFIGURATION_PARAMS_COMPONENTS),
    struct_function(
        "setCopyLimitOrderConfigs", SET_COPY_LIMIT_ORDER_CONFIGS_PARAMS_COMPONENTS
    ),
    struct_function(
        "depositOnBehalfOf", on_behalf_of_components(DEPOSIT_PARAMS_COMPONENTS)
    ),
    struct_function(
        "withdrawOnBehalfOf", on_behalf_of_components(WITHDRAW_PARAMS_COMPONENTS)
    ),
    struct_function(
        "buyCreditLimitOnBehalfOf",
        on_behalf_of_components(BUY_CREDIT_LIMIT_PARAMS_COMPONENTS),
    ),
    struct_function(
        "buyCreditMarketOnBehalfOf",
        on_behalf_of_components(
            BUY_CREDIT_MARKET_PARAMS_V1_8_COMPONENTS, with_recipient=True
        ),
    ),
    struct_function(
        "sellCreditLimitOnBehalfOf",
        on_behalf_of_components(SELL_CREDIT_LIMIT_PARAMS_COMPONENTS),
    ),
    struct_function(
        "sellCreditMarketOnBehalfOf",
        on_behalf_of_components(
            SELL_CREDIT_MARKET_PARAMS_V1_8_COMPONENTS, with_recipient=True
        ),
    ),
    struct_function(
        "selfLiquidateOnBehalfOf",
        on_behalf_of_components(SELF_LIQUIDATE_PARAMS_COMPONENTS, with_recipient=True),
    ),
    struct_function(
        "setUserConfigurationOnBehalfOf",
        on_behalf_of_components(SET_USER_CONFIGURATION_PARAMS_COMPONENTS),
    ),
    struct_function(
        "setCopyLimitOrderConfigsOnBehalfOf",
        on_behalf_of_components(SET_COPY_LIMIT_ORDER_CONFIGS_PARAMS_COMPONENTS),
    ),
]
