"""Rheo market ABI (v1.9): fixed-maturity limit orders and vaults."""

from __future__ import annotations

from rheo_sdk.core.constants.size_abi import (
    COPY_LIMIT_ORDER_CONFIG_COMPONENTS,
    DEPOSIT_PARAMS_COMPONENTS,
    LIQUIDATE_PARAMS_COMPONENTS,
    MULTICALL_FUNCTION,
    REPAY_PARAMS_COMPONENTS,
    SELF_LIQUIDATE_PARAMS_COMPONENTS,
    SET_USER_CONFIGURATION_PARAMS_COMPONENTS,
    WITHDRAW_PARAMS_COMPONENTS,
    on_behalf_of_components,
    struct_function,
)

BUY_CREDIT_LIMIT_PARAMS_V1_9_COMPONENTS = [
    {"name": "maturities", "type": "uint256[]"},
    {"name": "aprs", "type": "uint256[]"},
]

SELL_CREDIT_LIMIT_PARAMS_V1_9_COMPONENTS = [
    {"name": "maturities", "type": "uint256[]"},
    {"name": "aprs", "type": "uint256[]"},
]

BUY_CREDIT_MARKET_PARAMS_V1_9_COMPONENTS = [
    {"name": "borrower", "type": "address"},
    {"name": "creditPositionId", "type": "uint256"},
    {"name": "amount", "type": "uint256"},
    {"name": "maturity", "type": "uint256"},
    {"name": "deadline", "type": "uint256"},
    {"name": "minAPR", "type": "uint256"},
    {"name": "exactAmountIn", "type": "bool"},
    {"name": "collectionId", "type": "uint256"},
    {"name": "rateProvider", "type": "address"},
]

SELL_CREDIT_MARKET_PARAMS_V1_9_COMPONENTS = [
    {"name": "lender", "type": "address"},
    {"name": "creditPositionId", "type": "uint256"},
    {"name": "amount", "type": "uint256"},
    {"name": "maturity", "type": "uint256"},
    {"name": "deadline", "type": "uint256"},
    {"name": "maxAPR", "type": "uint256"},
    {"name": "exactAmountIn", "type": "bool"},
    {"name": "collectionId", "type": "uint256"},
    {"name": "rateProvider", "type": "address"},
]

SET_COPY_LIMIT_ORDER_CONFIGS_PARAMS_V1_9_COMPONENTS = [
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

SET_VAULT_PARAMS_COMPONENTS = [
    {"name": "vault", "type": "address"},
    {"name": "forfeitOldShares", "type": "bool"},
]

RHEO_V1_9_ABI = [
    MULTICALL_FUNCTION,
    struct_function("deposit", DEPOSIT_PARAMS_COMPONENTS),
    struct_function("withdraw", WITHDRAW_PARAMS_COMPONENTS),
    struct_function("buyCreditLimit", BUY_CREDIT_LIMIT_PARAMS_V1_9_COMPONENTS),
    struct_function("buyCreditMarket", BUY_CREDIT_MARKET_PARAMS_V1_9_COMPONENTS),
    struct_function("sellCreditLimit", SELL_CREDIT_LIMIT_PARAMS_V1_9_COMPONENTS),
    struct_function("sellCreditMarket", SELL_CREDIT_MARKET_PARAMS_V1_9_COMPONENTS),
    struct_function("selfLiquidate", SELF_LIQUIDATE_PARAMS_COMPONENTS),
    struct_function("repay", REPAY_PARAMS_COMPONENTS),
    struct_function("liquidate", LIQUIDATE_PARAMS_COMPONENTS),
    struct_function("setUserConfiguration", SET_USER_CONFIGURATION_PARAMS_COMPONENTS),
    struct_function(
        "setCopyLimitOrderConfigs", SET_COPY_LIMIT_ORDER_CONFIGS_PARAMS_V1_9_COMPONENTS
    ),
    struct_function("setVault", SET_VAULT_PARAMS_COMPONENTS),
    struct_function(
        "depositOnBehalfOf", on_behalf_of_components(DEPOSIT_PARAMS_COMPONENTS)
    ),
    struct_function(
        "withdrawOnBehalfOf", on_behalf_of_components(WITHDRAW_PARAMS_COMPONENTS)
    ),
    struct_function(
        "buyCreditLimitOnBehalfOf",
        on_behalf_of_components(BUY_CREDIT_LIMIT_PARAMS_V1_9_COMPONENTS),
    ),
    struct_function(
        "buyCreditMarketOnBehalfOf",
        on_behalf_of_components(
            BUY_CREDIT_MARKET_PARAMS_V1_9_COMPONENTS, with_recipient=True
        ),
    ),
    struct_function(
        "sellCreditLimitOnBehalfOf",
        on_behalf_of_components(SELL_CREDIT_LIMIT_PARAMS_V1_9_COMPONENTS),
    ),
    struct_function(
        "sellCreditMarketOnBehalfOf",
        on_behalf_of_components(
            SELL_CREDIT_MARKET_PARAMS_V1_9_COMPONENTS, with_recipient=True
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
        on_behalf_of_components(SET_COPY_LIMIT_ORDER_CONFIGS_PARAMS_V1_9_COMPONENTS),
    ),
    struct_function(
        "setVaultOnBehalfOf", on_behalf_of_components(SET_VAULT_PARAMS_COMPONENTS)
    ),
]
