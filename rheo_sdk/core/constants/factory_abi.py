from __future__ import annotations

from rheo_sdk.core.constants.size_abi import (
    COPY_LIMIT_ORDER_CONFIG_COMPONENTS,
    MULTICALL_FUNCTION,
)

SET_AUTHORIZATION_FUNCTION = {
    "type": "function",
    "stateMutability": "nonpayable",
    "name": "setAuthorization",
    "inputs": [
        {"name": "operator", "type": "address"},
        {"name": "actionsBitmap", "type": "uint256"},
    ],
    "outputs": [],
}

REVOKE_ALL_AUTHORIZATIONS_FUNCTION = {
    "type": "function",
    "stateMutability": "nonpayable",
    "name": "revokeAllAuthorizations",
    "inputs": [],
    "outputs": [],
}

CALL_MARKET_FUNCTION = {
    "type": "function",
    "stateMutability": "nonpayable",
    "name": "callMarket",
    "inputs": [
        {"name": "market", "type": "address"},
        {"name": "data", "type": "bytes"},
    ],
    "outputs": [{"name": "result", "type": "bytes"}],
}

SUBSCRIBE_TO_COLLECTIONS_FUNCTION = {
    "type": "function",
    "stateMutability": "nonpayable",
    "name": "subscribeToCollections",
    "inputs": [{"name": "collectionIds", "type": "uint256[]"}],
    "outputs": [],
}

UNSUBSCRIBE_FROM_COLLECTIONS_FUNCTION = {
    "type": "function",
    "stateMutability": "nonpayable",
    "name": "unsubscribeFromCollections",
    "inputs": [{"name": "collectionIds", "type": "uint256[]"}],
    "outputs": [],
}

SIZE_FACTORY_V1_7_ABI = [
    SET_AUTHORIZATION_FUNCTION,
    REVOKE_ALL_AUTHORIZATIONS_FUNCTION,
    {
        "type": "function",
        "stateMutability": "view",
        "name": "isMarket",
        "inputs": [{"name": "candidate", "type": "address"}],
        "outputs": [{"name": "", "type": "bool"}],
    },
]

SIZE_FACTORY_V1_8_ABI = [
    MULTICALL_FUNCTION,
    CALL_MARKET_FUNCTION,
    SET_AUTHORIZATION_FUNCTION,
    REVOKE_ALL_AUTHORIZATIONS_FUNCTION,
    SUBSCRIBE_TO_COLLECTIONS_FUNCTION,
    UNSUBSCRIBE_FROM_COLLECTIONS_FUNCTION,
]

SIZE_FACTORY_V1_9_ABI = [
    *SIZE_FACTORY_V1_8_ABI,
    {
        "type": "function",
        "stateMutability": "nonpayable",
        "name": "setUserCollectionCopyLimitOrderConfigs",
        "inputs": [
            {"name": "collectionId", "type": "uint256"},
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
        ],
        "outputs": [],
    },
]
