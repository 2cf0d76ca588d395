from __future__ import annotations

from typing import Any


def error_fragment(name: str, *inputs: tuple[str, str]) -> dict[str, Any]:
    return {
        "type": "error",
        "name": name,
        "inputs": [{"name": n, "type": t} for n, t in inputs],
    }


SIZE_V1_7_ERRORS_ABI = [
    error_fragment("NULL_ADDRESS"),
    error_fragment("NULL_AMOUNT"),
    error_fragment("NULL_TENOR"),
    error_fragment("NULL_MAX_DUE_DATE"),
    error_fragment("NULL_ARRAY"),
    error_fragment("INVALID_TOKEN", ("token", "address")),
    error_fragment("INVALID_MSG_VALUE", ("value", "uint256")),
    error_fragment("PAST_DEADLINE", ("deadline", "uint256")),
    error_fragment("PAST_MAX_DUE_DATE", ("maxDueDate", "uint256")),
    error_fragment(
        "TENOR_OUT_OF_RANGE",
        ("tenor", "uint256"),
        ("minTenor", "uint256"),
        ("maxTenor", "uint256"),
    ),
    error_fragment("APR_GREATER_THAN_MAX_APR", ("apr", "uint256"), ("maxAPR", "uint256")),
    error_fragment("APR_LOWER_THAN_MIN_APR", ("apr", "uint256"), ("minAPR", "uint256")),
    error_fragment(
        "CREDIT_LOWER_THAN_MINIMUM_CREDIT",
        ("credit", "uint256"),
        ("minimumCreditBorrowToken", "uint256"),
    ),
    error_fragment(
        "CR_BELOW_OPENING_LIMIT_BORROW_CR",
        ("account", "address"),
        ("cr", "uint256"),
        ("riskCollateralRatio", "uint256"),
    ),
    error_fragment("LOAN_NOT_ACTIVE", ("positionId", "uint256")),
    error_fragment(
        "LOAN_NOT_LIQUIDATABLE",
        ("debtPositionId", "uint256"),
        ("cr", "uint256"),
        ("loanStatus", "uint8"),
    ),
    error_fragment("INVALID_CREDIT_POSITION_ID", ("creditPositionId", "uint256")),
    error_fragment("INVALID_DEBT_POSITION_ID", ("debtPositionId", "uint256")),
    error_fragment(
        "NOT_ENOUGH_BORROW_ATOKEN_LIQUIDITY",
        ("liquidity", "uint256"),
        ("required", "uint256"),
    ),
]

SIZE_V1_8_ERRORS_ABI = [
    *SIZE_V1_7_ERRORS_ABI,
    error_fragment(
        "UNAUTHORIZED_ACTION",
        ("operator", "address"),
        ("onBehalfOf", "address"),
        ("action", "uint8"),
    ),
    error_fragment("INVALID_ACTION", ("action", "uint8")),
    error_fragment("INVALID_COLLECTION_ID", ("collectionId", "uint256")),
    error_fragment("INVALID_MARKET", ("market", "address")),
    error_fragment("INVALID_RATE_PROVIDER", ("rateProvider", "address")),
]

# v1.9 renames a few error arguments; the decoder keys on types, not names.
RHEO_V1_9_ERRORS_ABI = [
    error_fragment("NULL_ADDRESS"),
    error_fragment("NULL_AMOUNT"),
    error_fragment("NULL_ARRAY"),
    error_fragment("INVALID_TOKEN", ("token", "address")),
    error_fragment("INVALID_MSG_VALUE", ("msgValue", "uint256")),
    error_fragment("PAST_DEADLINE", ("deadline", "uint256")),
    error_fragment("APR_GREATER_THAN_MAX_APR", ("apr", "uint256"), ("maxAPR", "uint256")),
    error_fragment("APR_LOWER_THAN_MIN_APR", ("apr", "uint256"), ("minAPR", "uint256")),
    error_fragment(
        "UNAUTHORIZED_ACTION",
        ("operator", "address"),
        ("onBehalfOf", "address"),
        ("action", "uint8"),
    ),
    error_fragment("INVALID_MATURITY", ("maturity", "uint256")),
    error_fragment(
        "MATURITY_OUT_OF_RANGE",
        ("maturity", "uint256"),
        ("minMaturity", "uint256"),
        ("maxMaturity", "uint256"),
    ),
    error_fragment("INVALID_VAULT", ("vault", "address")),
    error_fragment("ARRAY_LENGTHS_MISMATCH"),
]

# CollectionsManager is a UUPS proxy behind the factory's access control, so its
# ABI carries the OpenZeppelin upgrade and role errors next to collection ones.
COLLECTIONS_MANAGER_ERRORS_ABI = [
    error_fragment("INVALID_COLLECTION_ID", ("collectionId", "uint256")),
    error_fragment("INVALID_MARKET", ("market", "address")),
    error_fragment("INVALID_RATE_PROVIDER", ("rateProvider", "address")),
    error_fragment("NULL_ADDRESS"),
    error_fragment("NULL_ARRAY"),
    error_fragment(
        "AccessControlUnauthorizedAccount",
        ("account", "address"),
        ("neededRole", "bytes32"),
    ),
    error_fragment("AccessControlBadConfirmation"),
    error_fragment("AddressEmptyCode", ("target", "address")),
    error_fragment("ERC1967InvalidImplementation", ("implementation", "address")),
    error_fragment("ERC1967NonPayable"),
    error_fragment("FailedInnerCall"),
    error_fragment("InvalidInitialization"),
    error_fragment("NotInitializing"),
    error_fragment("UUPSUnauthorizedCallContext"),
    error_fragment("UUPSUnsupportedProxiableUUID", ("slot", "bytes32")),
]
