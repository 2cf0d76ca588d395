from rheo_sdk.core.constants.base import (
    DEFAULT_LABELS,
    DEFAULT_VERSION,
    FULL_COPY,
    MAX_INT256,
    MAX_UINT256,
    MIN_INT256,
    NULL_COPY,
    SUPPORTED_VERSIONS,
    UNKNOWN_CALLDATA,
    ZERO_ADDRESS,
)

__all__ = [
    "DEFAULT_LABELS",
    "DEFAULT_VERSION",
    "FULL_COPY",
    "MAX_INT256",
    "MAX_UINT256",
    "MIN_INT256",
    "NULL_COPY",
    "SUPPORTED_VERSIONS",
    "UNKNOWN_CALLDATA",
    "ZERO_ADDRESS",
]
