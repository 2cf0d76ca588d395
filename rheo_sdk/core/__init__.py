from rheo_sdk.core.errors import (
    AbiResolutionError,
    ErrorDecodingError,
    NoOperationsError,
    RheoSDKError,
    UnsupportedVersionError,
)

__all__ = [
    "AbiResolutionError",
    "ErrorDecodingError",
    "NoOperationsError",
    "RheoSDKError",
    "UnsupportedVersionError",
]
