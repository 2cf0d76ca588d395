__version__ = "0.1.0"

from rheo_sdk.actions.authorization import Action
from rheo_sdk.actions.types import (
    ApprovalOperation,
    FactoryOperation,
    MarketOperation,
    Operation,
    TxArgs,
)
from rheo_sdk.core.errors import (
    AbiResolutionError,
    ErrorDecodingError,
    NoOperationsError,
    RheoSDKError,
    UnsupportedVersionError,
)
from rheo_sdk.decoder import CalldataDecoder, ErrorDecoder
from rheo_sdk.sdk import RheoSDK
from rheo_sdk.tx import TxBuilder

__all__ = [
    "__version__",
    "AbiResolutionError",
    "Action",
    "ApprovalOperation",
    "CalldataDecoder",
    "ErrorDecoder",
    "ErrorDecodingError",
    "FactoryOperation",
    "MarketOperation",
    "NoOperationsError",
    "Operation",
    "RheoSDK",
    "RheoSDKError",
    "TxArgs",
    "TxBuilder",
    "UnsupportedVersionError",
]
