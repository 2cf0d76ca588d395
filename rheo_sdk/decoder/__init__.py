from rheo_sdk.decoder.calldata import CalldataDecoder, default_function_abis
from rheo_sdk.decoder.error import ErrorDecoder, default_error_abis
from rheo_sdk.decoder.tree import (
    DecodedActions,
    DecodedCall,
    DecodedList,
    DecodedTuple,
    RawBytes,
    Scalar,
    render,
)

__all__ = [
    "CalldataDecoder",
    "DecodedActions",
    "DecodedCall",
    "DecodedList",
    "DecodedTuple",
    "ErrorDecoder",
    "RawBytes",
    "Scalar",
    "default_error_abis",
    "default_function_abis",
    "render",
]
