MAX_UINT256 = 2**256 - 1
MAX_INT256 = 2**255 - 1
MIN_INT256 = -(2**255)
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Protocol version tags accepted by the SDK facade and TxBuilder.
VERSION_V1_7 = "v1.7"
VERSION_V1_8 = "v1.8"
VERSION_V1_9 = "v1.9"
SUPPORTED_VERSIONS = (VERSION_V1_7, VERSION_V1_8, VERSION_V1_9)
DEFAULT_VERSION = VERSION_V1_9

UNKNOWN_CALLDATA = "Unknown function call or invalid calldata"

# Nested bytes arguments are re-decoded at most this many levels deep.
DEFAULT_MAX_DECODE_DEPTH = 8

DEFAULT_LABELS: dict[str, str] = {
    str(MAX_UINT256): "type(uint256).max",
    str(MAX_INT256): "type(int256).max",
    str(MIN_INT256): "type(int256).min",
    ZERO_ADDRESS: "address(0)",
}

# CopyLimitOrderConfig presets (minTenor, maxTenor, minAPR, maxAPR, offsetAPR)
FULL_COPY = {
    "minTenor": 0,
    "maxTenor": MAX_UINT256,
    "minAPR": 0,
    "maxAPR": MAX_UINT256,
    "offsetAPR": 0,
}
NULL_COPY = {
    "minTenor": 0,
    "maxTenor": 0,
    "minAPR": 0,
    "maxAPR": 0,
    "offsetAPR": 0,
}
