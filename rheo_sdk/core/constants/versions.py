from __future__ import annotations

from typing import Any

from rheo_sdk.core.constants.base import (
    SUPPORTED_VERSIONS,
    VERSION_V1_7,
    VERSION_V1_8,
    VERSION_V1_9,
)
from rheo_sdk.core.constants.errors_abi import (
    RHEO_V1_9_ERRORS_ABI,
    SIZE_V1_7_ERRORS_ABI,
    SIZE_V1_8_ERRORS_ABI,
)
from rheo_sdk.core.constants.factory_abi import (
    SIZE_FACTORY_V1_7_ABI,
    SIZE_FACTORY_V1_8_ABI,
    SIZE_FACTORY_V1_9_ABI,
)
from rheo_sdk.core.constants.rheo_abi import RHEO_V1_9_ABI
from rheo_sdk.core.constants.size_abi import SIZE_V1_7_ABI, SIZE_V1_8_ABI
from rheo_sdk.core.errors import UnsupportedVersionError

MARKET_ABIS: dict[str, list[dict[str, Any]]] = {
    VERSION_V1_7: SIZE_V1_7_ABI,
    VERSION_V1_8: SIZE_V1_8_ABI,
    VERSION_V1_9: RHEO_V1_9_ABI,
}

FACTORY_ABIS: dict[str, list[dict[str, Any]]] = {
    VERSION_V1_7: SIZE_FACTORY_V1_7_ABI,
    VERSION_V1_8: SIZE_FACTORY_V1_8_ABI,
    VERSION_V1_9: SIZE_FACTORY_V1_9_ABI,
}

ERRORS_ABIS: dict[str, list[dict[str, Any]]] = {
    VERSION_V1_7: SIZE_V1_7_ERRORS_ABI,
    VERSION_V1_8: SIZE_V1_8_ERRORS_ABI,
    VERSION_V1_9: RHEO_V1_9_ERRORS_ABI,
}


def check_version(version: str) -> str:
    v = str(version).strip().lower()
    if v not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(str(version), SUPPORTED_VERSIONS)
    return v
