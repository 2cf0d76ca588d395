"""Revert data decoding.

Standard ``Error(string)`` reverts yield their reason, ``Panic(uint256)``
yields the panic code, and custom errors from any supported version render
as ``Name(arg1,arg2)``. Unknown or malformed data raises
``ErrorDecodingError``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from eth_abi import decode as abi_decode
from eth_abi.exceptions import DecodingError
from eth_utils import function_signature_to_4byte_selector
from web3 import Web3

from rheo_sdk.core.constants.base import SUPPORTED_VERSIONS
from rheo_sdk.core.constants.erc20_abi import ERC20_ERRORS_ABI
from rheo_sdk.core.constants.errors_abi import COLLECTIONS_MANAGER_ERRORS_ABI
from rheo_sdk.core.constants.token_errors_abi import (
    ERC721_ERRORS_ABI,
    ERC1155_ERRORS_ABI,
)
from rheo_sdk.core.constants.versions import ERRORS_ABIS
from rheo_sdk.core.errors import ErrorDecodingError
from rheo_sdk.core.utils.abi_coder import SELECTOR_LENGTH, AbiCoder, to_bytes, to_hex

ERROR_STRING_SELECTOR = function_signature_to_4byte_selector("Error(string)")
PANIC_SELECTOR = function_signature_to_4byte_selector("Panic(uint256)")


def default_error_abis() -> list[dict[str, Any]]:
    abi: list[dict[str, Any]] = []
    for version in reversed(SUPPORTED_VERSIONS):
        abi.extend(ERRORS_ABIS[version])
    abi.extend(COLLECTIONS_MANAGER_ERRORS_ABI)
    abi.extend(ERC20_ERRORS_ABI)
    abi.extend(ERC721_ERRORS_ABI)
    abi.extend(ERC1155_ERRORS_ABI)
    return abi


def _stringify(value: Any, param: dict[str, Any]) -> str:
    t = str(param.get("type") or "").strip()
    if t.endswith("]"):
        element = {"type": t[: t.rindex("[")], "components": param.get("components")}
        return ",".join(_stringify(v, element) for v in value)
    if t == "tuple":
        components = param.get("components") or []
        return ",".join(
            _stringify(v, c) for c, v in zip(components, value, strict=True)
        )
    if t == "address":
        return Web3.to_checksum_address(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return to_hex(bytes(value))
    return str(value)


class ErrorDecoder:
    def __init__(self, abi: Iterable[dict[str, Any]] | None = None):
        self.coder = AbiCoder(
            abi if abi is not None else default_error_abis(), kind="error"
        )

    def decode(self, data: bytes | str) -> str:
        try:
            raw = to_bytes(data)
        except ValueError as exc:
            raise ErrorDecodingError(str(data)) from exc

        selector, body = raw[:SELECTOR_LENGTH], raw[SELECTOR_LENGTH:]
        try:
            # Non-UTF-8 reasons raise UnicodeDecodeError, a ValueError
            if selector == ERROR_STRING_SELECTOR:
                (reason,) = abi_decode(["string"], body)
                return str(reason)
            if selector == PANIC_SELECTOR:
                (code,) = abi_decode(["uint256"], body)
                return str(code)
            fragment, args = self.coder.parse_error(raw)
        except (DecodingError, ValueError) as exc:
            raise ErrorDecodingError(to_hex(raw)) from exc

        rendered = ",".join(
            _stringify(arg, param)
            for arg, param in zip(args, fragment.inputs, strict=True)
        )
        return f"{fragment.name}({rendered})"
