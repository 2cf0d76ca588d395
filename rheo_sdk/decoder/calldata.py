"""Human-readable decoding of protocol calldata.

One selector registry is built from every supported version's market and
factory ABIs plus ERC20. Nested ``bytes`` arguments (``multicall`` payloads,
``callMarket`` data) are decoded recursively up to ``max_depth``; anything
that does not resolve stays as raw hex. ``decode`` never raises.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger
from web3 import Web3

from rheo_sdk.actions import authorization
from rheo_sdk.core.constants.base import (
    DEFAULT_MAX_DECODE_DEPTH,
    SUPPORTED_VERSIONS,
    UNKNOWN_CALLDATA,
)
from rheo_sdk.core.constants.erc20_abi import ERC20_ABI
from rheo_sdk.core.constants.versions import FACTORY_ABIS, MARKET_ABIS
from rheo_sdk.core.utils.abi_coder import AbiCoder, to_bytes, to_hex
from rheo_sdk.decoder.tree import (
    DecodedActions,
    DecodedCall,
    DecodedList,
    DecodedTuple,
    RawBytes,
    Scalar,
    Value,
    render,
)

_ACTIONS_BITMAP_FUNCTIONS = frozenset({"setAuthorization"})


def default_function_abis() -> list[dict[str, Any]]:
    """All known function fragments, newest version first so its field names win."""
    abi: list[dict[str, Any]] = []
    for version in reversed(SUPPORTED_VERSIONS):
        abi.extend(FACTORY_ABIS[version])
        abi.extend(MARKET_ABIS[version])
    abi.extend(ERC20_ABI)
    return abi


class CalldataDecoder:
    def __init__(
        self,
        labels: Mapping[str, str] | None = None,
        *,
        abi: Iterable[dict[str, Any]] | None = None,
        max_depth: int = DEFAULT_MAX_DECODE_DEPTH,
    ):
        self.coder = AbiCoder(abi if abi is not None else default_function_abis())
        self.labels = {str(k).lower(): str(v) for k, v in (labels or {}).items()}
        self.max_depth = max_depth

    def decode(self, data: bytes | str) -> str:
        tree = self.decode_tree(data)
        if tree is None:
            return UNKNOWN_CALLDATA
        return render(tree)

    def decode_tree(self, data: bytes | str) -> DecodedCall | None:
        try:
            return self._decode_call(to_bytes(data), depth=0)
        except Exception as exc:
            logger.debug(f"Could not decode calldata: {exc}")
            return None

    def _decode_call(self, raw: bytes, depth: int) -> DecodedCall:
        fragment, args = self.coder.parse(raw)
        return DecodedCall(
            name=fragment.name,
            args=tuple(
                self._value(arg, param, depth, fragment.name)
                for arg, param in zip(args, fragment.inputs, strict=True)
            ),
        )

    def _nested(self, raw: bytes, depth: int) -> DecodedCall | RawBytes:
        if depth >= self.max_depth:
            logger.debug(f"Decode depth {self.max_depth} reached; leaving bytes raw")
            return RawBytes(to_hex(raw))
        try:
            return self._decode_call(raw, depth + 1)
        except Exception as exc:
            logger.debug(f"Leaving nested bytes raw: {exc}")
            return RawBytes(to_hex(raw))

    def _value(
        self, value: Any, param: dict[str, Any], depth: int, function: str | None = None
    ) -> Value:
        t = str(param.get("type") or "").strip()
        components = param.get("components") or []

        if function in _ACTIONS_BITMAP_FUNCTIONS and t == "uint256":
            return DecodedActions(tuple(authorization.decode(int(value))))

        if t.endswith("]"):
            element = {"type": t[: t.rindex("[")], "components": components}
            return DecodedList(tuple(self._value(v, element, depth) for v in value))

        if t == "tuple":
            return DecodedTuple(
                tuple(
                    (str(c.get("name") or i), self._value(v, c, depth))
                    for i, (c, v) in enumerate(zip(components, value, strict=True))
                )
            )

        if t == "bytes":
            return self._nested(bytes(value), depth)

        return self._scalar(value, t)

    def _scalar(self, value: Any, t: str) -> Scalar:
        if t == "address":
            text = Web3.to_checksum_address(value)
        elif isinstance(value, bool):
            text = "true" if value else "false"
        elif isinstance(value, (bytes, bytearray)):
            text = to_hex(bytes(value))
        else:
            text = str(value)
        return Scalar(text=text, label=self.labels.get(text.lower()))
