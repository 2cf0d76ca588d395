"""Selector-indexed ABI registry with encode/resolve/decode helpers.

``AbiCoder`` is built once from ABI fragments and then used read-only to
encode function calls, resolve raw bytes to a fragment by 4-byte selector,
and decode the argument tail. Fragments are deduplicated by canonical
signature so that the same function shipped by several protocol versions
(possibly with different struct field names) is registered once.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_utils import function_signature_to_4byte_selector
from hexbytes import HexBytes
from loguru import logger

from rheo_sdk.core.errors import AbiResolutionError
from rheo_sdk.core.utils.abi_caster import cast_args

SELECTOR_LENGTH = 4


def canonical_type(param: dict[str, Any]) -> str:
    """Render an ABI param as its canonical type, expanding tuples.

    ``{"type": "tuple[]", "components": [{"type": "uint256"}, ...]}`` becomes
    ``"(uint256,...)[]"``. Field names never appear in the result.
    """
    t = str(param.get("type") or "").strip()
    if t.startswith("tuple"):
        inner = ",".join(canonical_type(c) for c in param.get("components") or [])
        return f"({inner}){t[len('tuple') :]}"
    return t


def canonical_signature(fragment: dict[str, Any]) -> str:
    name = str(fragment.get("name") or "").strip()
    inputs = fragment.get("inputs") or []
    return f"{name}({','.join(canonical_type(i) for i in inputs)})"


def dedupe_fragments(
    abi: Iterable[dict[str, Any]], *, kind: str
) -> list[dict[str, Any]]:
    """Keep the first fragment of *kind* for every canonical signature."""
    seen: set[str] = set()
    out: list[dict[str, Any]] = []
    for item in abi:
        if not isinstance(item, dict) or item.get("type") != kind:
            continue
        sig = canonical_signature(item)
        if sig in seen:
            continue
        seen.add(sig)
        out.append(item)
    return out


def to_bytes(data: bytes | str) -> bytes:
    try:
        return bytes(HexBytes(data))
    except (TypeError, ValueError) as exc:
        raise AbiResolutionError(f"Invalid hex data: {data!r}") from exc


def to_hex(data: bytes) -> str:
    return "0x" + data.hex()


@dataclass(frozen=True)
class AbiFragment:
    kind: str
    name: str
    signature: str
    selector: bytes
    inputs: tuple[dict[str, Any], ...]

    @property
    def input_types(self) -> list[str]:
        return [canonical_type(i) for i in self.inputs]

    @classmethod
    def from_abi(cls, item: dict[str, Any]) -> AbiFragment:
        signature = canonical_signature(item)
        return cls(
            kind=str(item.get("type")),
            name=str(item.get("name") or "").strip(),
            signature=signature,
            selector=function_signature_to_4byte_selector(signature),
            inputs=tuple(item.get("inputs") or ()),
        )


class AbiCoder:
    def __init__(self, abi: Iterable[dict[str, Any]], *, kind: str = "function"):
        items = list(abi)
        deduped = dedupe_fragments(items, kind=kind)
        self.kind = kind
        self.fragments: tuple[AbiFragment, ...] = tuple(
            AbiFragment.from_abi(item) for item in deduped
        )
        self._by_selector: dict[bytes, AbiFragment] = {}
        self._by_name: dict[str, list[AbiFragment]] = {}
        for fragment in self.fragments:
            self._by_selector.setdefault(fragment.selector, fragment)
            self._by_name.setdefault(fragment.name, []).append(fragment)

        total = sum(1 for i in items if isinstance(i, dict) and i.get("type") == kind)
        logger.debug(
            f"AbiCoder built {len(self.fragments)} {kind} fragments "
            f"({total - len(self.fragments)} duplicates dropped)"
        )

    def get_function(self, name: str) -> AbiFragment:
        matches = self._by_name.get(name)
        if not matches:
            raise AbiResolutionError(
                f"{self.kind.capitalize()} '{name}' not found in ABI"
            )
        if len(matches) > 1:
            candidates = ", ".join(sorted(m.signature for m in matches))
            raise AbiResolutionError(
                f"{self.kind.capitalize()} '{name}' is overloaded: {candidates}"
            )
        return matches[0]

    def encode_function_data(self, name: str, args: list[Any]) -> str:
        fragment = self.get_function(name)
        try:
            values = cast_args(list(args), list(fragment.inputs))
            body = abi_encode(fragment.input_types, values)
        except (ValueError, TypeError, OverflowError) as exc:
            raise ValueError(f"Failed to encode {fragment.signature}: {exc}") from exc
        return to_hex(fragment.selector + body)

    def resolve(self, data: bytes | str) -> AbiFragment:
        raw = to_bytes(data)
        if len(raw) < SELECTOR_LENGTH:
            raise AbiResolutionError(f"Data too short for a selector: {to_hex(raw)}")
        fragment = self._by_selector.get(raw[:SELECTOR_LENGTH])
        if fragment is None:
            raise AbiResolutionError(
                f"No {self.kind} matches selector {to_hex(raw[:SELECTOR_LENGTH])}"
            )
        return fragment

    def decode_arguments(self, fragment: AbiFragment, data: bytes | str) -> tuple:
        raw = to_bytes(data)
        try:
            return tuple(abi_decode(fragment.input_types, raw[SELECTOR_LENGTH:]))
        except Exception as exc:
            raise AbiResolutionError(
                f"Malformed arguments for {fragment.signature}: {exc}"
            ) from exc

    def parse(self, data: bytes | str) -> tuple[AbiFragment, tuple]:
        fragment = self.resolve(data)
        return fragment, self.decode_arguments(fragment, data)

    def parse_error(self, data: bytes | str) -> tuple[AbiFragment, tuple]:
        if self.kind != "error":
            raise AbiResolutionError(f"Registry holds {self.kind} fragments, not errors")
        return self.parse(data)
