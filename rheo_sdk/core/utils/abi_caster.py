"""Coerce operation params into values ``eth_abi`` will encode.

Market params arrive as dicts keyed by struct field name
(``{"token": ..., "amount": ..., "to": ...}``); they are reordered by the
ABI components. Unknown keys are ignored, missing keys are an error.
Scalars accept the loose forms callers tend to pass: hex or decimal strings
for integers, hex strings for bytes, any casing for addresses.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from hexbytes import HexBytes
from web3 import Web3

_TRUTHY = frozenset({"true", "1", "yes"})


def _as_int(arg: Any) -> int:
    if isinstance(arg, str):
        return int(arg, 0) if arg.lower().startswith("0x") else int(arg)
    return int(arg)


def _as_bool(arg: Any) -> bool:
    if isinstance(arg, str):
        return arg.strip().lower() in _TRUTHY
    return bool(arg)


def _as_bytes(arg: Any) -> bytes:
    if isinstance(arg, (bytes, bytearray)):
        return bytes(arg)
    text = str(arg)
    return bytes(HexBytes(text)) if text.startswith("0x") else text.encode("utf-8")


def cast_single(arg: Any, abi_type: str) -> Any:
    t = abi_type.strip()
    if t == "bool":
        return _as_bool(arg)
    if t.startswith(("uint", "int")):
        return _as_int(arg)
    if t == "address":
        return Web3.to_checksum_address(str(arg))
    if t == "string":
        return str(arg)
    if t.startswith("bytes"):
        return _as_bytes(arg)
    return arg


def cast_args(args: Sequence[Any], abi_inputs: Sequence[dict[str, Any]]) -> list[Any]:
    if len(args) != len(abi_inputs):
        raise ValueError(
            f"Argument count mismatch: got {len(args)}, expected {len(abi_inputs)}"
        )
    return [_cast(arg, inp) for arg, inp in zip(args, abi_inputs, strict=True)]


def _struct_fields(arg: Any, inp: dict[str, Any]) -> list[Any]:
    components = inp["components"]
    if isinstance(arg, Mapping):
        missing = [c["name"] for c in components if c["name"] not in arg]
        if missing:
            raise ValueError(
                f"Missing struct field(s) for {inp.get('name') or 'tuple'}: "
                f"{', '.join(missing)}"
            )
        return [arg[c["name"]] for c in components]
    if isinstance(arg, (list, tuple)):
        return list(arg)
    raise TypeError(
        f"Expected mapping or sequence for struct, got {type(arg).__name__}"
    )


def _cast(arg: Any, inp: dict[str, Any]) -> Any:
    t = str(inp.get("type") or "").strip()
    components = inp.get("components")

    if t.endswith("]"):
        if not isinstance(arg, (list, tuple)):
            raise TypeError(f"Expected list for {t}, got {type(arg).__name__}")
        element = {"type": t[: t.rindex("[")], "components": components}
        return [_cast(item, element) for item in arg]

    if t == "tuple" and components:
        return tuple(cast_args(_struct_fields(arg, inp), components))

    return cast_single(arg, t)
