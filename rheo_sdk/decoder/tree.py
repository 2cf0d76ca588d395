"""Decoded calldata tree and its text rendering.

Nodes are immutable and built fresh for every decode. Rendering indents
two spaces per nesting level; scalar-only lists stay on one line.
"""

from __future__ import annotations

from dataclasses import dataclass

from rheo_sdk.actions.authorization import Action

INDENT = "  "


@dataclass(frozen=True)
class Scalar:
    text: str
    label: str | None = None


@dataclass(frozen=True)
class RawBytes:
    hex: str


@dataclass(frozen=True)
class DecodedActions:
    actions: tuple[Action, ...]


@dataclass(frozen=True)
class DecodedList:
    items: tuple[Value, ...]


@dataclass(frozen=True)
class DecodedTuple:
    fields: tuple[tuple[str, Value], ...]


@dataclass(frozen=True)
class DecodedCall:
    name: str
    args: tuple[Value, ...]


Value = Scalar | RawBytes | DecodedActions | DecodedList | DecodedTuple | DecodedCall

_INLINE = (Scalar, RawBytes, DecodedActions)


def _indent(level: int) -> str:
    return INDENT * level


def _block(open_: str, close: str, lines: list[str], level: int) -> str:
    body = f",\n{_indent(level + 1)}".join(lines)
    return f"{open_}\n{_indent(level + 1)}{body}\n{_indent(level)}{close}"


def render(value: Value, level: int = 0) -> str:
    match value:
        case Scalar(text=text, label=label):
            return label or text
        case RawBytes(hex=hex_):
            return hex_
        case DecodedActions(actions=actions):
            return "[" + ",".join(a.name for a in actions) + "]"
        case DecodedList(items=items):
            if all(isinstance(i, _INLINE) for i in items):
                return "[" + ", ".join(render(i, level) for i in items) + "]"
            return _block("[", "]", [render(i, level + 1) for i in items], level)
        case DecodedTuple(fields=fields):
            if not fields:
                return "{}"
            lines = [f"{name}: {render(v, level + 1)}" for name, v in fields]
            return _block("{", "}", lines, level)
        case DecodedCall(name=name, args=args):
            if not args:
                return f"{name}()"
            return _block(f"{name}(", ")", [render(a, level + 1) for a in args], level)
    raise TypeError(f"Cannot render {value!r}")
