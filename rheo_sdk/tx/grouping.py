"""Single-version composer: consecutive same-market operations share a multicall.

Used by protocol versions without delegated execution (v1.7). Every group
becomes exactly one on-chain call sent by the user directly.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import assert_never

from loguru import logger

from rheo_sdk.actions.types import (
    ApprovalOperation,
    FactoryOperation,
    MarketOperation,
    Operation,
    TxArgs,
)
from rheo_sdk.core.errors import NoOperationsError
from rheo_sdk.tx.encoding import OperationEncoder, same_address


@dataclass
class MarketGroup:
    market: str
    operations: list[MarketOperation] = field(default_factory=list)


@dataclass(frozen=True)
class SingletonGroup:
    operation: FactoryOperation | ApprovalOperation


Group = MarketGroup | SingletonGroup


def group_operations(operations: Sequence[Operation]) -> list[Group]:
    groups: list[Group] = []
    for op in operations:
        match op:
            case MarketOperation():
                last = groups[-1] if groups else None
                if isinstance(last, MarketGroup) and same_address(
                    last.market, op.market
                ):
                    last.operations.append(op)
                else:
                    groups.append(MarketGroup(market=op.market, operations=[op]))
            case FactoryOperation() | ApprovalOperation():
                groups.append(SingletonGroup(operation=op))
            case _:
                assert_never(op)
    return groups


def total_value(operations: Sequence[MarketOperation]) -> int | None:
    total = sum(int(op.value or 0) for op in operations)
    return total or None


class GroupingComposer:
    def __init__(self, factory: str, encoder: OperationEncoder):
        self.factory = factory
        self.encoder = encoder

    def compose(
        self,
        initiator: str,
        operations: Sequence[Operation],
        recipient: str | None = None,
    ) -> list[TxArgs]:
        if not operations:
            raise NoOperationsError()

        groups = group_operations(operations)
        txs = [self._render(group) for group in groups]
        logger.debug(
            f"Composed {len(txs)} call(s) from {len(operations)} operation(s) "
            f"for {initiator} ({self.encoder.version})"
        )
        return txs

    def _render(self, group: Group) -> TxArgs:
        match group:
            case SingletonGroup(operation=ApprovalOperation() as op):
                return TxArgs(target=op.token, data=self.encoder.encode(op))
            case SingletonGroup(operation=FactoryOperation() as op):
                return TxArgs(target=self.factory, data=self.encoder.encode(op))
            case MarketGroup(market=market, operations=[op]):
                return TxArgs(
                    target=market, data=self.encoder.encode(op), value=op.value
                )
            case MarketGroup(market=market, operations=ops):
                calldatas = [self.encoder.encode(op) for op in ops]
                return TxArgs(
                    target=market,
                    data=self.encoder.encode_multicall(calldatas),
                    value=total_value(ops),
                )
            case _:
                raise TypeError(f"Unexpected group: {group!r}")
