"""Delegation-aware composer for factory-routed protocol versions (v1.8+).

Operations are planned into subcalls first: each carries its direct
calldata and, when the function supports it, an ``<fn>OnBehalfOf`` variant
plus the ``Action`` the factory must be authorized for. The composer then
batches everything into a single ``factory.multicall``::

    multicall([
        setAuthorization(factory, bitmap),      # only if any action is needed
        callMarket(market, <calldata or multicall of calldatas>),
        <factory calldata>,
        setAuthorization(factory, 0),           # revoke, paired with the grant
    ])

ERC20 approvals cannot be routed through the factory and are emitted first
as standalone calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import assert_never

from loguru import logger

from rheo_sdk.actions import authorization
from rheo_sdk.actions.authorization import Action
from rheo_sdk.actions.on_behalf_of import on_behalf_of_operation
from rheo_sdk.actions.types import (
    ApprovalOperation,
    FactoryOperation,
    MarketOperation,
    Operation,
    TxArgs,
)
from rheo_sdk.core.errors import NoOperationsError
from rheo_sdk.tx.encoding import OperationEncoder, same_address


@dataclass(frozen=True)
class Subcall:
    target: str
    calldata: str
    value: int | None = None
    is_approval: bool = False
    on_behalf_of_calldata: str | None = None
    action: Action | None = None

    @property
    def routed_calldata(self) -> str:
        return self.on_behalf_of_calldata or self.calldata

    def as_tx(self) -> TxArgs:
        return TxArgs(target=self.target, data=self.calldata, value=self.value)


@dataclass
class _TargetGroup:
    target: str
    subcalls: list[Subcall] = field(default_factory=list)


def plan_subcalls(
    operations: Sequence[Operation],
    encoder: OperationEncoder,
    factory: str,
    on_behalf_of: str,
    recipient: str | None = None,
) -> list[Subcall]:
    subcalls: list[Subcall] = []
    for op in operations:
        match op:
            case MarketOperation():
                delegated = on_behalf_of_operation(op, on_behalf_of, recipient)
                subcalls.append(
                    Subcall(
                        target=op.market,
                        calldata=encoder.encode(op),
                        value=op.value,
                        on_behalf_of_calldata=(
                            encoder.encode_on_behalf_of(delegated)
                            if delegated
                            else None
                        ),
                        action=delegated.action if delegated else None,
                    )
                )
            case ApprovalOperation():
                subcalls.append(
                    Subcall(target=op.token, calldata=encoder.encode(op), is_approval=True)
                )
            case FactoryOperation():
                subcalls.append(Subcall(target=factory, calldata=encoder.encode(op)))
            case _:
                assert_never(op)
    return subcalls


def requires_authorization(subcalls: Sequence[Subcall]) -> bool:
    return any(s.action is not None for s in subcalls)


def actions_bitmap_for(subcalls: Sequence[Subcall]) -> int:
    return authorization.encode({s.action for s in subcalls if s.action is not None})


class DelegatingComposer:
    def __init__(self, factory: str, encoder: OperationEncoder):
        self.factory = factory
        self.encoder = encoder

    def compose(
        self,
        initiator: str,
        operations: Sequence[Operation],
        recipient: str | None = None,
    ) -> list[TxArgs]:
        subcalls = plan_subcalls(
            operations, self.encoder, self.factory, initiator, recipient
        )
        if not subcalls:
            raise NoOperationsError()
        if len(subcalls) == 1:
            return [subcalls[0].as_tx()]

        approvals = [s.as_tx() for s in subcalls if s.is_approval]
        routed = [s for s in subcalls if not s.is_approval]
        if not routed:
            return approvals
        if len(routed) == 1 and routed[0].action is None:
            return [*approvals, routed[0].as_tx()]

        payloads = self._authorization_bracket(routed, self._group_payloads(routed))
        dropped = sum(int(s.value or 0) for s in routed)
        if dropped:
            logger.debug(
                f"Value of {dropped} wei is not forwarded through factory multicall"
            )
        logger.debug(
            f"Composed factory multicall with {len(payloads)} payload(s) and "
            f"{len(approvals)} approval(s) from {len(operations)} operation(s)"
        )
        return [
            *approvals,
            TxArgs(target=self.factory, data=self.encoder.encode_multicall(payloads)),
        ]

    def _group(self, subcalls: Sequence[Subcall]) -> list[_TargetGroup]:
        groups: list[_TargetGroup] = []
        for subcall in subcalls:
            last = groups[-1] if groups else None
            if (
                last is not None
                and not self._is_factory(subcall.target)
                and same_address(last.target, subcall.target)
            ):
                last.subcalls.append(subcall)
            else:
                groups.append(_TargetGroup(target=subcall.target, subcalls=[subcall]))
        return groups

    def _group_payloads(self, subcalls: Sequence[Subcall]) -> list[str]:
        payloads: list[str] = []
        for group in self._group(subcalls):
            if self._is_factory(group.target):
                payloads.append(group.subcalls[0].calldata)
            elif len(group.subcalls) == 1:
                payloads.append(
                    self.encoder.encode_call_market(
                        group.target, group.subcalls[0].routed_calldata
                    )
                )
            else:
                multicall = self.encoder.encode_multicall(
                    [s.routed_calldata for s in group.subcalls]
                )
                payloads.append(self.encoder.encode_call_market(group.target, multicall))
        return payloads

    def _authorization_bracket(
        self, subcalls: Sequence[Subcall], payloads: list[str]
    ) -> list[str]:
        if not requires_authorization(subcalls):
            return payloads
        bitmap = actions_bitmap_for(subcalls)
        logger.debug(
            f"Granting factory actions {[a.name for a in authorization.decode(bitmap)]}"
        )
        grant = self.encoder.encode_set_authorization(self.factory, bitmap)
        revoke = self.encoder.encode_set_authorization(
            self.factory, authorization.null_bitmap()
        )
        return [grant, *payloads, revoke]

    def _is_factory(self, target: str) -> bool:
        return same_address(target, self.factory)
