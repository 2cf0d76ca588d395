from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Protocol

from rheo_sdk.actions.types import Operation, TxArgs
from rheo_sdk.core.constants.base import VERSION_V1_7, VERSION_V1_8, VERSION_V1_9
from rheo_sdk.core.constants.versions import check_version
from rheo_sdk.tx.delegating import DelegatingComposer
from rheo_sdk.tx.encoding import OperationEncoder
from rheo_sdk.tx.grouping import GroupingComposer


class Composer(Protocol):
    def compose(
        self,
        initiator: str,
        operations: Sequence[Operation],
        recipient: str | None = None,
    ) -> list[TxArgs]: ...


COMPOSERS: dict[str, Callable[[str, OperationEncoder], Composer]] = {
    VERSION_V1_7: GroupingComposer,
    VERSION_V1_8: DelegatingComposer,
    VERSION_V1_9: DelegatingComposer,
}


class TxBuilder:
    """Turns an ordered list of operations into the calls to send."""

    def __init__(self, factory: str, version: str):
        self.factory = factory
        self.version = check_version(version)
        self.encoder = OperationEncoder(self.version)
        self.composer: Composer = COMPOSERS[self.version](self.factory, self.encoder)

    def build(
        self,
        on_behalf_of: str,
        operations: Iterable[Operation],
        recipient: str | None = None,
    ) -> list[TxArgs]:
        return self.composer.compose(on_behalf_of, list(operations), recipient)
