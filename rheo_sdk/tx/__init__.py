from rheo_sdk.tx.builder import COMPOSERS, Composer, TxBuilder
from rheo_sdk.tx.delegating import (
    DelegatingComposer,
    Subcall,
    actions_bitmap_for,
    plan_subcalls,
    requires_authorization,
)
from rheo_sdk.tx.grouping import GroupingComposer, group_operations

__all__ = [
    "COMPOSERS",
    "Composer",
    "DelegatingComposer",
    "GroupingComposer",
    "Subcall",
    "TxBuilder",
    "actions_bitmap_for",
    "group_operations",
    "plan_subcalls",
    "requires_authorization",
]
