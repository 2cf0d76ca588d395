"""Bit-packing of delegated-call permissions.

Bit *i* of an actions bitmap grants ``Action(i)``. Indices are part of the
on-chain encoding and must never be reordered.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class Action(IntEnum):
    DEPOSIT = 0
    WITHDRAW = 1
    BUY_CREDIT_LIMIT = 2
    BUY_CREDIT_MARKET = 3
    SELL_CREDIT_LIMIT = 4
    SELL_CREDIT_MARKET = 5
    SELF_LIQUIDATE = 6
    COMPENSATE = 7
    SET_USER_CONFIGURATION = 8
    SET_COPY_LIMIT_ORDER_CONFIGS = 9
    SET_VAULT = 10


NUMBER_OF_ACTIONS = len(Action)

FUNCTION_NAME_TO_ACTION: dict[str, Action] = {
    "deposit": Action.DEPOSIT,
    "withdraw": Action.WITHDRAW,
    "buyCreditLimit": Action.BUY_CREDIT_LIMIT,
    "buyCreditMarket": Action.BUY_CREDIT_MARKET,
    "sellCreditLimit": Action.SELL_CREDIT_LIMIT,
    "sellCreditMarket": Action.SELL_CREDIT_MARKET,
    "selfLiquidate": Action.SELF_LIQUIDATE,
    "compensate": Action.COMPENSATE,
    "setUserConfiguration": Action.SET_USER_CONFIGURATION,
    "setCopyLimitOrderConfigs": Action.SET_COPY_LIMIT_ORDER_CONFIGS,
    "setVault": Action.SET_VAULT,
}


def encode(actions: Iterable[Action | int]) -> int:
    bitmap = 0
    for action in actions:
        bitmap |= 1 << int(Action(action))
    return bitmap


def decode(bitmap: int) -> list[Action]:
    return [action for action in Action if is_action_set(bitmap, action)]


def is_action_set(bitmap: int, action: Action | int) -> bool:
    return (int(bitmap) >> int(action)) & 1 == 1


def null_bitmap() -> int:
    return 0
