from __future__ import annotations

from rheo_sdk.actions.types import ApprovalOperation


class ERC20Actions:
    def approve(self, token: str, spender: str, amount: int) -> ApprovalOperation:
        return ApprovalOperation(token=token, params=[spender, amount])
