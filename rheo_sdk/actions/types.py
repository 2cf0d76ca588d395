"""Operation and transaction types shared by the builders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class OperationBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class MarketOperation(OperationBase):
    kind: Literal["market"] = "market"
    market: str
    function_name: str
    # Struct fields keyed by their ABI names, e.g. {"token", "amount", "to"}
    params: dict[str, Any]
    value: int | None = None


class FactoryOperation(OperationBase):
    kind: Literal["factory"] = "factory"
    function_name: str
    params: list[Any] = Field(default_factory=list)


class ApprovalOperation(OperationBase):
    kind: Literal["approval"] = "approval"
    token: str
    function_name: Literal["approve"] = "approve"
    params: list[Any]


Operation = MarketOperation | FactoryOperation | ApprovalOperation


class OperationEnvelope(BaseModel):
    """Parses a serialized operation into the right variant by ``kind``."""

    op: Annotated[Operation, Field(discriminator="kind")]


@dataclass(frozen=True)
class TxArgs:
    target: str
    data: str
    value: int | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"to": self.target, "data": self.data, "value": int(self.value or 0)}
