"""Normalize ``riskConfig()`` results from Size/Rheo markets.

The tuple order is ``(crOpening, crLiquidation, minimumCreditBorrowToken,
minTenor, maxTenor[, maturities])``; the trailing ``maturities`` array only
exists on fixed-maturity (Rheo) markets.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

_FIELDS = (
    "crOpening",
    "crLiquidation",
    "minimumCreditBorrowToken",
    "minTenor",
    "maxTenor",
)


@dataclass(frozen=True)
class ParsedRiskConfig:
    cr_opening: str
    cr_liquidation: str
    minimum_credit_borrow_token: str
    min_tenor: str
    max_tenor: str
    maturities: list[str] | None = None


def _to_str(value: Any) -> str:
    if value is None:
        return "0"
    return str(value)


def _to_str_list(value: Any) -> list[str]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return []
    return [_to_str(v) for v in value]


def parse_risk_config(result: Any) -> ParsedRiskConfig:
    if isinstance(result, Mapping) and any(k in result for k in _FIELDS[:2]):
        values = [_to_str(result.get(k)) for k in _FIELDS]
        maturities = result.get("maturities")
        return ParsedRiskConfig(
            *values,
            maturities=_to_str_list(maturities) if maturities else None,
        )

    arr = list(result) if isinstance(result, (list, tuple)) else []
    values = [_to_str(arr[i] if i < len(arr) else None) for i in range(len(_FIELDS))]
    maturities = None
    if len(arr) >= 6 and arr[5] is not None:
        maturities = _to_str_list(arr[5])
    return ParsedRiskConfig(*values, maturities=maturities)
