from __future__ import annotations

import time

from eth_utils import function_signature_to_4byte_selector


def selector(signature: str) -> str:
    """4-byte selector of *signature* as 8 hex chars, without ``0x``."""
    normalized = "".join(str(signature).split())
    return function_signature_to_4byte_selector(normalized).hex()


def deadline(seconds_from_now: int = 3600, *, now: float | None = None) -> int:
    base = time.time() if now is None else now
    return int(base) + int(seconds_from_now)
