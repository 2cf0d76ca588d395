from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import SimpleNamespace

from loguru import logger

from rheo_sdk.actions import authorization
from rheo_sdk.actions.erc20 import ERC20Actions
from rheo_sdk.actions.factory import FactoryActions
from rheo_sdk.actions.market import MarketActions
from rheo_sdk.actions.types import Operation, TxArgs
from rheo_sdk.core import config
from rheo_sdk.core import constants as _constants
from rheo_sdk.core.constants.base import DEFAULT_LABELS, DEFAULT_MAX_DECODE_DEPTH
from rheo_sdk.core.constants.versions import check_version
from rheo_sdk.core.utils.helpers import deadline, selector
from rheo_sdk.core.utils.risk_config import parse_risk_config
from rheo_sdk.decoder.calldata import CalldataDecoder
from rheo_sdk.decoder.error import ErrorDecoder
from rheo_sdk.tx.builder import TxBuilder


class _Decode:
    def __init__(self, calldata: CalldataDecoder, error: ErrorDecoder):
        self._calldata = calldata
        self._error = error

    def calldata(self, data: bytes | str) -> str:
        return self._calldata.decode(data)

    def error(self, data: bytes | str) -> str:
        return self._error.decode(data)


class _Tx:
    def __init__(self, builder: TxBuilder):
        self.builder = builder

    def build(
        self,
        on_behalf_of: str,
        operations: Iterable[Operation],
        recipient: str | None = None,
    ) -> list[TxArgs]:
        return self.builder.build(on_behalf_of, operations, recipient)


class RheoSDK:
    """Entry point bundling action builders, tx composition and decoding.

    ``labels`` extend the default label table (``type(uint256).max``,
    ``address(0)``...) used when rendering decoded calldata.
    """

    helpers = SimpleNamespace(
        selector=selector,
        deadline=deadline,
        authorization=authorization,
        parse_risk_config=parse_risk_config,
    )
    constants = _constants

    def __init__(
        self,
        factory: str,
        version: str,
        labels: Mapping[str, str] | None = None,
        *,
        max_decode_depth: int = DEFAULT_MAX_DECODE_DEPTH,
    ):
        self.version = check_version(version)
        self.factory_address = factory
        self.labels = {**DEFAULT_LABELS, **(labels or {})}

        self.market = MarketActions(self.version)
        self.factory = FactoryActions(self.version)
        self.erc20 = ERC20Actions()
        self.tx = _Tx(TxBuilder(factory, self.version))
        self.decode = _Decode(
            CalldataDecoder(self.labels, max_depth=max_decode_depth),
            ErrorDecoder(),
        )
        logger.debug(f"RheoSDK ready for {self.version} (factory {factory})")

    @classmethod
    def from_config(cls, labels: Mapping[str, str] | None = None) -> RheoSDK:
        factory = config.get_factory_address()
        if not factory:
            raise ValueError(
                "Factory address missing: set sdk.factory in config.json "
                "or RHEO_FACTORY_ADDRESS"
            )
        return cls(
            factory,
            config.get_protocol_version(),
            {**config.get_labels(), **(labels or {})},
            max_decode_depth=config.get_max_decode_depth(),
        )
