from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from rheo_sdk.actions.types import FactoryOperation
from rheo_sdk.core.constants.versions import FACTORY_ABIS, check_version


class FactoryActions:
    def __init__(self, version: str):
        self.version = check_version(version)
        self._functions = frozenset(
            item["name"]
            for item in FACTORY_ABIS[self.version]
            if item.get("type") == "function"
        )

    def _operation(self, function_name: str, params: list[Any]) -> FactoryOperation:
        if function_name not in self._functions:
            raise ValueError(
                f"Factory function '{function_name}' is not available in {self.version}"
            )
        return FactoryOperation(function_name=function_name, params=params)

    def subscribe_to_collections(
        self, collection_ids: Iterable[int]
    ) -> FactoryOperation:
        return self._operation("subscribeToCollections", list(collection_ids))

    def unsubscribe_from_collections(
        self, collection_ids: Iterable[int]
    ) -> FactoryOperation:
        return self._operation("unsubscribeFromCollections", list(collection_ids))

    def set_authorization(self, operator: str, actions_bitmap: int) -> FactoryOperation:
        return self._operation("setAuthorization", [operator, actions_bitmap])

    def revoke_all_authorizations(self) -> FactoryOperation:
        return self._operation("revokeAllAuthorizations", [])

    def set_user_collection_copy_limit_order_configs(
        self,
        collection_id: int,
        copy_loan_offer_config: dict[str, Any],
        copy_borrow_offer_config: dict[str, Any],
    ) -> FactoryOperation:
        return self._operation(
            "setUserCollectionCopyLimitOrderConfigs",
            [collection_id, copy_loan_offer_config, copy_borrow_offer_config],
        )
