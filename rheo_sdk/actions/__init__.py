from rheo_sdk.actions.erc20 import ERC20Actions
from rheo_sdk.actions.factory import FactoryActions
from rheo_sdk.actions.market import MarketActions

__all__ = ["ERC20Actions", "FactoryActions", "MarketActions"]
