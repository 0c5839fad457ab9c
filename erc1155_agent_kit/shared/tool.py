from abc import ABC, abstractmethod
from typing import Any, Type

from pydantic import BaseModel

from .configuration import Context
from .wallet.wallet_client import WalletClient


class Tool(ABC):
    """
    Abstract base class representing a Tool definition.
    """

    method: str
    name: str
    description: str
    parameters: Type[BaseModel]

    @abstractmethod
    async def execute(
        self, wallet_client: WalletClient, context: Context, params: Any
    ) -> Any:
        """
        Execute the tool's main logic.
        Must be implemented by all subclasses.
        """
        pass
