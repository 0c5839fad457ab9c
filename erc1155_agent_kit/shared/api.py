from __future__ import annotations

from typing import Any, List, Optional

from .configuration import Context
from .models import ToolResponse
from .tool import Tool
from .wallet.wallet_client import WalletClient


class Erc1155AgentAPI:
    """
    A wrapper for executing tools against a wallet client within a given context.
    """

    def __init__(
        self,
        wallet_client: WalletClient,
        context: Optional[Context] = None,
        tools: Optional[List[Tool]] = None,
    ):
        if wallet_client is None:
            raise ValueError("A wallet client is required")
        self.wallet_client = wallet_client
        self.context = context or Context()
        self.tools = tools or []

    def get_tool(self, method: str) -> Optional[Tool]:
        return next((t for t in self.tools if t.method == method), None)

    async def run(self, method: str, arg: Any) -> ToolResponse:
        """
        Executes the specified tool by method name with the given argument.
        """
        tool = self.get_tool(method)
        if tool is None:
            raise ValueError(f"Invalid method {method}")

        return await tool.execute(self.wallet_client, self.context, arg)
