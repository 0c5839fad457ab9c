import asyncio
import json
from typing import Any, Type

from langchain_core.tools import BaseTool
from pydantic import BaseModel, Field

from erc1155_agent_kit import Erc1155AgentAPI
from erc1155_agent_kit.shared.models import ToolResponse


class Erc1155AgentKitTool(BaseTool):
    """Custom LangChain tool that wraps ERC1155 Agent Kit API methods."""

    erc1155_api: Erc1155AgentAPI = Field(exclude=True)
    method: str

    def __init__(
        self,
        erc1155_api: Erc1155AgentAPI,
        method: str,
        schema: Type[BaseModel],
        description: str,
        name: str,
    ):
        super().__init__(
            name=name,
            description=description,
            args_schema=schema,
            erc1155_api=erc1155_api,
            method=method,
        )

    def _run(self, **kwargs: Any) -> str:
        """Run the API method from synchronous LangChain code.

        Only usable when no event loop is running in this thread; async hosts
        and notebooks must call ``ainvoke`` instead.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self._arun(**kwargs))
        raise RuntimeError(
            f"Tool {self.name} cannot run synchronously inside a running event loop; "
            "use ainvoke instead"
        )

    async def _arun(self, **kwargs: Any) -> str:
        """Run the API method asynchronously."""
        result: ToolResponse = await self.erc1155_api.run(self.method, kwargs)
        return json.dumps(result.to_dict(), indent=2)
