__all__ = ["Erc1155AgentKitTool", "Erc1155LangchainToolkit"]

from .tool import Erc1155AgentKitTool
from .toolkit import Erc1155LangchainToolkit
