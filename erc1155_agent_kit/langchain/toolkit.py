from erc1155_agent_kit import Configuration, Tool
from erc1155_agent_kit.langchain.tool import Erc1155AgentKitTool
from erc1155_agent_kit.shared import ToolDiscovery, Erc1155AgentAPI
from erc1155_agent_kit.shared.configuration import Context
from erc1155_agent_kit.shared.wallet.wallet_client import WalletClient


class Erc1155LangchainToolkit:

    def __init__(self, wallet_client: WalletClient, configuration: Configuration):
        context: Context = configuration.context or Context()

        # Discover tools based on configuration
        tool_discovery: ToolDiscovery = ToolDiscovery.create_from_configuration(
            configuration
        )
        all_tools: list[Tool] = tool_discovery.get_all_tools(context, configuration)

        # Create API wrapper and LangChain-compatible tools
        self._erc1155_agentkit = Erc1155AgentAPI(wallet_client, context, all_tools)
        self.tools: list[Erc1155AgentKitTool] = [
            Erc1155AgentKitTool(
                erc1155_api=self._erc1155_agentkit,
                method=tool.method,
                description=tool.description,
                schema=tool.parameters,
                name=tool.method,
            )
            for tool in all_tools
        ]

    def get_tools(self) -> list[Erc1155AgentKitTool]:
        """Return all registered LangChain-compatible tools."""
        return self.tools

    def get_erc1155_agentkit_api(self) -> Erc1155AgentAPI:
        """Return the API interface."""
        return self._erc1155_agentkit
