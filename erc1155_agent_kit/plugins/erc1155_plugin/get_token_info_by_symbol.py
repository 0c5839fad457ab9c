"""Utilities for looking up registered ERC1155 tokens via the Agent Kit.

This module exposes:
- get_token_info_by_symbol_prompt: Generate a prompt/description for the token lookup tool.
- get_token_info_by_symbol: Resolve a token symbol to its metadata on the wallet's chain.
- GetTokenInfoBySymbolTool: Tool wrapper exposing the lookup to the runtime.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, cast

from erc1155_agent_kit.shared.configuration import Context
from erc1155_agent_kit.shared.errors import Erc1155Error
from erc1155_agent_kit.shared.models import QueryToolResponse, ToolResponse
from erc1155_agent_kit.shared.parameter_schemas import GetTokenInfoBySymbolParameters
from erc1155_agent_kit.shared.token import TokenInfo
from erc1155_agent_kit.shared.tool import Tool
from erc1155_agent_kit.shared.utils.parameter_normaliser import ParameterNormaliser
from erc1155_agent_kit.shared.utils.prompt_generator import PromptGenerator
from erc1155_agent_kit.shared.wallet.wallet_client import WalletClient

from .erc1155_service import Erc1155Service

logger = logging.getLogger(__name__)


def get_token_info_by_symbol_prompt(
    context: Optional[Context] = None, service: Optional[Erc1155Service] = None
) -> str:
    """Generate a human-readable description of the token lookup tool.

    The registered symbols are listed so the model knows what it can ask for.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()
    symbols = ", ".join(t.symbol for t in service.tokens) if service else ""

    return f"""
{context_snippet}

This tool returns the ERC1155 token info for a symbol, including the contract address on the
current chain, token id, decimals, name, metadata URI and total token supply.
Known symbols: {symbols or "none registered"}

Parameters:
- symbol (str, required): The token symbol, matched case-insensitively
{usage_instructions}
"""


def post_process(token_info: TokenInfo) -> str:
    return (
        f"Token {token_info.name} ({token_info.symbol}):\n"
        f"- Contract Address: {token_info.contract_address}\n"
        f"- Token ID: {token_info.id}\n"
        f"- Decimals: {token_info.decimals}\n"
        f"- URI: {token_info.uri or 'N/A'}\n"
        f"- Total Supply: {token_info.total_supply}"
    )


async def get_token_info_by_symbol(
    wallet_client: WalletClient,
    context: Context,
    params: Any,
    service: Erc1155Service,
) -> ToolResponse:
    try:
        parsed_params = cast(
            GetTokenInfoBySymbolParameters,
            ParameterNormaliser.parse_params_with_schema(
                params, GetTokenInfoBySymbolParameters
            ),
        )
        token_info = service.get_token_info_by_symbol(wallet_client, parsed_params.symbol)

        return QueryToolResponse(
            human_message=post_process(token_info),
            extra=token_info.to_dict(),
        )

    except Exception as e:
        message: str = (
            str(e) if isinstance(e, Erc1155Error) else f"Failed to get token info: {e}"
        )
        logger.error("[%s] %s", GET_TOKEN_INFO_BY_SYMBOL_TOOL, message)
        return QueryToolResponse(human_message=message, error=message)


GET_TOKEN_INFO_BY_SYMBOL_TOOL: str = "get_erc1155_token_info_by_symbol_tool"


class GetTokenInfoBySymbolTool(Tool):
    def __init__(self, context: Context, service: Erc1155Service):
        self.method: str = GET_TOKEN_INFO_BY_SYMBOL_TOOL
        self.name: str = "Get ERC1155 Token Info By Symbol"
        self.description: str = get_token_info_by_symbol_prompt(context, service)
        self.parameters: type[GetTokenInfoBySymbolParameters] = (
            GetTokenInfoBySymbolParameters
        )
        self.service = service

    async def execute(
        self, wallet_client: WalletClient, context: Context, params: Any
    ) -> ToolResponse:
        return await get_token_info_by_symbol(wallet_client, context, params, self.service)
