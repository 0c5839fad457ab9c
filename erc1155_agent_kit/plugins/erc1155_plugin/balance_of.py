"""Utilities for querying a single ERC1155 balance via the Agent Kit.

This module exposes:
- balance_of_prompt: Generate a prompt/description for the balance tool.
- balance_of: Read the balance of one token id for one owner.
- BalanceOfTool: Tool wrapper exposing the balance query to the runtime.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, cast

from erc1155_agent_kit.shared.configuration import Context
from erc1155_agent_kit.shared.errors import Erc1155Error
from erc1155_agent_kit.shared.models import QueryToolResponse, ToolResponse
from erc1155_agent_kit.shared.parameter_schemas import BalanceOfParameters
from erc1155_agent_kit.shared.tool import Tool
from erc1155_agent_kit.shared.utils.parameter_normaliser import ParameterNormaliser
from erc1155_agent_kit.shared.utils.prompt_generator import PromptGenerator
from erc1155_agent_kit.shared.wallet.wallet_client import WalletClient

from .erc1155_service import Erc1155Service

logger = logging.getLogger(__name__)


def balance_of_prompt(context: Optional[Context] = None) -> str:
    """Generate a human-readable description of the balance tool.

    Args:
        context: Optional contextual configuration that may influence the prompt.

    Returns:
        A string describing the tool, its parameters, and usage instructions.
    """
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    owner_desc: str = PromptGenerator.get_address_parameter_description(
        "owner", context, "The owner whose balance is queried"
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool returns the balance of a specific ERC1155 token id held by an owner.

Parameters:
- token_address (str, required): The ERC1155 contract address
- {owner_desc}
- id (int, required): The token id within the contract
{usage_instructions}
"""


def post_process(params: BalanceOfParameters, balance: int) -> str:
    return (
        f"Balance of token id {params.id} at {params.token_address} "
        f"for {params.owner}: {balance}"
    )


async def balance_of(
    wallet_client: WalletClient,
    context: Context,
    params: Any,
    service: Erc1155Service,
) -> ToolResponse:
    """Execute a balanceOf read.

    Args:
        wallet_client: Wallet client used to resolve the owner and read the contract.
        context: Runtime context.
        params: Raw or parsed BalanceOfParameters.
        service: Service performing the contract call.

    Returns:
        A QueryToolResponse with the balance under ``extra["balance"]``.
    """
    try:
        parsed_params = cast(
            BalanceOfParameters,
            ParameterNormaliser.parse_params_with_schema(params, BalanceOfParameters),
        )
        balance = await service.balance_of(
            wallet_client, parsed_params.token_address, parsed_params.owner, parsed_params.id
        )

        return QueryToolResponse(
            human_message=post_process(parsed_params, balance),
            extra={
                "token_address": parsed_params.token_address,
                "owner": parsed_params.owner,
                "id": parsed_params.id,
                "balance": balance,
            },
        )

    except Exception as e:
        message: str = (
            str(e) if isinstance(e, Erc1155Error) else f"Failed to fetch balance: {e}"
        )
        logger.error("[%s] %s", ERC1155_BALANCE_OF_TOOL, message)
        return QueryToolResponse(human_message=message, error=message)


ERC1155_BALANCE_OF_TOOL: str = "erc1155_balance_of_tool"


class BalanceOfTool(Tool):
    """Tool wrapper that exposes the balanceOf query to the Agent runtime."""

    def __init__(self, context: Context, service: Erc1155Service):
        self.method: str = ERC1155_BALANCE_OF_TOOL
        self.name: str = "ERC1155 Balance Of"
        self.description: str = balance_of_prompt(context)
        self.parameters: type[BalanceOfParameters] = BalanceOfParameters
        self.service = service

    async def execute(
        self, wallet_client: WalletClient, context: Context, params: Any
    ) -> ToolResponse:
        return await balance_of(wallet_client, context, params, self.service)
