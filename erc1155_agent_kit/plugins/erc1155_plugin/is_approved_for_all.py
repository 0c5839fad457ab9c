"""Utilities for checking ERC1155 operator approvals via the Agent Kit.

This module exposes:
- is_approved_for_all_prompt: Generate a prompt/description for the approval check tool.
- is_approved_for_all: Read whether an operator may manage all of an owner's tokens.
- IsApprovedForAllTool: Tool wrapper exposing the check to the runtime.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, cast

from erc1155_agent_kit.shared.configuration import Context
from erc1155_agent_kit.shared.errors import Erc1155Error
from erc1155_agent_kit.shared.models import QueryToolResponse, ToolResponse
from erc1155_agent_kit.shared.parameter_schemas import IsApprovedForAllParameters
from erc1155_agent_kit.shared.tool import Tool
from erc1155_agent_kit.shared.utils.parameter_normaliser import ParameterNormaliser
from erc1155_agent_kit.shared.utils.prompt_generator import PromptGenerator
from erc1155_agent_kit.shared.wallet.wallet_client import WalletClient

from .erc1155_service import Erc1155Service

logger = logging.getLogger(__name__)


def is_approved_for_all_prompt(context: Optional[Context] = None) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    owner_desc: str = PromptGenerator.get_address_parameter_description(
        "owner", context, "The token owner"
    )
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool checks whether an operator is approved to manage all of the owner's tokens
in an ERC1155 contract.

Parameters:
- token_address (str, required): The ERC1155 contract address
- {owner_desc}
- operator (str, required): The operator address or ENS name
{usage_instructions}
"""


def post_process(params: IsApprovedForAllParameters, approved: bool) -> str:
    verdict = "is" if approved else "is not"
    return (
        f"Operator {params.operator} {verdict} approved to manage all tokens of "
        f"{params.owner} at {params.token_address}"
    )


async def is_approved_for_all(
    wallet_client: WalletClient,
    context: Context,
    params: Any,
    service: Erc1155Service,
) -> ToolResponse:
    try:
        parsed_params = cast(
            IsApprovedForAllParameters,
            ParameterNormaliser.parse_params_with_schema(
                params, IsApprovedForAllParameters
            ),
        )
        approved = await service.is_approved_for_all(
            wallet_client,
            parsed_params.token_address,
            parsed_params.owner,
            parsed_params.operator,
        )

        return QueryToolResponse(
            human_message=post_process(parsed_params, approved),
            extra={
                "token_address": parsed_params.token_address,
                "owner": parsed_params.owner,
                "operator": parsed_params.operator,
                "approved": approved,
            },
        )

    except Exception as e:
        message: str = (
            str(e)
            if isinstance(e, Erc1155Error)
            else f"Failed to fetch approval status: {e}"
        )
        logger.error("[%s] %s", ERC1155_IS_APPROVED_FOR_ALL_TOOL, message)
        return QueryToolResponse(human_message=message, error=message)


ERC1155_IS_APPROVED_FOR_ALL_TOOL: str = "erc1155_is_approved_for_all_tool"


class IsApprovedForAllTool(Tool):
    def __init__(self, context: Context, service: Erc1155Service):
        self.method: str = ERC1155_IS_APPROVED_FOR_ALL_TOOL
        self.name: str = "ERC1155 Is Approved For All"
        self.description: str = is_approved_for_all_prompt(context)
        self.parameters: type[IsApprovedForAllParameters] = IsApprovedForAllParameters
        self.service = service

    async def execute(
        self, wallet_client: WalletClient, context: Context, params: Any
    ) -> ToolResponse:
        return await is_approved_for_all(wallet_client, context, params, self.service)
