"""Utilities for querying several ERC1155 balances in one call via the Agent Kit."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, cast

from erc1155_agent_kit.shared.configuration import Context
from erc1155_agent_kit.shared.errors import Erc1155Error
from erc1155_agent_kit.shared.models import QueryToolResponse, ToolResponse
from erc1155_agent_kit.shared.parameter_schemas import BalanceOfBatchParameters
from erc1155_agent_kit.shared.tool import Tool
from erc1155_agent_kit.shared.utils.parameter_normaliser import ParameterNormaliser
from erc1155_agent_kit.shared.utils.prompt_generator import PromptGenerator
from erc1155_agent_kit.shared.wallet.wallet_client import WalletClient

from .erc1155_service import Erc1155Service

logger = logging.getLogger(__name__)


def balance_of_batch_prompt(context: Optional[Context] = None) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool returns the balances of multiple ERC1155 token ids for multiple owners in a single call.
owners and ids are parallel lists: the n-th balance is the balance of ids[n] held by owners[n].

Parameters:
- token_address (str, required): The ERC1155 contract address
- owners (list of str, required): Owner addresses or ENS names
- ids (list of int, required): Token ids, same length as owners
{usage_instructions}
"""


def post_process(params: BalanceOfBatchParameters, balances: List[int]) -> str:
    if not balances:
        return f"No balances requested for {params.token_address}"

    lines = "\n".join(
        f"- Owner {owner}, token id {token_id}: {balance}"
        for owner, token_id, balance in zip(params.owners, params.ids, balances)
    )
    return f"Balances at {params.token_address}:\n{lines}"


async def balance_of_batch(
    wallet_client: WalletClient,
    context: Context,
    params: Any,
    service: Erc1155Service,
) -> ToolResponse:
    try:
        parsed_params = cast(
            BalanceOfBatchParameters,
            ParameterNormaliser.parse_params_with_schema(
                params, BalanceOfBatchParameters
            ),
        )
        balances = await service.balance_of_batch(
            wallet_client,
            parsed_params.token_address,
            parsed_params.owners,
            parsed_params.ids,
        )

        return QueryToolResponse(
            human_message=post_process(parsed_params, balances),
            extra={
                "token_address": parsed_params.token_address,
                "owners": parsed_params.owners,
                "ids": parsed_params.ids,
                "balances": balances,
            },
        )

    except Exception as e:
        message: str = (
            str(e)
            if isinstance(e, Erc1155Error)
            else f"Failed to fetch batch balances: {e}"
        )
        logger.error("[%s] %s", ERC1155_BALANCE_OF_BATCH_TOOL, message)
        return QueryToolResponse(human_message=message, error=message)


ERC1155_BALANCE_OF_BATCH_TOOL: str = "erc1155_balance_of_batch_tool"


class BalanceOfBatchTool(Tool):
    def __init__(self, context: Context, service: Erc1155Service):
        self.method: str = ERC1155_BALANCE_OF_BATCH_TOOL
        self.name: str = "ERC1155 Balance Of Batch"
        self.description: str = balance_of_batch_prompt(context)
        self.parameters: type[BalanceOfBatchParameters] = BalanceOfBatchParameters
        self.service = service

    async def execute(
        self, wallet_client: WalletClient, context: Context, params: Any
    ) -> ToolResponse:
        return await balance_of_batch(wallet_client, context, params, self.service)
