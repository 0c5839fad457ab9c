"""Utilities for granting or revoking ERC1155 operator approval via the Agent Kit.

This module exposes:
- set_approval_for_all_prompt: Generate a prompt/description for the approval tool.
- set_approval_for_all: Submit a setApprovalForAll transaction.
- SetApprovalForAllTool: Tool wrapper exposing the approval to the runtime.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, cast

from erc1155_agent_kit.shared.configuration import Context
from erc1155_agent_kit.shared.errors import Erc1155Error
from erc1155_agent_kit.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ToolResponse,
    TRANSACTION_STATUS_FAILED,
    TRANSACTION_STATUS_SUBMITTED,
)
from erc1155_agent_kit.shared.parameter_schemas import SetApprovalForAllParameters
from erc1155_agent_kit.shared.tool import Tool
from erc1155_agent_kit.shared.utils.parameter_normaliser import ParameterNormaliser
from erc1155_agent_kit.shared.utils.prompt_generator import PromptGenerator
from erc1155_agent_kit.shared.wallet.wallet_client import WalletClient

from .erc1155_service import Erc1155Service

logger = logging.getLogger(__name__)


def set_approval_for_all_prompt(context: Optional[Context] = None) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool sets or unsets approval for an operator to manage all of the caller's tokens
in an ERC1155 contract. The caller is always the wallet signing the transaction.

Parameters:
- token_address (str, required): The ERC1155 contract address
- operator (str, required): The operator address or ENS name
- approved (bool, required): true to grant approval, false to revoke it
{usage_instructions}
"""


def post_process(params: SetApprovalForAllParameters, tx_hash: str) -> str:
    action = "granted to" if params.approved else "revoked from"
    return (
        f"Approval for all tokens at {params.token_address} {action} {params.operator}.\n"
        f"Transaction Hash: {tx_hash}"
    )


async def set_approval_for_all(
    wallet_client: WalletClient,
    context: Context,
    params: Any,
    service: Erc1155Service,
) -> ToolResponse:
    try:
        parsed_params = cast(
            SetApprovalForAllParameters,
            ParameterNormaliser.parse_params_with_schema(
                params, SetApprovalForAllParameters
            ),
        )
        tx_hash = await service.set_approval_for_all(
            wallet_client,
            parsed_params.token_address,
            parsed_params.operator,
            parsed_params.approved,
        )

        return ExecutedTransactionToolResponse(
            raw=RawTransactionResponse(
                status=TRANSACTION_STATUS_SUBMITTED, transaction_hash=tx_hash
            ),
            human_message=post_process(parsed_params, tx_hash),
        )

    except Exception as e:
        message: str = (
            str(e) if isinstance(e, Erc1155Error) else f"Failed to set approval: {e}"
        )
        logger.error("[%s] %s", ERC1155_SET_APPROVAL_FOR_ALL_TOOL, message)
        return ExecutedTransactionToolResponse(
            raw=RawTransactionResponse(status=TRANSACTION_STATUS_FAILED, error=message),
            human_message=message,
        )


ERC1155_SET_APPROVAL_FOR_ALL_TOOL: str = "erc1155_set_approval_for_all_tool"


class SetApprovalForAllTool(Tool):
    """Tool wrapper that exposes setApprovalForAll to the Agent runtime."""

    def __init__(self, context: Context, service: Erc1155Service):
        self.method: str = ERC1155_SET_APPROVAL_FOR_ALL_TOOL
        self.name: str = "ERC1155 Set Approval For All"
        self.description: str = set_approval_for_all_prompt(context)
        self.parameters: type[SetApprovalForAllParameters] = SetApprovalForAllParameters
        self.service = service

    async def execute(
        self, wallet_client: WalletClient, context: Context, params: Any
    ) -> ToolResponse:
        return await set_approval_for_all(wallet_client, context, params, self.service)
