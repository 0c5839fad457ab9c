from typing import Optional

from erc1155_agent_kit.shared.configuration import Context


class PromptGenerator:
    """Shared building blocks for the tool descriptions shown to the model."""

    @staticmethod
    def get_context_snippet(context: Optional[Context] = None) -> str:
        lines = ["Context:"]
        if context and context.account_address:
            lines.append(
                f"- Connected wallet address: {context.account_address}. "
                "Use it when the user refers to 'my' tokens or 'me'."
            )
        else:
            lines.append(
                "- No wallet address is configured. Ask the user for addresses "
                "instead of guessing them."
            )
        if context and context.chain_id is not None:
            lines.append(f"- Chain ID: {context.chain_id}")
        return "\n".join(lines)

    @staticmethod
    def get_address_parameter_description(
        param_name: str, context: Optional[Context] = None, description: str = "Address"
    ) -> str:
        if context and context.account_address:
            return (
                f"{param_name} (str, required): {description}. Accepts a hex address or an "
                f"ENS name. If the user refers to themselves, use {context.account_address}"
            )
        return (
            f"{param_name} (str, required): {description}. Accepts a hex address or an ENS name"
        )

    @staticmethod
    def get_parameter_usage_instructions() -> str:
        return (
            "Important:\n"
            "- Only include optional parameters if explicitly provided by the user.\n"
            "- Token ids and amounts are integers in the token's base units.\n"
            "- Use get_erc1155_token_info_by_symbol_tool first when the user names a token "
            "by symbol instead of giving a contract address."
        )
