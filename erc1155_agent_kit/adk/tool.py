"""ADK tool factory for generating Python functions from ERC1155 Agent Kit tools.

This module provides utilities to transform kit tools into async Python functions
that Google ADK can automatically wrap as FunctionTools.
"""

from __future__ import annotations

from typing import Any, Callable, Coroutine, Dict, get_type_hints

from pydantic import BaseModel

from erc1155_agent_kit import Erc1155AgentAPI
from erc1155_agent_kit.shared import Tool
from erc1155_agent_kit.shared.models import ToolResponse


def create_adk_tool_function(
    erc1155_api: Erc1155AgentAPI,
    tool: Tool,
) -> Callable[..., Coroutine[Any, Any, Dict[str, Any]]]:
    """Create an async function from a kit tool for use with Google ADK.

    The generated function:
    - Uses the tool's method name as the function name
    - Uses the tool's description as the docstring
    - Extracts parameter types from the Pydantic schema
    - Returns results as a dictionary

    Args:
        erc1155_api: A configured Erc1155AgentAPI instance.
        tool: The tool to wrap.

    Returns:
        An async function compatible with Google ADK's FunctionTool.
    """
    schema: type[BaseModel] = tool.parameters
    param_docs = _build_param_docstring(schema)

    docstring = f"{tool.description}\n\nArgs:\n{param_docs}"

    async def tool_function(**kwargs: Any) -> Dict[str, Any]:
        """Dynamically generated ADK tool function."""
        result: ToolResponse = await erc1155_api.run(tool.method, kwargs)
        return result.to_dict()

    # ADK introspects name, docstring and annotations
    tool_function.__name__ = tool.method
    tool_function.__qualname__ = tool.method
    tool_function.__doc__ = docstring

    tool_function.__annotations__ = _extract_annotations(schema)
    tool_function.__annotations__["return"] = Dict[str, Any]

    return tool_function


def _build_param_docstring(schema: type[BaseModel]) -> str:
    """Build parameter documentation from a Pydantic schema."""
    lines = []
    for field_name, field_info in schema.model_fields.items():
        field_type = _get_field_type_name(field_info.annotation)
        description = field_info.description or "No description provided."
        lines.append(f"    {field_name} ({field_type}): {description}")
    return "\n".join(lines) if lines else "    None"


def _get_field_type_name(annotation: Any) -> str:
    if annotation is None:
        return "Any"
    if getattr(annotation, "__args__", None):
        return str(annotation).replace("typing.", "")
    if hasattr(annotation, "__name__"):
        return annotation.__name__
    return str(annotation)


def _extract_annotations(schema: type[BaseModel]) -> Dict[str, Any]:
    """Extract type annotations from a Pydantic schema.

    Args:
        schema: Pydantic model class defining the parameters.

    Returns:
        Dictionary mapping parameter names to their types.
    """
    hints = get_type_hints(schema)
    return {
        field_name: hints.get(field_name, Any)
        for field_name in schema.model_fields.keys()
    }
