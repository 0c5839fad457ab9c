import inspect

import pytest

from erc1155_agent_kit import Configuration
from erc1155_agent_kit.adk import Erc1155ADKToolkit
from erc1155_agent_kit.plugins import erc1155_plugin
from tests.utils.constants import ALICE, TOKEN_ADDRESS


@pytest.fixture
def balance_function(wallet_client):
    toolkit = Erc1155ADKToolkit(
        wallet_client,
        Configuration(tools=["erc1155_balance_of_tool"], plugins=[erc1155_plugin()]),
    )
    [function] = toolkit.get_tools()
    return function


def test_function_is_named_after_method(balance_function):
    assert balance_function.__name__ == "erc1155_balance_of_tool"
    assert inspect.iscoroutinefunction(balance_function)


def test_docstring_lists_schema_fields(balance_function):
    doc = balance_function.__doc__

    assert "Args:" in doc
    assert "token_address (str)" in doc
    assert "owner (str)" in doc
    assert "id (int)" in doc


def test_annotations_follow_schema(balance_function):
    annotations = balance_function.__annotations__

    assert annotations["token_address"] is str
    assert annotations["id"] is int
    assert "return" in annotations


@pytest.mark.asyncio
async def test_function_returns_response_dict(balance_function, wallet_client):
    wallet_client.read_values["balanceOf"] = 12

    result = await balance_function(token_address=TOKEN_ADDRESS, owner=ALICE, id=3)

    assert result["type"] == "query"
    assert result["extra"]["balance"] == 12
    assert wallet_client.reads[0].args == [ALICE, 3]
