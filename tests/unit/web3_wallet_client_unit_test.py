"""Unit tests for Web3WalletClient with a mocked AsyncWeb3."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from web3 import Web3

from erc1155_agent_kit.shared.constants.contracts import ERC1155_ABI
from erc1155_agent_kit.shared.wallet.wallet_client import ReadRequest, TransactionRequest
from erc1155_agent_kit.shared.wallet.web3_wallet_client import Web3WalletClient
from tests.utils.constants import ALICE, BOB, TOKEN_ADDRESS

MODULE = "erc1155_agent_kit.shared.wallet.web3_wallet_client"


@pytest.fixture
def w3():
    mock_w3 = MagicMock()
    mock_w3.ens.address = AsyncMock(return_value=ALICE)
    mock_w3.eth.get_transaction_count = AsyncMock(return_value=3)
    mock_w3.eth.send_raw_transaction = AsyncMock(return_value=bytes.fromhex("ab" * 32))
    return mock_w3


@pytest.fixture
def account():
    mock_account = MagicMock()
    mock_account.address = ALICE
    mock_account.sign_transaction.return_value = MagicMock(raw_transaction=b"signed")
    return mock_account


def test_get_chain_returns_configured_id(w3):
    assert Web3WalletClient(w3, 137).get_chain().id == 137


@pytest.mark.asyncio
async def test_resolve_address_checksums_hex(w3):
    client = Web3WalletClient(w3, 1)

    resolved = await client.resolve_address(ALICE.lower())

    assert resolved == Web3.to_checksum_address(ALICE)
    w3.ens.address.assert_not_called()


@pytest.mark.asyncio
async def test_resolve_address_uses_ens_for_names(w3):
    client = Web3WalletClient(w3, 1)

    assert await client.resolve_address("alice.eth") == ALICE
    w3.ens.address.assert_awaited_once_with("alice.eth")


@pytest.mark.asyncio
async def test_resolve_address_unknown_ens_name_raises(w3):
    w3.ens.address = AsyncMock(return_value=None)
    client = Web3WalletClient(w3, 1)

    with pytest.raises(ValueError, match="could not be resolved"):
        await client.resolve_address("nobody.eth")


@pytest.mark.asyncio
async def test_resolve_address_rejects_garbage(w3):
    with pytest.raises(ValueError, match="Invalid address: not-an-address"):
        await Web3WalletClient(w3, 1).resolve_address("not-an-address")


@pytest.mark.asyncio
async def test_read_calls_contract_function(w3):
    client = Web3WalletClient(w3, 1)
    fn = MagicMock()
    fn.call = AsyncMock(return_value=5)

    with patch.object(client, "_contract_function", return_value=fn) as contract_function:
        result = await client.read(
            ReadRequest(
                address=TOKEN_ADDRESS,
                abi=ERC1155_ABI,
                function_name="balanceOf",
                args=[ALICE, 1],
            )
        )

    assert result.value == 5
    contract_function.assert_called_once_with(
        TOKEN_ADDRESS, ERC1155_ABI, "balanceOf", [ALICE, 1]
    )


@pytest.mark.asyncio
async def test_send_transaction_without_account_raises(w3):
    client = Web3WalletClient(w3, 1)

    with pytest.raises(ValueError, match="private key is required"):
        await client.send_transaction(
            TransactionRequest(
                to=TOKEN_ADDRESS,
                abi=ERC1155_ABI,
                function_name="setApprovalForAll",
                args=[BOB, True],
            )
        )


@pytest.mark.asyncio
async def test_send_transaction_signs_and_broadcasts(w3, account):
    client = Web3WalletClient(w3, 1, account)
    fn = MagicMock()
    fn.build_transaction = AsyncMock(return_value={"data": "0x1234"})

    with patch.object(client, "_contract_function", return_value=fn):
        result = await client.send_transaction(
            TransactionRequest(
                to=TOKEN_ADDRESS,
                abi=ERC1155_ABI,
                function_name="setApprovalForAll",
                args=[BOB, True],
            )
        )

    assert result.hash == "0x" + "ab" * 32
    fn.build_transaction.assert_awaited_once_with(
        {"from": ALICE, "nonce": 3, "chainId": 1}
    )
    account.sign_transaction.assert_called_once_with({"data": "0x1234"})
    w3.eth.send_raw_transaction.assert_awaited_once_with(b"signed")
    w3.eth.get_transaction_count.assert_awaited_once_with(ALICE, "pending")


@pytest.mark.asyncio
async def test_create_fetches_chain_id():
    async def chain_id():
        return 137

    with patch(f"{MODULE}.AsyncHTTPProvider") as provider, patch(
        f"{MODULE}.AsyncWeb3"
    ) as async_web3:
        async_web3.return_value.eth.chain_id = chain_id()
        client = await Web3WalletClient.create("http://localhost:8545")

    provider.assert_called_once_with("http://localhost:8545")
    assert client.get_chain().id == 137
    assert client.account is None


@pytest.mark.asyncio
async def test_from_env_requires_rpc_url(monkeypatch):
    monkeypatch.delenv("ERC1155_RPC_URL", raising=False)

    with patch(f"{MODULE}.load_dotenv"):
        with pytest.raises(ValueError, match="ERC1155_RPC_URL must be set"):
            await Web3WalletClient.from_env()
