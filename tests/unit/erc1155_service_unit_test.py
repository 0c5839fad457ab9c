"""Unit tests for Erc1155Service."""

import asyncio

import pytest

from erc1155_agent_kit.plugins.erc1155_plugin import Erc1155Service
from erc1155_agent_kit.shared.constants.contracts import ERC1155_ABI
from erc1155_agent_kit.shared.errors import (
    ApprovalError,
    NotFoundError,
    QueryError,
    TransferError,
    UnsupportedChainError,
)
from erc1155_agent_kit.shared.token import Token, TokenChainInfo, TokenInfo
from tests.utils import FakeWalletClient
from tests.utils.constants import (
    ALICE,
    BOB,
    GOLD_ADDRESS,
    SILVER_POLYGON_ADDRESS,
    TOKEN_ADDRESS,
)


@pytest.fixture
def service(gold_token, silver_token):
    return Erc1155Service([gold_token, silver_token])


def test_lookup_returns_token_fields_and_chain_address(service, wallet_client):
    """GOLD on chain 1 resolves to its public fields plus the chain's contract."""
    info = service.get_token_info_by_symbol(wallet_client, "gold")

    assert info == TokenInfo(
        symbol="GOLD",
        contract_address=GOLD_ADDRESS,
        id=1,
        decimals=0,
        name="Gold Coin",
        uri="ipfs://gold/1.json",
        total_supply=1_000_000,
    )


@pytest.mark.parametrize("symbol", ["GOLD", "gold", "Silver", "silver", "SILVER"])
def test_lookup_is_case_insensitive(service, wallet_client, symbol):
    exact = service.get_token_info_by_symbol(wallet_client, symbol.upper())
    assert service.get_token_info_by_symbol(wallet_client, symbol) == exact


def test_lookup_unknown_symbol_raises_not_found(service, wallet_client):
    with pytest.raises(NotFoundError, match="Token with symbol BRONZE not found"):
        service.get_token_info_by_symbol(wallet_client, "BRONZE")


def test_lookup_on_empty_registry_raises_not_found(wallet_client):
    with pytest.raises(NotFoundError):
        Erc1155Service().get_token_info_by_symbol(wallet_client, "GOLD")


def test_lookup_without_address_for_chain_raises_unsupported_chain(service):
    polygon_wallet = FakeWalletClient(chain_id=137)

    with pytest.raises(UnsupportedChainError, match="not found on chain 137"):
        service.get_token_info_by_symbol(polygon_wallet, "GOLD")


def test_lookup_uses_the_wallet_chain(service):
    polygon_wallet = FakeWalletClient(chain_id=137)

    info = service.get_token_info_by_symbol(polygon_wallet, "silver")

    assert info.contract_address == SILVER_POLYGON_ADDRESS


def test_registry_is_a_snapshot_of_the_input(gold_token, silver_token, wallet_client):
    tokens = [gold_token]
    service = Erc1155Service(tokens)
    tokens.append(silver_token)

    assert service.tokens == (gold_token,)
    with pytest.raises(NotFoundError):
        service.get_token_info_by_symbol(wallet_client, "SILVER")


def test_lookup_ignores_later_edits_to_the_source_chain_map(wallet_client):
    chains = {1: TokenChainInfo(contract_address=GOLD_ADDRESS)}
    service = Erc1155Service([Token(symbol="GOLD", name="Gold Coin", id=1, chains=chains)])
    polygon_wallet = FakeWalletClient(chain_id=137)

    chains[137] = TokenChainInfo(contract_address=SILVER_POLYGON_ADDRESS)

    with pytest.raises(UnsupportedChainError):
        service.get_token_info_by_symbol(polygon_wallet, "GOLD")
    assert service.get_token_info_by_symbol(wallet_client, "GOLD").contract_address == GOLD_ADDRESS


@pytest.mark.asyncio
async def test_balance_of_resolves_alias_and_returns_int(service, wallet_client):
    wallet_client.read_values["balanceOf"] = 5

    balance = await service.balance_of(wallet_client, TOKEN_ADDRESS, "alice.eth", 1)

    assert balance == 5
    assert isinstance(balance, int)
    request = wallet_client.reads[0]
    assert request.address == TOKEN_ADDRESS
    assert request.abi is ERC1155_ABI
    assert request.function_name == "balanceOf"
    assert request.args == [ALICE, 1]


@pytest.mark.asyncio
async def test_balance_of_converts_string_values(service, wallet_client):
    wallet_client.read_values["balanceOf"] = "42"

    assert await service.balance_of(wallet_client, TOKEN_ADDRESS, ALICE, 7) == 42


@pytest.mark.asyncio
async def test_balance_of_wraps_resolution_failure(service, wallet_client):
    with pytest.raises(QueryError, match="Failed to fetch balance: Could not resolve nobody.eth"):
        await service.balance_of(wallet_client, TOKEN_ADDRESS, "nobody.eth", 1)

    assert wallet_client.reads == []


@pytest.mark.asyncio
async def test_balance_of_wraps_read_failure(service, wallet_client):
    cause = RuntimeError("execution reverted")
    wallet_client.read_error = cause

    with pytest.raises(QueryError, match="execution reverted") as exc_info:
        await service.balance_of(wallet_client, TOKEN_ADDRESS, ALICE, 1)

    assert exc_info.value.__cause__ is cause


@pytest.mark.asyncio
async def test_balance_of_batch_preserves_order_and_length(service, wallet_client):
    wallet_client.read_values["balanceOfBatch"] = [3, 0, "9"]

    balances = await service.balance_of_batch(
        wallet_client, TOKEN_ADDRESS, ["alice.eth", "bob.eth", ALICE], [1, 2, 3]
    )

    assert balances == [3, 0, 9]
    assert wallet_client.reads[0].function_name == "balanceOfBatch"
    assert wallet_client.reads[0].args == [[ALICE, BOB, ALICE], [1, 2, 3]]


@pytest.mark.asyncio
async def test_balance_of_batch_keeps_input_order_when_resolution_completes_out_of_order(
    service,
):
    delays = {"slow.eth": 0.02, "fast.eth": 0.0}

    class SlowResolvingWallet(FakeWalletClient):
        async def resolve_address(self, identifier):
            await asyncio.sleep(delays[identifier])
            return f"0x{identifier.split('.')[0]}"

    wallet = SlowResolvingWallet(read_values={"balanceOfBatch": lambda r: [1, 2]})

    await service.balance_of_batch(wallet, TOKEN_ADDRESS, ["slow.eth", "fast.eth"], [1, 1])

    assert wallet.reads[0].args[0] == ["0xslow", "0xfast"]


@pytest.mark.asyncio
async def test_balance_of_batch_wraps_failures(service, wallet_client):
    with pytest.raises(QueryError, match="Failed to fetch batch balances"):
        await service.balance_of_batch(
            wallet_client, TOKEN_ADDRESS, ["alice.eth", "nobody.eth"], [1, 2]
        )


@pytest.mark.asyncio
async def test_balance_of_batch_passes_mismatched_lengths_to_the_contract(
    service, wallet_client
):
    """Length mismatches are left for the contract to reject."""
    wallet_client.read_error = RuntimeError("ERC1155: accounts and ids length mismatch")

    with pytest.raises(QueryError, match="length mismatch"):
        await service.balance_of_batch(wallet_client, TOKEN_ADDRESS, [ALICE], [1, 2])

    assert wallet_client.reads[0].args == [[ALICE], [1, 2]]


@pytest.mark.asyncio
async def test_safe_transfer_from_sends_transaction(service, wallet_client):
    tx_hash = await service.safe_transfer_from(
        wallet_client, TOKEN_ADDRESS, "alice.eth", "bob.eth", 1, 10
    )

    assert tx_hash == wallet_client.tx_hash
    request = wallet_client.transactions[0]
    assert request.to == TOKEN_ADDRESS
    assert request.abi is ERC1155_ABI
    assert request.function_name == "safeTransferFrom"
    assert request.args == [ALICE, BOB, 1, 10, "0x"]


@pytest.mark.asyncio
async def test_safe_transfer_from_forwards_data(service, wallet_client):
    await service.safe_transfer_from(
        wallet_client, TOKEN_ADDRESS, ALICE, BOB, 1, 10, data="0xdeadbeef"
    )

    assert wallet_client.transactions[0].args[-1] == "0xdeadbeef"


@pytest.mark.asyncio
async def test_safe_transfer_from_surfaces_transfer_error(service, wallet_client):
    """A failing send is reported as TransferError, not the raw exception type."""
    wallet_client.send_error = ConnectionError("insufficient funds for gas")

    with pytest.raises(TransferError) as exc_info:
        await service.safe_transfer_from(wallet_client, TOKEN_ADDRESS, ALICE, BOB, 1, 10)

    assert "insufficient funds for gas" in str(exc_info.value)
    assert not isinstance(exc_info.value, ConnectionError)


@pytest.mark.asyncio
async def test_safe_batch_transfer_from_sends_parallel_arrays(service, wallet_client):
    tx_hash = await service.safe_batch_transfer_from(
        wallet_client, TOKEN_ADDRESS, ALICE, "bob.eth", [1, 2], [5, 6]
    )

    assert tx_hash == wallet_client.tx_hash
    request = wallet_client.transactions[0]
    assert request.function_name == "safeBatchTransferFrom"
    assert request.args == [ALICE, BOB, [1, 2], [5, 6], "0x"]


@pytest.mark.asyncio
async def test_safe_batch_transfer_from_wraps_failures(service, wallet_client):
    wallet_client.send_error = RuntimeError("nonce too low")

    with pytest.raises(TransferError, match="Failed to batch transfer: nonce too low"):
        await service.safe_batch_transfer_from(
            wallet_client, TOKEN_ADDRESS, ALICE, BOB, [1], [1]
        )


@pytest.mark.asyncio
@pytest.mark.parametrize("approved", [True, False])
async def test_set_approval_for_all(service, wallet_client, approved):
    tx_hash = await service.set_approval_for_all(
        wallet_client, TOKEN_ADDRESS, "bob.eth", approved
    )

    assert tx_hash == wallet_client.tx_hash
    request = wallet_client.transactions[0]
    assert request.function_name == "setApprovalForAll"
    assert request.args == [BOB, approved]


@pytest.mark.asyncio
async def test_set_approval_for_all_wraps_failures(service, wallet_client):
    with pytest.raises(ApprovalError, match="Failed to set approval"):
        await service.set_approval_for_all(wallet_client, TOKEN_ADDRESS, "nobody.eth", True)

    assert wallet_client.transactions == []


@pytest.mark.asyncio
async def test_is_approved_for_all_returns_value_unmodified(service, wallet_client):
    wallet_client.read_values["isApprovedForAll"] = True

    approved = await service.is_approved_for_all(
        wallet_client, TOKEN_ADDRESS, "alice.eth", "bob.eth"
    )

    assert approved is True
    assert wallet_client.reads[0].function_name == "isApprovedForAll"
    assert wallet_client.reads[0].args == [ALICE, BOB]


@pytest.mark.asyncio
async def test_is_approved_for_all_wraps_failures(service, wallet_client):
    wallet_client.read_error = RuntimeError("rpc down")

    with pytest.raises(QueryError, match="rpc down"):
        await service.is_approved_for_all(wallet_client, TOKEN_ADDRESS, ALICE, BOB)
