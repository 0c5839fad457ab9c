from pathlib import Path

from dotenv import load_dotenv
import pytest

from erc1155_agent_kit.shared.token import Token, TokenChainInfo
from tests.utils import FakeWalletClient
from tests.utils.constants import (
    ALICE,
    BOB,
    GOLD_ADDRESS,
    SILVER_MAINNET_ADDRESS,
    SILVER_POLYGON_ADDRESS,
)


def pytest_configure(config):
    """
    Load environment variables from `.env.test.local` (preferred) or fall back to `.env`.
    """
    project_root = Path(__file__).resolve().parent.parent
    env_test_local = project_root / ".env.test.local"
    env_default = project_root / ".env"

    if env_test_local.exists():
        load_dotenv(env_test_local)
    elif env_default.exists():
        load_dotenv(env_default)


@pytest.fixture
def gold_token() -> Token:
    return Token(
        symbol="GOLD",
        name="Gold Coin",
        id=1,
        decimals=0,
        uri="ipfs://gold/1.json",
        total_supply=1_000_000,
        chains={1: TokenChainInfo(contract_address=GOLD_ADDRESS)},
    )


@pytest.fixture
def silver_token() -> Token:
    return Token(
        symbol="Silver",
        name="Silver Coin",
        id=2,
        decimals=2,
        uri="ipfs://silver/2.json",
        total_supply=500,
        chains={
            1: TokenChainInfo(contract_address=SILVER_MAINNET_ADDRESS),
            137: TokenChainInfo(contract_address=SILVER_POLYGON_ADDRESS),
        },
    )


@pytest.fixture
def wallet_client() -> FakeWalletClient:
    return FakeWalletClient(
        chain_id=1,
        aliases={
            "alice.eth": ALICE,
            "bob.eth": BOB,
        },
    )
