from .fake_wallet_client import FakeWalletClient

__all__ = ["FakeWalletClient"]
