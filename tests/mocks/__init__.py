from .mock_accounts import account, mint_data, token_account_data
from .mock_banks_client import FakeBanksClient

__all__ = ["FakeBanksClient", "account", "mint_data", "token_account_data"]
