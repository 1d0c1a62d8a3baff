# spl_bankrun_py/accounts/__init__.py

from .mint import create_mint, get_mint, mint_to
from .token_account import (
    close_account,
    create_account,
    create_associated_token_account,
    get_account,
    transfer,
)

__all__ = [
    'create_mint',
    'get_mint',
    'mint_to',
    'create_account',
    'create_associated_token_account',
    'get_account',
    'transfer',
    'close_account',
]
