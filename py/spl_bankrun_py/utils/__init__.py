# spl_bankrun_py/utils/__init__.py

from .associated_token import (
    create_associated_token_account_instruction,
    get_associated_token_address,
)
from .signers import get_signers, unique_signers
from .transaction import send_transaction

__all__ = [
    'create_associated_token_account_instruction',
    'get_associated_token_address',
    'get_signers',
    'unique_signers',
    'send_transaction',
]
