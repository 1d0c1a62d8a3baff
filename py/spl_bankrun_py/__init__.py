# spl_bankrun_py/__init__.py

from .account_unpacker import (
    ExtensionType,
    get_account_len_for_mint,
    get_extension_types,
    unpack_account,
    unpack_mint,
)
from .accounts import (
    close_account,
    create_account,
    create_associated_token_account,
    create_mint,
    get_account,
    get_mint,
    mint_to,
    transfer,
)
from .client import SplBankrunClient, SplClientOptions
from .errors import (
    TokenAccountNotFoundError,
    TokenError,
    TokenInvalidAccountError,
    TokenInvalidAccountOwnerError,
    TokenInvalidAccountSizeError,
    TokenInvalidMintError,
    TokenOwnerOffCurveError,
)
from .types import AccountState, Authority, ConfirmOptions, Mint, TokenAccount
from .utils import get_associated_token_address, get_signers

__all__ = [
    'SplBankrunClient', 'SplClientOptions', 'ConfirmOptions',
    'create_mint', 'create_account', 'create_associated_token_account',
    'get_mint', 'get_account', 'mint_to', 'transfer', 'close_account',
    'get_signers', 'get_associated_token_address',
    'unpack_mint', 'unpack_account', 'get_extension_types', 'get_account_len_for_mint',
    'ExtensionType', 'AccountState', 'Authority', 'Mint', 'TokenAccount',
    'TokenError', 'TokenAccountNotFoundError', 'TokenInvalidAccountError',
    'TokenInvalidAccountOwnerError', 'TokenInvalidAccountSizeError',
    'TokenInvalidMintError', 'TokenOwnerOffCurveError',
]
