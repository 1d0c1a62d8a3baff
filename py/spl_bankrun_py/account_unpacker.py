# spl_bankrun_py/account_unpacker.py

from enum import IntEnum
from typing import List, Optional

from solders.account import Account
from solders.pubkey import Pubkey
from spl.token._layouts import ACCOUNT_LAYOUT, MINT_LAYOUT
from spl.token.constants import TOKEN_PROGRAM_ID

from .errors import (
    TokenAccountNotFoundError,
    TokenInvalidAccountError,
    TokenInvalidAccountOwnerError,
    TokenInvalidAccountSizeError,
    TokenInvalidMintError,
)
from .types import AccountState, AccountType, Mint, TokenAccount

MINT_SIZE = MINT_LAYOUT.sizeof()
ACCOUNT_SIZE = ACCOUNT_LAYOUT.sizeof()
MULTISIG_SIZE = 355
ACCOUNT_TYPE_SIZE = 1
TYPE_SIZE = 2
LENGTH_SIZE = 2

# ----------------------------
# Token-2022 Erweiterungen
# ----------------------------

class ExtensionType(IntEnum):
    UNINITIALIZED = 0
    TRANSFER_FEE_CONFIG = 1
    TRANSFER_FEE_AMOUNT = 2
    MINT_CLOSE_AUTHORITY = 3
    CONFIDENTIAL_TRANSFER_MINT = 4
    CONFIDENTIAL_TRANSFER_ACCOUNT = 5
    DEFAULT_ACCOUNT_STATE = 6
    IMMUTABLE_OWNER = 7
    MEMO_TRANSFER = 8
    NON_TRANSFERABLE = 9
    INTEREST_BEARING_CONFIG = 10
    CPI_GUARD = 11
    PERMANENT_DELEGATE = 12
    NON_TRANSFERABLE_ACCOUNT = 13
    TRANSFER_HOOK = 14
    TRANSFER_HOOK_ACCOUNT = 15
    CONFIDENTIAL_TRANSFER_FEE_CONFIG = 16
    CONFIDENTIAL_TRANSFER_FEE_AMOUNT = 17
    METADATA_POINTER = 18
    TOKEN_METADATA = 19
    GROUP_POINTER = 20
    TOKEN_GROUP = 21
    GROUP_MEMBER_POINTER = 22
    TOKEN_GROUP_MEMBER = 23

# Mint-Erweiterungen, die jedem Token-Konto des Mints eine passende Erweiterung
# vorschreiben, mit der festen Größe des Eintrags auf Kontoseite.
_ACCOUNT_EXTENSION_FOR_MINT = {
    ExtensionType.TRANSFER_FEE_CONFIG: (ExtensionType.TRANSFER_FEE_AMOUNT, 8),
    ExtensionType.CONFIDENTIAL_TRANSFER_MINT: (ExtensionType.CONFIDENTIAL_TRANSFER_ACCOUNT, 295),
    ExtensionType.NON_TRANSFERABLE: (ExtensionType.NON_TRANSFERABLE_ACCOUNT, 0),
    ExtensionType.TRANSFER_HOOK: (ExtensionType.TRANSFER_HOOK_ACCOUNT, 1),
    ExtensionType.CONFIDENTIAL_TRANSFER_FEE_CONFIG: (ExtensionType.CONFIDENTIAL_TRANSFER_FEE_AMOUNT, 32),
}


def get_extension_types(tlv_data: bytes) -> List[int]:
    """Listet die Typ-Tags der Erweiterungen in einem TLV-Bereich in Reihenfolge auf."""
    extension_types = []
    index = 0
    while index + TYPE_SIZE + LENGTH_SIZE <= len(tlv_data):
        entry_type = int.from_bytes(tlv_data[index:index + TYPE_SIZE], "little")
        entry_length = int.from_bytes(
            tlv_data[index + TYPE_SIZE:index + TYPE_SIZE + LENGTH_SIZE], "little"
        )
        extension_types.append(entry_type)
        index += TYPE_SIZE + LENGTH_SIZE + entry_length
    return extension_types


def get_account_len_for_mint(mint: Mint) -> int:
    """
    Gibt die Datenlänge zurück, mit der ein Token-Konto für ``mint`` angelegt werden muss.

    Args:
        mint (Mint): Der dekodierte Mint.

    Returns:
        int: ``ACCOUNT_SIZE`` für Mints ohne Erweiterungen, sonst das Basislayout
        plus Account-Type-Byte und alle benötigten Konto-Erweiterungen.
    """
    required = []
    for extension_type in get_extension_types(mint.tlv_data):
        entry = _ACCOUNT_EXTENSION_FOR_MINT.get(extension_type)
        if entry is not None and entry not in required:
            required.append(entry)

    if not required:
        return ACCOUNT_SIZE

    length = ACCOUNT_SIZE + ACCOUNT_TYPE_SIZE + sum(
        TYPE_SIZE + LENGTH_SIZE + size for _, size in required
    )
    # darf nie mit der Größe des Multisig-Layouts übereinstimmen
    if length == MULTISIG_SIZE:
        return length + TYPE_SIZE
    return length

# ----------------------------
# Unpack Account
# ----------------------------

def _optional_pubkey(option: int, raw: bytes) -> Optional[Pubkey]:
    return Pubkey(raw) if option else None


def _check_owner_and_size(info: Optional[Account], program_id: Pubkey, base_size: int) -> Account:
    if info is None:
        raise TokenAccountNotFoundError()
    if info.owner != program_id:
        raise TokenInvalidAccountOwnerError()
    if len(info.data) < base_size:
        raise TokenInvalidAccountSizeError()
    return info


def unpack_mint(
    address: Pubkey,
    info: Optional[Account],
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Mint:
    """
    Dekodiert rohe Kontodaten in einen ``Mint``.

    Args:
        address (Pubkey): Adresse, von der das Konto gelesen wurde.
        info (Optional[Account]): Das Konto, wie der Banks-Client es liefert.
        program_id (Pubkey): Token-Programm, dem das Konto gehören muss.

    Returns:
        Mint: Der dekodierte Mint.

    Raises:
        TokenAccountNotFoundError: ``info`` ist None.
        TokenInvalidAccountOwnerError: Das Konto gehört einem anderen Programm.
        TokenInvalidAccountSizeError: Die Datenlänge passt zu keinem Mint-Layout.
        TokenInvalidMintError: Das Account-Type-Byte der Erweiterung ist nicht ``MINT``.
    """
    info = _check_owner_and_size(info, program_id, MINT_SIZE)
    data = bytes(info.data)
    raw = MINT_LAYOUT.parse(data[:MINT_SIZE])

    tlv_data = b""
    if len(data) > MINT_SIZE:
        if len(data) <= ACCOUNT_SIZE or len(data) == MULTISIG_SIZE:
            raise TokenInvalidAccountSizeError()
        if data[ACCOUNT_SIZE] != AccountType.MINT:
            raise TokenInvalidMintError()
        tlv_data = data[ACCOUNT_SIZE + ACCOUNT_TYPE_SIZE:]

    return Mint(
        address=address,
        mint_authority=_optional_pubkey(raw.mint_authority_option, raw.mint_authority),
        supply=raw.supply,
        decimals=raw.decimals,
        is_initialized=bool(raw.is_initialized),
        freeze_authority=_optional_pubkey(raw.freeze_authority_option, raw.freeze_authority),
        tlv_data=tlv_data,
    )


def unpack_account(
    address: Pubkey,
    info: Optional[Account],
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> TokenAccount:
    """Dekodiert rohe Kontodaten in einen ``TokenAccount``; Fehler wie bei ``unpack_mint``."""
    info = _check_owner_and_size(info, program_id, ACCOUNT_SIZE)
    data = bytes(info.data)
    raw = ACCOUNT_LAYOUT.parse(data[:ACCOUNT_SIZE])

    tlv_data = b""
    if len(data) > ACCOUNT_SIZE:
        if len(data) == MULTISIG_SIZE:
            raise TokenInvalidAccountSizeError()
        if data[ACCOUNT_SIZE] != AccountType.ACCOUNT:
            raise TokenInvalidAccountError()
        tlv_data = data[ACCOUNT_SIZE + ACCOUNT_TYPE_SIZE:]

    return TokenAccount(
        address=address,
        mint=Pubkey(raw.mint),
        owner=Pubkey(raw.owner),
        amount=raw.amount,
        delegate=_optional_pubkey(raw.delegate_option, raw.delegate),
        delegated_amount=raw.delegated_amount,
        is_initialized=raw.state != AccountState.UNINITIALIZED,
        is_frozen=raw.state == AccountState.FROZEN,
        is_native=bool(raw.is_native_option),
        rent_exempt_reserve=raw.is_native if raw.is_native_option else None,
        close_authority=_optional_pubkey(raw.close_authority_option, raw.close_authority),
        tlv_data=tlv_data,
    )
