# spl_bankrun_py/types.py

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from solders.commitment_config import CommitmentLevel
from solders.keypair import Keypair
from solders.pubkey import Pubkey

# Eine Mint-/Transfer-Authority ist entweder ein reiner Pubkey (anderswo
# signiert, z. B. Multisig) oder ein Keypair, das lokal signiert.
Authority = Union[Pubkey, Keypair]

# ----------------------------
# Enums
# ----------------------------

class AccountState(IntEnum):
    UNINITIALIZED = 0
    INITIALIZED = 1
    FROZEN = 2

class AccountType(IntEnum):
    """Diskriminator-Byte nach dem Basislayout erweiterter Konten."""
    UNINITIALIZED = 0
    MINT = 1
    ACCOUNT = 2

# ----------------------------
# Data Classes
# ----------------------------

@dataclass(frozen=True)
class Mint:
    address: Pubkey
    mint_authority: Optional[Pubkey]
    supply: int
    decimals: int
    is_initialized: bool
    freeze_authority: Optional[Pubkey]
    tlv_data: bytes = b""

@dataclass(frozen=True)
class TokenAccount:
    address: Pubkey
    mint: Pubkey
    owner: Pubkey
    amount: int
    delegate: Optional[Pubkey]
    delegated_amount: int
    is_initialized: bool
    is_frozen: bool
    is_native: bool
    rent_exempt_reserve: Optional[int]
    close_authority: Optional[Pubkey]
    tlv_data: bytes = b""

@dataclass
class ConfirmOptions:
    """Optionen für Aufrufe, die vor dem Schreiben Zustand lesen (z. B. ``create_account``)."""
    commitment: Optional[CommitmentLevel] = None
