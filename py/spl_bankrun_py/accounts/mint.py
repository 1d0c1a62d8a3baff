# spl_bankrun_py/accounts/mint.py

import logging
from typing import Optional, Sequence

from solders.bankrun import BanksClient, BanksTransactionMeta
from solders.commitment_config import CommitmentLevel
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.system_program import CreateAccountParams, create_account
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import (
    InitializeMintParams,
    MintToParams,
    initialize_mint,
    mint_to as mint_to_instruction,
)

from ..account_unpacker import MINT_SIZE, unpack_mint
from ..types import Authority, Mint
from ..utils import get_signers, send_transaction

logger = logging.getLogger(__name__)


async def create_mint(
    banks_client: BanksClient,
    payer: Keypair,
    mint_authority: Pubkey,
    freeze_authority: Optional[Pubkey],
    decimals: int,
    keypair: Optional[Keypair] = None,
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Pubkey:
    """
    Legt einen neuen Mint an und initialisiert ihn.

    Args:
        banks_client (BanksClient): Der Bankrun-Client.
        payer (Keypair): Bezahlt das Konto und die Transaktion.
        mint_authority (Pubkey): Konto, das neue Token ausgeben darf.
        freeze_authority (Optional[Pubkey]): Konto, das Token-Konten einfrieren darf, falls vorhanden.
        decimals (int): Die Anzahl der Dezimalstellen des Tokens.
        keypair (Optional[Keypair]): Keypair des Mint-Kontos. Bei None wird ein neues erzeugt.
        program_id (Pubkey): Das Token-Programm, dem der Mint gehört.

    Returns:
        Pubkey: Adresse des neuen Mints.
    """
    if keypair is None:
        keypair = Keypair()

    rent = await banks_client.get_rent()

    ixs = [
        create_account(
            CreateAccountParams(
                from_pubkey=payer.pubkey(),
                to_pubkey=keypair.pubkey(),
                lamports=rent.minimum_balance(MINT_SIZE),
                space=MINT_SIZE,
                owner=program_id,
            )
        ),
        initialize_mint(
            InitializeMintParams(
                decimals=decimals,
                program_id=program_id,
                mint=keypair.pubkey(),
                mint_authority=mint_authority,
                freeze_authority=freeze_authority,
            )
        ),
    ]
    await send_transaction(banks_client, payer, ixs, [keypair])

    logger.debug("created mint %s (decimals=%d)", keypair.pubkey(), decimals)
    return keypair.pubkey()


async def get_mint(
    banks_client: BanksClient,
    address: Pubkey,
    commitment: Optional[CommitmentLevel] = None,
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Mint:
    info = await banks_client.get_account(address, commitment)
    return unpack_mint(address, info, program_id)


async def mint_to(
    banks_client: BanksClient,
    payer: Keypair,
    mint: Pubkey,
    destination: Pubkey,
    authority: Authority,
    amount: int,
    multi_signers: Sequence[Keypair] = (),
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> BanksTransactionMeta:
    """
    Gibt ``amount`` Basiseinheiten von ``mint`` an ``destination`` aus.

    ``authority`` ist entweder das Keypair der Mint-Authority oder der Pubkey
    einer Multisig-Authority, deren ``multi_signers`` die Transaktion signieren.
    """
    authority_pubkey, signers = get_signers(authority, multi_signers)

    ix = mint_to_instruction(
        MintToParams(
            program_id=program_id,
            mint=mint,
            dest=destination,
            mint_authority=authority_pubkey,
            amount=amount,
            signers=[signer.pubkey() for signer in multi_signers],
        )
    )
    return await send_transaction(banks_client, payer, [ix], signers)
