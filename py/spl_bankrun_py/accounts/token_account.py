# spl_bankrun_py/accounts/token_account.py

import logging
from typing import Optional, Sequence

from solders.bankrun import BanksClient, BanksTransactionMeta
from solders.commitment_config import CommitmentLevel
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.system_program import CreateAccountParams, create_account as create_system_account
from spl.token.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID
from spl.token.instructions import (
    CloseAccountParams,
    InitializeAccountParams,
    TransferParams,
    close_account as close_account_instruction,
    initialize_account,
    transfer as transfer_instruction,
)

from ..account_unpacker import get_account_len_for_mint, unpack_account
from ..types import Authority, ConfirmOptions, TokenAccount
from ..utils import (
    create_associated_token_account_instruction,
    get_associated_token_address,
    get_signers,
    send_transaction,
)
from .mint import get_mint

logger = logging.getLogger(__name__)

# ----------------------------
# Create Account
# ----------------------------

async def create_account(
    banks_client: BanksClient,
    payer: Keypair,
    mint: Pubkey,
    owner: Pubkey,
    keypair: Optional[Keypair] = None,
    confirm_options: Optional[ConfirmOptions] = None,
    program_id: Pubkey = TOKEN_PROGRAM_ID,
    associated_token_program_id: Pubkey = ASSOCIATED_TOKEN_PROGRAM_ID,
) -> Pubkey:
    """
    Erstellt ein Token-Konto für ``mint`` mit dem Besitzer ``owner``.

    Args:
        banks_client (BanksClient): Der Bankrun-Client.
        payer (Keypair): Bezahlt das Konto und die Transaktion.
        mint (Pubkey): Der Mint, den das Konto hält.
        owner (Pubkey): Besitzer des neuen Kontos.
        keypair (Optional[Keypair]): Keypair des neuen Kontos. Bei None wird
            stattdessen das Associated Token Account von ``owner`` erstellt.
        confirm_options (Optional[ConfirmOptions]): Commitment zum Lesen des Mints.
        program_id (Pubkey): Das Token-Programm.
        associated_token_program_id (Pubkey): Das Associated-Token-Programm,
            nur ohne ``keypair`` verwendet.

    Returns:
        Pubkey: Adresse des neuen Token-Kontos.
    """
    if keypair is None:
        return await create_associated_token_account(
            banks_client, payer, mint, owner, program_id, associated_token_program_id
        )

    commitment = confirm_options.commitment if confirm_options else None
    mint_state = await get_mint(banks_client, mint, commitment, program_id)
    space = get_account_len_for_mint(mint_state)

    rent = await banks_client.get_rent()

    ixs = [
        create_system_account(
            CreateAccountParams(
                from_pubkey=payer.pubkey(),
                to_pubkey=keypair.pubkey(),
                lamports=rent.minimum_balance(space),
                space=space,
                owner=program_id,
            )
        ),
        initialize_account(
            InitializeAccountParams(
                program_id=program_id,
                account=keypair.pubkey(),
                mint=mint,
                owner=owner,
            )
        ),
    ]
    await send_transaction(banks_client, payer, ixs, [keypair])

    logger.debug("created token account %s for mint %s", keypair.pubkey(), mint)
    return keypair.pubkey()


async def create_associated_token_account(
    banks_client: BanksClient,
    payer: Keypair,
    mint: Pubkey,
    owner: Pubkey,
    program_id: Pubkey = TOKEN_PROGRAM_ID,
    associated_token_program_id: Pubkey = ASSOCIATED_TOKEN_PROGRAM_ID,
    allow_owner_off_curve: bool = True,
    idempotent: bool = False,
) -> Pubkey:
    """
    Erstellt das Associated Token Account von ``owner`` für ``mint``.

    Mit ``idempotent=True`` gelingt die Transaktion auch, wenn das Konto
    bereits existiert.
    """
    associated_token = get_associated_token_address(
        mint,
        owner,
        allow_owner_off_curve,
        program_id,
        associated_token_program_id,
    )

    ix = create_associated_token_account_instruction(
        payer.pubkey(),
        associated_token,
        owner,
        mint,
        program_id,
        associated_token_program_id,
        idempotent=idempotent,
    )
    await send_transaction(banks_client, payer, [ix])

    logger.debug("created associated token account %s (owner %s)", associated_token, owner)
    return associated_token


async def get_account(
    banks_client: BanksClient,
    address: Pubkey,
    commitment: Optional[CommitmentLevel] = None,
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> TokenAccount:
    info = await banks_client.get_account(address, commitment)
    return unpack_account(address, info, program_id)

# ----------------------------
# Saldoänderungen
# ----------------------------

async def transfer(
    banks_client: BanksClient,
    payer: Keypair,
    source: Pubkey,
    destination: Pubkey,
    owner: Authority,
    amount: int,
    multi_signers: Sequence[Keypair] = (),
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> BanksTransactionMeta:
    """Überträgt ``amount`` Basiseinheiten von ``source`` nach ``destination``."""
    owner_pubkey, signers = get_signers(owner, multi_signers)

    ix = transfer_instruction(
        TransferParams(
            program_id=program_id,
            source=source,
            dest=destination,
            owner=owner_pubkey,
            amount=amount,
            signers=[signer.pubkey() for signer in multi_signers],
        )
    )
    return await send_transaction(banks_client, payer, [ix], signers)


async def close_account(
    banks_client: BanksClient,
    payer: Keypair,
    account: Pubkey,
    destination: Pubkey,
    authority: Authority,
    multi_signers: Sequence[Keypair] = (),
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> BanksTransactionMeta:
    """Schließt ein leeres Token-Konto und überweist seine Lamports an ``destination``."""
    authority_pubkey, signers = get_signers(authority, multi_signers)

    ix = close_account_instruction(
        CloseAccountParams(
            program_id=program_id,
            account=account,
            dest=destination,
            owner=authority_pubkey,
            signers=[signer.pubkey() for signer in multi_signers],
        )
    )
    return await send_transaction(banks_client, payer, [ix], signers)
