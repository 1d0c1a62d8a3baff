# spl_bankrun_py/utils/associated_token.py

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import ID as SYS_PROGRAM_ID
from spl.token.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID

from ..errors import TokenOwnerOffCurveError

# Instruktions-Tags des Associated-Token-Programms
CREATE = 0
CREATE_IDEMPOTENT = 1


def get_associated_token_address(
    mint: Pubkey,
    owner: Pubkey,
    allow_owner_off_curve: bool = True,
    program_id: Pubkey = TOKEN_PROGRAM_ID,
    associated_token_program_id: Pubkey = ASSOCIATED_TOKEN_PROGRAM_ID,
) -> Pubkey:
    """
    Leitet die Adresse des Associated Token Accounts für ``(mint, owner)`` ab.

    Args:
        mint (Pubkey): Der Token-Mint.
        owner (Pubkey): Die Wallet (oder PDA), der das Konto gehört.
        allow_owner_off_curve (bool): Ob PDAs Besitzer des Kontos sein dürfen.
        program_id (Pubkey): Das Token-Programm.
        associated_token_program_id (Pubkey): Das Associated-Token-Programm.

    Returns:
        Pubkey: Die abgeleitete Adresse. Es findet kein Netzwerkzugriff statt.
    """
    if not allow_owner_off_curve and not owner.is_on_curve():
        raise TokenOwnerOffCurveError()

    address, _ = Pubkey.find_program_address(
        [bytes(owner), bytes(program_id), bytes(mint)],
        associated_token_program_id,
    )
    return address


def create_associated_token_account_instruction(
    payer: Pubkey,
    associated_token: Pubkey,
    owner: Pubkey,
    mint: Pubkey,
    program_id: Pubkey = TOKEN_PROGRAM_ID,
    associated_token_program_id: Pubkey = ASSOCIATED_TOKEN_PROGRAM_ID,
    idempotent: bool = False,
) -> Instruction:
    """Baut die (optional idempotente) Create-Instruktion für ein Associated Token Account."""
    keys = [
        AccountMeta(pubkey=payer, is_signer=True, is_writable=True),
        AccountMeta(pubkey=associated_token, is_signer=False, is_writable=True),
        AccountMeta(pubkey=owner, is_signer=False, is_writable=False),
        AccountMeta(pubkey=mint, is_signer=False, is_writable=False),
        AccountMeta(pubkey=SYS_PROGRAM_ID, is_signer=False, is_writable=False),
        AccountMeta(pubkey=program_id, is_signer=False, is_writable=False),
    ]
    data = bytes([CREATE_IDEMPOTENT if idempotent else CREATE])
    return Instruction(program_id=associated_token_program_id, data=data, accounts=keys)
