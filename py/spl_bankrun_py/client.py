# spl_bankrun_py/client.py

from dataclasses import dataclass
from typing import Optional, Sequence

from solders.bankrun import BanksClient, BanksTransactionMeta, ProgramTestContext
from solders.commitment_config import CommitmentLevel
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from spl.token.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID

from . import accounts
from .types import Authority, ConfirmOptions, Mint, TokenAccount

# ----------------------------
# Optionen für den SplBankrunClient
# ----------------------------

@dataclass
class SplClientOptions:
    program_id: Pubkey = TOKEN_PROGRAM_ID
    associated_token_program_id: Pubkey = ASSOCIATED_TOKEN_PROGRAM_ID
    # gilt für alle Lesezugriffe, auch für das Lesen des Mints in create_account
    commitment: Optional[CommitmentLevel] = None

# ----------------------------
# SplBankrunClient Klasse
# ----------------------------

class SplBankrunClient:
    """
    Bindet Banks-Client, Payer und Programmoptionen, damit Tests sie nicht bei
    jedem Aufruf wiederholen müssen. Jede Methode leitet an die gleichnamige
    Funktion in ``spl_bankrun_py.accounts`` weiter.
    """

    def __init__(
        self,
        banks_client: BanksClient,
        payer: Keypair,
        opts: Optional[SplClientOptions] = None,
    ):
        self.banks_client = banks_client
        self.payer = payer
        self.opts = opts or SplClientOptions()

    @staticmethod
    def from_context(
        context: ProgramTestContext,
        opts: Optional[SplClientOptions] = None,
    ) -> 'SplBankrunClient':
        return SplBankrunClient(context.banks_client, context.payer, opts)

    @property
    def payer_pk(self) -> Pubkey:
        return self.payer.pubkey()

    async def create_mint(
        self,
        mint_authority: Pubkey,
        freeze_authority: Optional[Pubkey],
        decimals: int,
        keypair: Optional[Keypair] = None,
    ) -> Pubkey:
        return await accounts.create_mint(
            self.banks_client,
            self.payer,
            mint_authority,
            freeze_authority,
            decimals,
            keypair,
            self.opts.program_id,
        )

    async def create_account(
        self,
        mint: Pubkey,
        owner: Pubkey,
        keypair: Optional[Keypair] = None,
    ) -> Pubkey:
        return await accounts.create_account(
            self.banks_client,
            self.payer,
            mint,
            owner,
            keypair,
            ConfirmOptions(commitment=self.opts.commitment),
            self.opts.program_id,
            self.opts.associated_token_program_id,
        )

    async def create_associated_token_account(
        self,
        mint: Pubkey,
        owner: Pubkey,
        allow_owner_off_curve: bool = True,
        idempotent: bool = False,
    ) -> Pubkey:
        return await accounts.create_associated_token_account(
            self.banks_client,
            self.payer,
            mint,
            owner,
            self.opts.program_id,
            self.opts.associated_token_program_id,
            allow_owner_off_curve,
            idempotent,
        )

    async def get_mint(self, address: Pubkey) -> Mint:
        return await accounts.get_mint(
            self.banks_client, address, self.opts.commitment, self.opts.program_id
        )

    async def get_account(self, address: Pubkey) -> TokenAccount:
        return await accounts.get_account(
            self.banks_client, address, self.opts.commitment, self.opts.program_id
        )

    async def mint_to(
        self,
        mint: Pubkey,
        destination: Pubkey,
        authority: Authority,
        amount: int,
        multi_signers: Sequence[Keypair] = (),
    ) -> BanksTransactionMeta:
        return await accounts.mint_to(
            self.banks_client,
            self.payer,
            mint,
            destination,
            authority,
            amount,
            multi_signers,
            self.opts.program_id,
        )

    async def transfer(
        self,
        source: Pubkey,
        destination: Pubkey,
        owner: Authority,
        amount: int,
        multi_signers: Sequence[Keypair] = (),
    ) -> BanksTransactionMeta:
        return await accounts.transfer(
            self.banks_client,
            self.payer,
            source,
            destination,
            owner,
            amount,
            multi_signers,
            self.opts.program_id,
        )

    async def close_account(
        self,
        account: Pubkey,
        destination: Pubkey,
        authority: Authority,
        multi_signers: Sequence[Keypair] = (),
    ) -> BanksTransactionMeta:
        return await accounts.close_account(
            self.banks_client,
            self.payer,
            account,
            destination,
            authority,
            multi_signers,
            self.opts.program_id,
        )
