"""
SplBankrunClient Unit Tests
===========================
Option defaults and forwarding of bound arguments.
"""

from types import SimpleNamespace

import pytest
from solders.commitment_config import CommitmentLevel
from solders.keypair import Keypair
from spl.token.constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    TOKEN_2022_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)

from spl_bankrun_py import SplBankrunClient, SplClientOptions
from spl_bankrun_py.utils import get_associated_token_address
from tests.mocks import account, mint_data


class TestSplClientOptions:
    """Test option defaults."""

    def test_defaults(self):
        opts = SplClientOptions()

        assert opts.program_id == TOKEN_PROGRAM_ID
        assert opts.associated_token_program_id == ASSOCIATED_TOKEN_PROGRAM_ID
        assert opts.commitment is None


class TestSplBankrunClient:
    """Test the bound client."""

    def test_from_context(self, fake_banks_client, payer):
        context = SimpleNamespace(banks_client=fake_banks_client, payer=payer)

        client = SplBankrunClient.from_context(context)

        assert client.banks_client is fake_banks_client
        assert client.payer_pk == payer.pubkey()
        assert client.opts == SplClientOptions()

    @pytest.mark.asyncio
    async def test_uses_bound_payer_and_program(self, fake_banks_client, payer):
        client = SplBankrunClient(
            fake_banks_client, payer, SplClientOptions(program_id=TOKEN_2022_PROGRAM_ID)
        )

        await client.create_mint(payer.pubkey(), None, 6)

        tx = fake_banks_client.last
        assert fake_banks_client.signer_keys(tx)[0] == payer.pubkey()
        assert fake_banks_client.program_ids(tx)[1] == TOKEN_2022_PROGRAM_ID

    @pytest.mark.asyncio
    async def test_associated_address_uses_bound_program(self, fake_banks_client, payer):
        client = SplBankrunClient(
            fake_banks_client, payer, SplClientOptions(program_id=TOKEN_2022_PROGRAM_ID)
        )
        mint, owner = Keypair().pubkey(), Keypair().pubkey()

        address = await client.create_account(mint, owner)

        assert address == get_associated_token_address(
            mint, owner, program_id=TOKEN_2022_PROGRAM_ID
        )

    @pytest.mark.asyncio
    async def test_create_account_forwards_associated_program(self, fake_banks_client, payer):
        associated_program = Keypair().pubkey()
        client = SplBankrunClient(
            fake_banks_client,
            payer,
            SplClientOptions(associated_token_program_id=associated_program),
        )
        mint, owner = Keypair().pubkey(), Keypair().pubkey()

        address = await client.create_account(mint, owner)

        assert address == get_associated_token_address(
            mint, owner, associated_token_program_id=associated_program
        )
        assert fake_banks_client.program_ids(fake_banks_client.last) == [associated_program]

    @pytest.mark.asyncio
    async def test_reads_with_bound_commitment(self, fake_banks_client, payer):
        client = SplBankrunClient(
            fake_banks_client, payer, SplClientOptions(commitment=CommitmentLevel.Confirmed)
        )
        mint = Keypair().pubkey()
        fake_banks_client.accounts[mint] = account(mint_data(payer.pubkey(), decimals=4))

        state = await client.get_mint(mint)
        await client.create_account(mint, payer.pubkey(), keypair=Keypair())

        assert state.decimals == 4
        assert fake_banks_client.account_requests == [
            (mint, CommitmentLevel.Confirmed),
            (mint, CommitmentLevel.Confirmed),
        ]

    @pytest.mark.asyncio
    async def test_transfer_and_mint_to_forward(self, fake_banks_client, payer):
        client = SplBankrunClient(fake_banks_client, payer)
        mint, source, destination = (Keypair().pubkey() for _ in range(3))

        await client.mint_to(mint, destination, payer, 10)
        await client.transfer(source, destination, payer, 3)
        await client.close_account(source, payer.pubkey(), payer)

        assert len(fake_banks_client.processed) == 3
        assert all(len(tx.signatures) == 1 for tx in fake_banks_client.processed)
