"""
Associated Token Account Unit Tests
===================================
Address derivation and create instruction layout.
"""

import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.system_program import ID as SYS_PROGRAM_ID
from spl.token.constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    TOKEN_2022_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from spl.token.instructions import get_associated_token_address as spl_get_associated_token_address

from spl_bankrun_py.errors import TokenOwnerOffCurveError
from spl_bankrun_py.utils import (
    create_associated_token_account_instruction,
    get_associated_token_address,
)


class TestGetAssociatedTokenAddress:
    """Test the pure derivation."""

    def test_matches_token_library(self):
        mint, owner = Keypair().pubkey(), Keypair().pubkey()

        assert get_associated_token_address(mint, owner) == spl_get_associated_token_address(owner, mint)

    def test_deterministic(self):
        mint, owner = Keypair().pubkey(), Keypair().pubkey()

        assert get_associated_token_address(mint, owner) == get_associated_token_address(mint, owner)

    def test_differs_by_mint_and_owner(self):
        mint_a, mint_b = Keypair().pubkey(), Keypair().pubkey()
        owner_a, owner_b = Keypair().pubkey(), Keypair().pubkey()

        addresses = {
            get_associated_token_address(mint, owner)
            for mint in (mint_a, mint_b)
            for owner in (owner_a, owner_b)
        }

        assert len(addresses) == 4

    def test_differs_by_program(self):
        mint, owner = Keypair().pubkey(), Keypair().pubkey()

        classic = get_associated_token_address(mint, owner, program_id=TOKEN_PROGRAM_ID)
        token_2022 = get_associated_token_address(mint, owner, program_id=TOKEN_2022_PROGRAM_ID)

        assert classic != token_2022

    def test_seeds(self):
        mint, owner = Keypair().pubkey(), Keypair().pubkey()
        expected, _ = Pubkey.find_program_address(
            [bytes(owner), bytes(TOKEN_PROGRAM_ID), bytes(mint)],
            ASSOCIATED_TOKEN_PROGRAM_ID,
        )

        assert get_associated_token_address(mint, owner) == expected

    def test_off_curve_owner_allowed_by_default(self):
        mint = Keypair().pubkey()
        pda_owner, _ = Pubkey.find_program_address([b"vault"], TOKEN_PROGRAM_ID)

        assert get_associated_token_address(mint, pda_owner) is not None

    def test_off_curve_owner_rejected_when_disallowed(self):
        mint = Keypair().pubkey()
        pda_owner, _ = Pubkey.find_program_address([b"vault"], TOKEN_PROGRAM_ID)

        with pytest.raises(TokenOwnerOffCurveError):
            get_associated_token_address(mint, pda_owner, allow_owner_off_curve=False)

    def test_on_curve_owner_when_disallowed(self):
        mint, owner = Keypair().pubkey(), Keypair().pubkey()

        assert get_associated_token_address(mint, owner, allow_owner_off_curve=False) == \
            get_associated_token_address(mint, owner)


class TestCreateInstruction:
    """Test the create instruction."""

    def test_accounts_and_data(self):
        payer, ata, owner, mint = (Keypair().pubkey() for _ in range(4))

        ix = create_associated_token_account_instruction(payer, ata, owner, mint)

        assert ix.program_id == ASSOCIATED_TOKEN_PROGRAM_ID
        assert [meta.pubkey for meta in ix.accounts] == [
            payer, ata, owner, mint, SYS_PROGRAM_ID, TOKEN_PROGRAM_ID,
        ]
        assert ix.accounts[0].is_signer and ix.accounts[0].is_writable
        assert ix.accounts[1].is_writable and not ix.accounts[1].is_signer
        assert not any(meta.is_signer for meta in ix.accounts[1:])
        assert bytes(ix.data) == bytes([0])

    def test_idempotent_tag(self):
        payer, ata, owner, mint = (Keypair().pubkey() for _ in range(4))

        ix = create_associated_token_account_instruction(payer, ata, owner, mint, idempotent=True)

        assert bytes(ix.data) == bytes([1])

    def test_custom_programs(self):
        payer, ata, owner, mint = (Keypair().pubkey() for _ in range(4))
        associated_program = Keypair().pubkey()

        ix = create_associated_token_account_instruction(
            payer, ata, owner, mint, TOKEN_2022_PROGRAM_ID, associated_program
        )

        assert ix.program_id == associated_program
        assert ix.accounts[-1].pubkey == TOKEN_2022_PROGRAM_ID
