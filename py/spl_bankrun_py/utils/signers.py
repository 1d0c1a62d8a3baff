# spl_bankrun_py/utils/signers.py

from typing import List, Sequence, Tuple

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from ..types import Authority


def get_signers(
    signer_or_multisig: Authority,
    multi_signers: Sequence[Keypair],
) -> Tuple[Pubkey, List[Keypair]]:
    """
    Zerlegt eine Authority in den Pubkey, den die Instruktion nennt, und die
    Keypairs, die die Transaktion lokal signieren müssen.

    Ein reiner ``Pubkey`` ist eine Multisig- (oder sonst externe) Authority:
    die Multi-Signer werden durchgereicht. Ein ``Keypair`` signiert selbst.
    """
    if isinstance(signer_or_multisig, Pubkey):
        return signer_or_multisig, list(multi_signers)
    return signer_or_multisig.pubkey(), [signer_or_multisig]


def unique_signers(*signers: Keypair) -> List[Keypair]:
    """Entfernt doppelte Signer (nach Pubkey) und behält das erste Vorkommen."""
    seen = set()
    unique = []
    for signer in signers:
        pubkey = signer.pubkey()
        if pubkey not in seen:
            seen.add(pubkey)
            unique.append(signer)
    return unique
