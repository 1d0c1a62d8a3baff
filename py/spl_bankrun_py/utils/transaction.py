# spl_bankrun_py/utils/transaction.py

import logging
from typing import Sequence

from solders.bankrun import BanksClient, BanksTransactionMeta
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.message import Message
from solders.transaction import Transaction

from .signers import unique_signers

logger = logging.getLogger(__name__)


async def send_transaction(
    banks_client: BanksClient,
    payer: Keypair,
    instructions: Sequence[Instruction],
    signers: Sequence[Keypair] = (),
) -> BanksTransactionMeta:
    """
    Versieht die Instruktionen mit dem aktuellen Blockhash, signiert und verarbeitet sie.

    Args:
        banks_client (BanksClient): Der Bankrun-Client.
        payer (Keypair): Zahler der Gebühren, immer der erste Signer.
        instructions (Sequence[Instruction]): Die Instruktionen der Transaktion.
        signers (Sequence[Keypair]): Weitere Signer neben dem Payer.

    Returns:
        BanksTransactionMeta: Das Ergebnis von ``process_transaction``; Fehler werden weitergereicht.
    """
    blockhash, _ = await banks_client.get_latest_blockhash()
    message = Message.new_with_blockhash(list(instructions), payer.pubkey(), blockhash)
    transaction = Transaction(unique_signers(payer, *signers), message, blockhash)

    logger.debug(
        "processing transaction %s (%d instructions, %d signatures)",
        transaction.signatures[0],
        len(instructions),
        len(transaction.signatures),
    )
    return await banks_client.process_transaction(transaction)
