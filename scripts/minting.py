"""Minting against a bound contract handle.

``create`` is additive: every call mints a new token with the next index,
even when ``content`` is identical to a previous call. Callers that need
idempotence have to de-duplicate before calling :func:`mint_token`.
"""

from typing import NamedTuple, Optional

from brownie.network.transaction import Status

from scripts.errors import NETWORK_ERRORS, TransactionError
from scripts.utils import log

MINT_EVENTS = (("CreatedSVGNFT", "tokenId"), ("Transfer", "tokenId"))


class MintReceipt(NamedTuple):
    transaction_id: str
    confirmed: bool
    token_index: int
    confirmations: int


class MintConfirmed(NamedTuple):
    receipt: MintReceipt

    def unwrap(self) -> MintReceipt:
        return self.receipt


class MintFailed(NamedTuple):
    transaction_id: Optional[str]
    reason: str

    def unwrap(self) -> MintReceipt:
        raise TransactionError(f"mint failed: {self.reason}", self.transaction_id)


def _token_index(tx):
    for event_name, key in MINT_EVENTS:
        if event_name in tx.events:
            return int(tx.events[event_name][key])
    return None


def wait_for_confirmation(tx, confirmations=1):
    """Reverted and dropped transactions come back as MintFailed, never raised."""
    if confirmations < 1:
        raise ValueError("at least one confirmation is required")
    try:
        tx.wait(confirmations)
    except NETWORK_ERRORS as ex:
        return MintFailed(tx.txid, str(ex))

    if tx.status != Status.Confirmed:
        reason = tx.revert_msg or Status(tx.status).name.lower()
        return MintFailed(tx.txid, reason)

    token_index = _token_index(tx)
    if token_index is None:
        return MintFailed(tx.txid, "no mint event in transaction logs")

    receipt = MintReceipt(
        transaction_id=tx.txid,
        confirmed=True,
        token_index=token_index,
        confirmations=confirmations,
    )
    return MintConfirmed(receipt)


def mint_token(handle, content, confirmations=1):
    if confirmations < 1:
        raise ValueError("at least one confirmation is required")
    try:
        tx = handle.contract.create(content, {"from": handle.signer, "required_confs": 0})
    except NETWORK_ERRORS as ex:
        reason = getattr(ex, "revert_msg", None) or str(ex)
        return MintFailed(getattr(ex, "txid", None) or None, reason)

    outcome = wait_for_confirmation(tx, confirmations)
    if isinstance(outcome, MintConfirmed):
        log("NFT has been successfully created")
    return outcome
