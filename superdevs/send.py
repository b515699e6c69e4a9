"""Building transfer instructions for lamports and tokens."""

from __future__ import annotations

from typing import Any

from .errors import InvalidInput, TokenError
from .instruction import system_transfer, token_transfer
from .pubkey import Pubkey, get_associated_token_address, parse_pubkey


def _parse(text: str, label: str) -> Pubkey:
    try:
        return parse_pubkey(text)
    except ValueError as exc:
        raise InvalidInput(f"Invalid {label} address: {exc}") from None


def create_sol_transfer_instruction(
    from_address: str, to_address: str, lamports: int
) -> dict[str, Any]:
    """Describe a system transfer; accounts are listed as address strings."""
    if not from_address or not to_address or lamports == 0:
        raise InvalidInput("Missing required fields")
    if from_address == to_address:
        raise InvalidInput("From and to addresses cannot be the same")
    sender = _parse(from_address, "from")
    receiver = _parse(to_address, "to")
    instruction = system_transfer(sender, receiver, lamports)
    return {
        "program_id": str(instruction.program_id),
        "accounts": [str(meta.pubkey) for meta in instruction.accounts],
        "instruction_data": instruction.encoded_data(),
    }


def create_token_transfer_instruction(
    destination: str, mint: str, owner: str, amount: int
) -> dict[str, Any]:
    """Describe a token transfer between the owner's and destination's associated accounts.

    Account keys are given as lists of their 32 raw byte values.
    """
    if not destination or not mint or not owner or amount == 0:
        raise InvalidInput("Missing required fields")
    if destination == owner:
        raise InvalidInput("Destination and owner cannot be the same")
    owner_key = _parse(owner, "owner")
    mint_key = _parse(mint, "mint")
    destination_wallet = _parse(destination, "destination")
    source_account = get_associated_token_address(owner_key, mint_key)
    destination_account = get_associated_token_address(destination_wallet, mint_key)
    try:
        instruction = token_transfer(source_account, destination_account, owner_key, amount)
    except ValueError as exc:
        raise TokenError(f"Failed to create token transfer instruction: {exc}") from None
    return {
        "program_id": str(instruction.program_id),
        "accounts": [
            {
                "pubkey": list(bytes(meta.pubkey)),
                "is_signer": meta.is_signer,
                "is_writable": meta.is_writable,
            }
            for meta in instruction.accounts
        ],
        "instruction_data": instruction.encoded_data(),
    }