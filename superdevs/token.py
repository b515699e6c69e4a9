"""Building token program instructions that create mints and mint tokens."""

from __future__ import annotations

from typing import Any

from .errors import InvalidInput, TokenError
from .instruction import Instruction, token_initialize_mint, token_mint_to
from .pubkey import Pubkey, parse_pubkey


def _parse(text: str, label: str) -> Pubkey:
    try:
        return parse_pubkey(text)
    except ValueError as exc:
        raise InvalidInput(f"Invalid {label}: {exc}") from None


def _describe(instruction: Instruction) -> dict[str, Any]:
    return {
        "program_id": str(instruction.program_id),
        "accounts": [
            {
                "pubkey": str(meta.pubkey),
                "is_signer": meta.is_signer,
                "is_writable": meta.is_writable,
            }
            for meta in instruction.accounts
        ],
        "instruction_data": instruction.encoded_data(),
    }


def create_token_mint_instruction(mint_authority: str, mint: str, decimals: int) -> dict[str, Any]:
    """Describe an initialize-mint instruction with no freeze authority."""
    if not mint or not mint_authority or decimals == 0:
        raise InvalidInput("Missing required fields")
    if mint == mint_authority:
        raise InvalidInput("Mint and mint authority cannot be the same")
    mint_key = _parse(mint, "mint pubkey")
    authority_key = _parse(mint_authority, "mint authority pubkey")
    try:
        instruction = token_initialize_mint(mint_key, authority_key, decimals)
    except ValueError as exc:
        raise TokenError(f"Failed to create mint instruction: {exc}") from None
    return _describe(instruction)


def create_mint_to_instruction(
    mint: str, destination: str, authority: str, amount: int
) -> dict[str, Any]:
    """Describe a mint-to instruction signed by a single authority."""
    if not mint or not destination or not authority or amount == 0:
        raise InvalidInput("Missing required fields")
    if mint == destination:
        raise InvalidInput("Mint and destination cannot be the same")
    if mint == authority:
        raise InvalidInput("Mint and authority cannot be the same")
    if destination == authority:
        raise InvalidInput("Destination and authority cannot be the same")
    mint_key = _parse(mint, "mint address")
    destination_key = _parse(destination, "destination address")
    authority_key = _parse(authority, "authority address")
    try:
        instruction = token_mint_to(mint_key, destination_key, authority_key, amount)
    except ValueError as exc:
        raise TokenError(f"Failed to create mint-to instruction: {exc}") from None
    return _describe(instruction)