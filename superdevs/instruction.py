"""Instructions for the system and token programs."""

from __future__ import annotations

import base64
from dataclasses import dataclass

from .pubkey import SYSTEM_PROGRAM_ID, SYSVAR_RENT_ID, TOKEN_PROGRAM_ID, Pubkey

_SYSTEM_TRANSFER = 2
_TOKEN_INITIALIZE_MINT = 0
_TOKEN_TRANSFER = 3
_TOKEN_MINT_TO = 7


@dataclass(frozen=True)
class AccountMeta:
    """An account an instruction touches, with its access flags."""

    pubkey: Pubkey
    is_signer: bool
    is_writable: bool


@dataclass(frozen=True)
class Instruction:
    """A program id, the accounts it reads or writes and its data bytes."""

    program_id: Pubkey
    accounts: tuple[AccountMeta, ...]
    data: bytes

    def encoded_data(self) -> str:
        """The instruction data in standard base64."""
        return base64.b64encode(self.data).decode("ascii")


def _u64(value: int) -> bytes:
    if not 0 <= value < 2**64:
        raise ValueError(f"value out of range for u64: {value}")
    return value.to_bytes(8, "little")


def _u8(value: int) -> bytes:
    if not 0 <= value < 2**8:
        raise ValueError(f"value out of range for u8: {value}")
    return bytes([value])


def system_transfer(from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int) -> Instruction:
    """Move lamports from one system account to another."""
    return Instruction(
        program_id=SYSTEM_PROGRAM_ID,
        accounts=(
            AccountMeta(from_pubkey, is_signer=True, is_writable=True),
            AccountMeta(to_pubkey, is_signer=False, is_writable=True),
        ),
        data=_SYSTEM_TRANSFER.to_bytes(4, "little") + _u64(lamports),
    )


def token_transfer(source: Pubkey, destination: Pubkey, owner: Pubkey, amount: int) -> Instruction:
    """Move tokens between two token accounts, signed by a single owner."""
    return Instruction(
        program_id=TOKEN_PROGRAM_ID,
        accounts=(
            AccountMeta(source, is_signer=False, is_writable=True),
            AccountMeta(destination, is_signer=False, is_writable=True),
            AccountMeta(owner, is_signer=True, is_writable=False),
        ),
        data=bytes([_TOKEN_TRANSFER]) + _u64(amount),
    )


def token_mint_to(mint: Pubkey, destination: Pubkey, authority: Pubkey, amount: int) -> Instruction:
    """Mint new tokens into a token account, signed by a single authority."""
    return Instruction(
        program_id=TOKEN_PROGRAM_ID,
        accounts=(
            AccountMeta(mint, is_signer=False, is_writable=True),
            AccountMeta(destination, is_signer=False, is_writable=True),
            AccountMeta(authority, is_signer=True, is_writable=False),
        ),
        data=bytes([_TOKEN_MINT_TO]) + _u64(amount),
    )


def token_initialize_mint(mint: Pubkey, mint_authority: Pubkey, decimals: int) -> Instruction:
    """Initialise a mint with no freeze authority."""
    return Instruction(
        program_id=TOKEN_PROGRAM_ID,
        accounts=(
            AccountMeta(mint, is_signer=False, is_writable=True),
            AccountMeta(SYSVAR_RENT_ID, is_signer=False, is_writable=False),
        ),
        data=bytes([_TOKEN_INITIALIZE_MINT]) + _u8(decimals) + bytes(mint_authority) + b"\0",
    )