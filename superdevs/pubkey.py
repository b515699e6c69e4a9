"""Public keys, base58 text form and program-derived addresses."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import Base58DecodeError

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(ALPHABET)}

PUBKEY_BYTES = 32
MAX_BASE58_LEN = 44
MAX_SEEDS = 16
MAX_SEED_LEN = 32
_PDA_MARKER = b"ProgramDerivedAddress"

_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P


def b58encode(data: bytes) -> str:
    """Encode bytes in base58, keeping leading zero bytes as '1'."""
    data = bytes(data)
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, rest = divmod(number, 58)
        digits.append(ALPHABET[rest])
    zeros = len(data) - len(data.lstrip(b"\0"))
    return "1" * zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text; raise Base58DecodeError on a foreign character."""
    number = 0
    offset = 0
    for char in text:
        digit = _INDEX.get(char)
        if digit is None:
            raise Base58DecodeError(
                f"provided string contained invalid character {char!r} at byte {offset}"
            )
        number = number * 58 + digit
        offset += len(char.encode("utf-8"))
    zeros = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * zeros + body


@dataclass(frozen=True)
class Pubkey:
    """A 32-byte account address."""

    raw: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.raw)
        if len(raw) != PUBKEY_BYTES:
            raise ValueError(f"a public key is {PUBKEY_BYTES} bytes, got {len(raw)}")
        object.__setattr__(self, "raw", raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return b58encode(self.raw)


def parse_pubkey(text: str) -> Pubkey:
    """Parse a base58 address; raise ValueError when it is not one."""
    if len(text.encode("utf-8")) > MAX_BASE58_LEN:
        raise ValueError("String is the wrong size")
    try:
        raw = b58decode(text)
    except Base58DecodeError:
        raise ValueError("Invalid Base58 string") from None
    if len(raw) != PUBKEY_BYTES:
        raise ValueError("String is the wrong size")
    return Pubkey(raw)


def is_on_curve(data: bytes) -> bool:
    """Tell whether 32 bytes decompress to a point of the ed25519 curve."""
    data = bytes(data)
    if len(data) != PUBKEY_BYTES:
        return False
    y = (int.from_bytes(data, "little") & ((1 << 255) - 1)) % _P
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    if v == 0:
        return u == 0
    x2 = u * pow(v, _P - 2, _P) % _P
    return x2 == 0 or pow(x2, (_P - 1) // 2, _P) == 1


def find_program_address(seeds: Iterable[bytes], program_id: Pubkey) -> tuple[Pubkey, int]:
    """Find the first off-curve address for the seeds, trying bumps from 255 down."""
    seed_bytes = [bytes(seed) for seed in seeds]
    if len(seed_bytes) >= MAX_SEEDS:
        raise ValueError(f"at most {MAX_SEEDS - 1} seeds are allowed")
    if any(len(seed) > MAX_SEED_LEN for seed in seed_bytes):
        raise ValueError(f"a seed is at most {MAX_SEED_LEN} bytes")
    prefix = b"".join(seed_bytes)
    suffix = bytes(program_id) + _PDA_MARKER
    for bump in range(255, -1, -1):
        candidate = hashlib.sha256(prefix + bytes([bump]) + suffix).digest()
        if not is_on_curve(candidate):
            return Pubkey(candidate), bump
    raise ValueError("Unable to find a viable program address bump seed")


SYSTEM_PROGRAM_ID = parse_pubkey("11111111111111111111111111111111")
TOKEN_PROGRAM_ID = parse_pubkey("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
ASSOCIATED_TOKEN_PROGRAM_ID = parse_pubkey("ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL")
SYSVAR_RENT_ID = parse_pubkey("SysvarRent111111111111111111111111111111111")


def get_associated_token_address(wallet: Pubkey, mint: Pubkey) -> Pubkey:
    """The associated token account of a wallet for a mint."""
    address, _ = find_program_address(
        [bytes(wallet), bytes(TOKEN_PROGRAM_ID), bytes(mint)],
        ASSOCIATED_TOKEN_PROGRAM_ID,
    )
    return address