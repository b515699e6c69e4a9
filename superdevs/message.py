"""Signing and verifying text messages with ed25519 keys."""

from __future__ import annotations

import base64
import binascii

from nacl.bindings import crypto_sign
from nacl.exceptions import CryptoError
from nacl.signing import VerifyKey

from .errors import InvalidInput
from .pubkey import b58decode, b58encode, is_on_curve, parse_pubkey

_SIGNATURE_BYTES = 64
_KEYPAIR_BYTES = 64


def sign_message(message: str, secret: str) -> dict[str, str]:
    """Sign a message with a base58 64-byte secret; the signature is base64."""
    if not message or not secret:
        raise InvalidInput("Missing required fields")
    keypair = b58decode(secret)
    if len(keypair) != _KEYPAIR_BYTES:
        raise InvalidInput("Invalid secret key length")
    public = keypair[32:]
    if not is_on_curve(public):
        raise InvalidInput("Failed to create keypair: Cannot decompress Edwards point")
    signature = crypto_sign(message.encode("utf-8"), keypair)[:_SIGNATURE_BYTES]
    return {
        "signature": base64.b64encode(signature).decode("ascii"),
        "public_key": b58encode(public),
        "message": message,
    }


def verify_message(message: str, pubkey: str, signature: str) -> dict[str, object]:
    """Check a base64 signature of a message against a base58 public key."""
    if not message or not pubkey or not signature:
        raise InvalidInput("Missing required fields")
    try:
        key = parse_pubkey(pubkey)
    except ValueError as exc:
        raise InvalidInput(f"Invalid pubkey: {exc}") from None
    try:
        signature_bytes = base64.b64decode(signature, validate=True)
    except binascii.Error as exc:
        raise InvalidInput(f"Invalid signature format: {exc}") from None
    if len(signature_bytes) != _SIGNATURE_BYTES:
        raise InvalidInput("Invalid signature length")
    try:
        VerifyKey(bytes(key)).verify(message.encode("utf-8"), signature_bytes)
        valid = True
    except CryptoError:
        valid = False
    return {"valid": valid, "message": message, "pubkey": pubkey}