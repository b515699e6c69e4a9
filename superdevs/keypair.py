"""Fresh ed25519 keypairs in base58 form."""

from __future__ import annotations

from nacl.signing import SigningKey

from .pubkey import b58encode


def create_new_keypair() -> dict[str, str]:
    """Generate a keypair; the secret is the 64-byte seed-and-public-key form."""
    signing_key = SigningKey.generate()
    public = bytes(signing_key.verify_key)
    return {
        "pubkey": b58encode(public),
        "secret": b58encode(bytes(signing_key) + public),
    }