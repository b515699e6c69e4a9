"""HTTP server for ed25519 keypairs, message signing and Solana instruction building."""

__version__ = "0.1.0"