# superdevs

superdevs is a small JSON-over-HTTP server for Solana tooling. It can do the
following:

- generate ed25519 keypairs;
- sign and verify text messages;
- build System Program and SPL Token instructions.

Each instruction is returned with its program id, its accounts and its data in
base64. Everything is computed locally, and the server never contacts the
network.

## Installation

```
pip install .
```

## Running the server

```
superdevs
```

The command reads its settings from the environment. It also loads a `.env`
file if one is present.

| Variable       | Default     |
|----------------|-------------|
| `PORT`         | `8080`      |
| `BIND_ADDRESS` | `127.0.0.1` |

An invalid `PORT` value stops the command with an error.

Cross-origin requests are allowed from any origin:

- The request's `Origin` is echoed back in `Access-Control-Allow-Origin`.
- Preflight requests get the requested method and headers back, with a max age
  of 3600 seconds.

## Endpoints

| Method | Path              | JSON body fields                             |
|--------|-------------------|----------------------------------------------|
| GET    | `/health`         | none                                         |
| POST   | `/keypair`        | none                                         |
| POST   | `/token/create`   | `mintAuthority`, `mint`, `decimals`          |
| POST   | `/token/mint`     | `mint`, `destination`, `authority`, `amount` |
| POST   | `/message/sign`   | `message`, `secret`                          |
| POST   | `/message/verify` | `message`, `pubkey`, `signature`             |
| POST   | `/send/sol`       | `from`, `to`, `lamports`                     |
| POST   | `/send/token`     | `destination`, `mint`, `owner`, `amount`     |

### Responses

A successful call returns HTTP 200 with this body:

```
{"success": true, "data": ...}
```

If the input is rejected, the server returns HTTP 400 with this body:

```
{"success": false, "error": "..."}
```

Input is rejected in these cases:

- A field is empty or zero.
- Two addresses that must differ are the same.
- An address is not valid base58.
- A key has the wrong length.

The error text starts with `Invalid input:`.

Some request bodies cannot be read at all:

- the body is not JSON;
- a field is missing;
- a field has the wrong type.

For these the server returns HTTP 400 with a plain-text message instead of a
JSON body.

### Request formats

- Addresses, public keys and secret keys are base58 text.
- A secret key is the 64-byte keypair: the 32-byte seed followed by the 32-byte
  public key.
- Message signatures are base64.
- `decimals` must fit in one unsigned byte.
- `amount` and `lamports` must fit in an unsigned 64-bit integer.
- `decimals`, `amount` and `lamports` are rejected when they are zero.

### Response formats

`/send/sol` lists its accounts as address strings.

`/token/create` and `/token/mint` list each account as an object with these
fields:

- `pubkey`, an address string;
- `is_signer`;
- `is_writable`.

`/send/token` lists each account as an object with the same fields, but its
`pubkey` is a list of the key's 32 byte values. This endpoint transfers between
two associated token accounts:

- the owner's associated token account for the mint;
- the destination's associated token account for the mint.

## Using it as a library

The handlers behind the endpoints are plain functions that you can call
directly. Each returns the `data` part of a response.

```python
from superdevs.keypair import create_new_keypair
from superdevs.message import sign_message, verify_message

keys = create_new_keypair()
signed = sign_message("hello", keys["secret"])
result = verify_message("hello", keys["pubkey"], signed["signature"])
assert result["valid"]
```

| Module                | What it provides |
|-----------------------|------------------|
| `superdevs.keypair`   | `create_new_keypair()` |
| `superdevs.message`   | `sign_message(message, secret)`, `verify_message(message, pubkey, signature)` |
| `superdevs.token`     | `create_token_mint_instruction(mint_authority, mint, decimals)`, `create_mint_to_instruction(mint, destination, authority, amount)` |
| `superdevs.send`      | `create_sol_transfer_instruction(from_address, to_address, lamports)`, `create_token_transfer_instruction(destination, mint, owner, amount)` |
| `superdevs.pubkey`    | `Pubkey`, `b58encode`, `b58decode`, `parse_pubkey`, `is_on_curve`, `find_program_address`, `get_associated_token_address` |
| `superdevs.instruction` | `AccountMeta`, `Instruction`, `system_transfer`, `token_transfer`, `token_mint_to`, `token_initialize_mint` |
| `superdevs.response`  | `success_response(data)`, `error_response(message)` |

The handlers raise errors from `superdevs.errors` when they reject input:

- `InvalidInput` for bad requests;
- `TokenError` when a token instruction cannot be built;
- `Base58DecodeError` for characters outside the base58 alphabet.

All of these are subclasses of `ServerError`. The text of an error is the
message that the HTTP API returns.

To embed the server in another WSGI host, call `superdevs.app.create_app()`,
which returns a Flask application.

## What it does not do

The server only builds instructions and signatures. It does not do any of the
following:

- assemble or sign transactions;
- send anything to a cluster;
- look up balances or account state;
- keep any keys it generates.

## Tests

```
pip install .[test]
pytest
```