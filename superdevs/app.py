"""The HTTP application and the command that serves it."""

from __future__ import annotations

import argparse
import logging
import os
import re
from collections.abc import Callable
from typing import Any

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request

from .errors import ServerError
from .keypair import create_new_keypair
from .message import sign_message, verify_message
from .response import error_response, success_response
from .send import create_sol_transfer_instruction, create_token_transfer_instruction
from .token import create_mint_to_instruction, create_token_mint_instruction

logger = logging.getLogger("superdevs")

_STR = "str"
_U8 = "u8"
_U64 = "u64"
_INT_LIMITS = {_U8: 2**8, _U64: 2**64}
_LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 1,
}
_CORS_MAX_AGE = "3600"


class _RequestError(Exception):
    """The request body could not be read as the expected JSON object."""


def _read_fields(spec: dict[str, str]) -> dict[str, Any]:
    if not request.is_json:
        raise _RequestError("Content type error")
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise _RequestError("Json deserialize error: expected a JSON object")
    values = {}
    for name, kind in spec.items():
        if name not in body:
            raise _RequestError(f"Json deserialize error: missing field `{name}`")
        value = body[name]
        if kind == _STR:
            valid = isinstance(value, str)
        else:
            valid = (
                isinstance(value, int)
                and not isinstance(value, bool)
                and 0 <= value < _INT_LIMITS[kind]
            )
        if not valid:
            raise _RequestError(f"Json deserialize error: invalid value for `{name}`, expected {kind}")
        values[name] = value
    return values


def _respond(build: Callable[..., Any], *args: Any) -> tuple[Response, int]:
    try:
        data = build(*args)
    except ServerError as exc:
        return jsonify(error_response(str(exc))), 400
    return jsonify(success_response(data)), 200


def create_app() -> Flask:
    """Build the application with every route and permissive CORS."""
    app = Flask(__name__)

    @app.errorhandler(_RequestError)
    def _bad_request(exc: _RequestError) -> tuple[str, int, dict[str, str]]:
        return str(exc), 400, {"Content-Type": "text/plain; charset=utf-8"}

    @app.after_request
    def _cors(response: Response) -> Response:
        origin = request.headers.get("Origin")
        if not origin:
            return response
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers.add("Vary", "Origin")
        wanted_method = request.headers.get("Access-Control-Request-Method")
        if request.method == "OPTIONS" and wanted_method:
            response.headers["Access-Control-Allow-Methods"] = wanted_method
            wanted_headers = request.headers.get("Access-Control-Request-Headers")
            if wanted_headers:
                response.headers["Access-Control-Allow-Headers"] = wanted_headers
            response.headers["Access-Control-Max-Age"] = _CORS_MAX_AGE
        return response

    @app.get("/health")
    def health() -> tuple[Response, int]:
        return jsonify(success_response("Solana HTTP Server is running")), 200

    @app.post("/keypair")
    def keypair() -> tuple[Response, int]:
        return _respond(create_new_keypair)

    @app.post("/token/create")
    def token_create() -> tuple[Response, int]:
        fields = _read_fields({"mintAuthority": _STR, "mint": _STR, "decimals": _U8})
        return _respond(
            create_token_mint_instruction,
            fields["mintAuthority"],
            fields["mint"],
            fields["decimals"],
        )

    @app.post("/token/mint")
    def token_mint() -> tuple[Response, int]:
        fields = _read_fields(
            {"mint": _STR, "destination": _STR, "authority": _STR, "amount": _U64}
        )
        return _respond(
            create_mint_to_instruction,
            fields["mint"],
            fields["destination"],
            fields["authority"],
            fields["amount"],
        )

    @app.post("/message/sign")
    def message_sign() -> tuple[Response, int]:
        fields = _read_fields({"message": _STR, "secret": _STR})
        return _respond(sign_message, fields["message"], fields["secret"])

    @app.post("/message/verify")
    def message_verify() -> tuple[Response, int]:
        fields = _read_fields({"message": _STR, "pubkey": _STR, "signature": _STR})
        return _respond(verify_message, fields["message"], fields["pubkey"], fields["signature"])

    @app.post("/send/sol")
    def send_sol() -> tuple[Response, int]:
        fields = _read_fields({"from": _STR, "to": _STR, "lamports": _U64})
        return _respond(
            create_sol_transfer_instruction, fields["from"], fields["to"], fields["lamports"]
        )

    @app.post("/send/token")
    def send_token() -> tuple[Response, int]:
        fields = _read_fields(
            {"destination": _STR, "mint": _STR, "owner": _STR, "amount": _U64}
        )
        return _respond(
            create_token_transfer_instruction,
            fields["destination"],
            fields["mint"],
            fields["owner"],
            fields["amount"],
        )

    return app


def _parse_port(text: str) -> int:
    if not re.fullmatch(r"\+?[0-9]+", text) or int(text) > 0xFFFF:
        raise ValueError(f"invalid port: {text!r}")
    return int(text)


def _log_level(spec: str) -> int:
    return _LOG_LEVELS.get(spec.strip().lower(), logging.INFO)


def main(argv: list[str] | None = None) -> None:
    """Serve the application on BIND_ADDRESS and PORT from the environment."""
    parser = argparse.ArgumentParser(
        prog="superdevs",
        description="HTTP server for keypairs, messages and transaction instructions.",
    )
    parser.parse_args(argv)
    load_dotenv()
    logging.basicConfig(
        level=_log_level(os.environ.get("RUST_LOG", "info")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    port = _parse_port(os.environ.get("PORT", "8080"))
    host = os.environ.get("BIND_ADDRESS", "127.0.0.1")
    logger.info("Starting server at http://%s:%s", host, port)
    create_app().run(host=host, port=port)