import base64

import pytest

from superdevs.app import create_app, main
from superdevs.pubkey import SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID, Pubkey, b58decode

ALICE = str(Pubkey(bytes([4]) * 32))
BOB = str(Pubkey(bytes([5]) * 32))
MINT = str(Pubkey(bytes([6]) * 32))


@pytest.fixture
def client():
    return create_app().test_client()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"success": True, "data": "Solana HTTP Server is running"}


def test_keypair(client):
    response = client.post("/keypair")
    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    public = b58decode(body["data"]["pubkey"])
    full = b58decode(body["data"]["secret"])
    assert len(public) == 32
    assert len(full) == 64
    assert full[32:] == public


def test_sign_and_verify_round_trip(client):
    pair = client.post("/keypair").get_json()["data"]
    signed = client.post("/message/sign", json={"message": "hello", "secret": pair["secret"]})
    assert signed.status_code == 200
    data = signed.get_json()["data"]
    assert data["public_key"] == pair["pubkey"]
    verified = client.post(
        "/message/verify",
        json={"message": "hello", "pubkey": pair["pubkey"], "signature": data["signature"]},
    )
    assert verified.get_json()["data"] == {
        "valid": True,
        "message": "hello",
        "pubkey": pair["pubkey"],
    }
    tampered = client.post(
        "/message/verify",
        json={"message": "hellO", "pubkey": pair["pubkey"], "signature": data["signature"]},
    )
    assert tampered.get_json()["data"]["valid"] is False


def test_sign_missing_fields(client):
    response = client.post("/message/sign", json={"message": "", "secret": ""})
    assert response.status_code == 400
    assert response.get_json() == {
        "success": False,
        "error": "Invalid input: Missing required fields",
    }


def test_token_create_uses_camel_case_field(client):
    response = client.post(
        "/token/create", json={"mintAuthority": ALICE, "mint": MINT, "decimals": 6}
    )
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["program_id"] == str(TOKEN_PROGRAM_ID)
    assert data["accounts"][0]["pubkey"] == MINT


def test_token_mint(client):
    response = client.post(
        "/token/mint",
        json={"mint": MINT, "destination": BOB, "authority": ALICE, "amount": 10},
    )
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert [account["pubkey"] for account in data["accounts"]] == [MINT, BOB, ALICE]


def test_send_sol(client):
    response = client.post("/send/sol", json={"from": ALICE, "to": BOB, "lamports": 100})
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["program_id"] == str(SYSTEM_PROGRAM_ID)
    assert data["accounts"] == [ALICE, BOB]
    assert int.from_bytes(base64.b64decode(data["instruction_data"])[4:], "little") == 100


def test_send_token_error(client):
    response = client.post(
        "/send/token", json={"destination": ALICE, "mint": MINT, "owner": ALICE, "amount": 1}
    )
    assert response.status_code == 400
    assert response.get_json()["error"] == (
        "Invalid input: Destination and owner cannot be the same"
    )


def test_missing_json_field_is_rejected(client):
    response = client.post("/send/sol", json={"from": ALICE, "to": BOB})
    assert response.status_code == 400
    assert "lamports" in response.get_data(as_text=True)


def test_negative_amount_is_rejected(client):
    response = client.post("/send/sol", json={"from": ALICE, "to": BOB, "lamports": -1})
    assert response.status_code == 400
    assert response.get_json(silent=True) is None


def test_cors_echoes_origin(client):
    response = client.get("/health", headers={"Origin": "http://example.com"})
    assert response.headers["Access-Control-Allow-Origin"] == "http://example.com"


def test_cors_preflight(client):
    response = client.options(
        "/send/sol",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert response.headers["Access-Control-Allow-Methods"] == "POST"
    assert response.headers["Access-Control-Allow-Headers"] == "content-type"
    assert response.headers["Access-Control-Max-Age"] == "3600"


@pytest.mark.parametrize("port", ["notaport", "70000", "-1"])
def test_main_rejects_bad_port(monkeypatch, tmp_path, port):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PORT", port)
    with pytest.raises(ValueError, match="invalid port"):
        main([])