"""
Shared fixtures: a throwaway RSA service account and a fake Google API.

Nothing here touches the network. The fake API is an httpx.MockTransport that
answers the OAuth token endpoint and Gmail's messages.send endpoint and
records every request it sees.
"""

import os

# Keep the CLI side effects out of the test run
os.environ.setdefault("OPEN_BROWSER", "false")
os.environ.setdefault("SEND_LIFECYCLE_EMAILS", "false")

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from mailer_demo import config

TOKEN_URI = "https://oauth2.googleapis.com/token"
SEND_URL = "https://gmail.googleapis.com/gmail/v1/users/me/messages/send"


@pytest.fixture(autouse=True)
def history_in_tmp(tmp_path, monkeypatch):
    """Keep server history writes out of the working directory."""
    monkeypatch.setattr(config, "SERVER_HISTORY_PATH", tmp_path / "history" / "ServerHistory.csv")


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def service_account(rsa_key) -> dict:
    """Minimal service account JSON, shaped like the file Google hands out."""
    private_pem = rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    return {
        "type": "service_account",
        "project_id": "demo-project",
        "private_key_id": "key-123",
        "private_key": private_pem,
        "client_email": "mailer@demo-project.iam.gserviceaccount.com",
        "token_uri": TOKEN_URI,
    }


class FakeGoogleApi:
    """
    Scriptable stand-in for the token endpoint and Gmail messages.send.

    Set ``token_response`` / ``send_response`` to a (status_code, json_body)
    pair, or to an exception instance to raise, to change what the next calls
    see. A fresh httpx.Response is built for every request.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.token_response = (200, {"access_token": "ya29.test-token", "expires_in": 3600})
        self.send_response = (
            200,
            {"id": "18f0c2d4a1b2c3d4", "threadId": "18f0c2d4a1b2c3d4", "labelIds": ["SENT"]},
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url == TOKEN_URI:
            planned = self.token_response
        elif url == SEND_URL:
            planned = self.send_response
        else:
            return httpx.Response(404, json={"error": {"message": f"unexpected URL {url}"}})
        if isinstance(planned, Exception):
            raise planned
        status_code, body = planned
        return httpx.Response(status_code, json=body)

    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url) == TOKEN_URI]

    def send_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url) == SEND_URL]


@pytest.fixture()
def google_api() -> FakeGoogleApi:
    return FakeGoogleApi()


@pytest.fixture()
def http_client(google_api):
    return httpx.AsyncClient(transport=httpx.MockTransport(google_api.handler))
