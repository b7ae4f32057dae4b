from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

from ventech_api.common.config import Settings
from ventech_api.common.dependencies import get_email_client
from ventech_api.common.utils.email_service import EmailSendResult
from ventech_api.main import create_app

INDEX_HTML = "<!doctype html><html><body><div id=\"root\"></div></body></html>"


class FakeEmailClient:
    """Stands in for ResendEmailClient and records every send."""

    def __init__(self, results: Optional[List[EmailSendResult]] = None, error: Optional[Exception] = None):
        self.results = list(results or [])
        self.error = error
        self.sent: List[dict] = []

    async def send(self, sender, to, subject, html) -> EmailSendResult:
        self.sent.append({"from": sender, "to": to, "subject": subject, "html": html})
        if self.error is not None:
            raise self.error
        if self.results:
            return self.results.pop(0)
        return EmailSendResult(id=f"email_{len(self.sent)}")


@pytest.fixture()
def spa_dist(tmp_path: Path) -> Path:
    dist = tmp_path / "spa"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text(INDEX_HTML)
    (dist / "assets" / "app.js").write_text("console.log('app');")
    (tmp_path / "secret.txt").write_text("top secret")
    return dist


@pytest.fixture()
def make_settings(spa_dist: Path) -> Callable[..., Settings]:
    def _make(**overrides) -> Settings:
        values = {
            "RESEND_API_KEY": "re_test_key",
            "SPA_DIST_PATH": spa_dist,
            "PING_MESSAGE": "ping",
        }
        values.update(overrides)
        return Settings(**values)
    return _make


@pytest.fixture()
def email_client() -> FakeEmailClient:
    return FakeEmailClient()


@pytest.fixture()
def make_client(make_settings, email_client) -> Generator[Callable[..., TestClient], None, None]:
    """Build a TestClient for an app created with the given settings overrides."""
    clients: List[TestClient] = []

    def _make(fake: Optional[FakeEmailClient] = None, **overrides) -> TestClient:
        app = create_app(make_settings(**overrides))
        fake_client = fake or email_client
        app.dependency_overrides[get_email_client] = lambda: fake_client
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture()
def api_client(make_client) -> TestClient:
    return make_client()
