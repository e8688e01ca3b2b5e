# tests/conftest.py
import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import init_db
from dependencies import verify_token
from main import create_app
from models import Base
from services import RecordStore
from utils.email import EmailDeliveryError


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def store(session_factory):
    return RecordStore(session_factory)


class FakeBlobStore:
    def __init__(self):
        self.blobs = {}
        self.deleted = []

    def upload(self, path, data, content_type="application/octet-stream"):
        self.blobs[path] = (data, content_type)
        return f"https://blobs.test/{path}"

    def delete(self, path):
        self.blobs.pop(path, None)
        self.deleted.append(path)


class FakeMailer:
    def __init__(self):
        self.sent = []
        self.fail_with = None

    def __call__(self, to_email, tenant_name, amount, due_date, property_label):
        if self.fail_with:
            raise EmailDeliveryError(self.fail_with)
        self.sent.append(
            {"to": to_email, "name": tenant_name, "amount": amount, "due": due_date, "property": property_label}
        )


class FakeAnthropic:
    """Stands in for anthropic.Anthropic: returns ``reply`` as the message text."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []
        self.messages = SimpleNamespace(create=self._create)

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(content=[SimpleNamespace(text=self.reply)])


@pytest.fixture
def blob_store():
    return FakeBlobStore()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def analysis_client():
    return FakeAnthropic(
        reply=json.dumps({
            "estimatedRent": 1150,
            "marketTrends": "Demande soutenue à Ixelles.",
            "comparableProperties": "2 chambres, 80 m², 1100-1200 €",
        })
    )


@pytest.fixture
def app(store, blob_store, mailer, analysis_client):
    app = create_app(store=store, blob_store=blob_store, mailer=mailer, analysis_client=analysis_client)
    app.dependency_overrides[verify_token] = lambda: {"id": 1, "role": "admin"}
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
