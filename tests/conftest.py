import os
import time

import jwt
import pytest

# Set test environment variables before importing the app
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault(
    "SERVICE_AUTH_SECRET", "test-secret-key-that-is-long-enough-for-hs256"
)
os.environ["TASKBOARD_STORAGE"] = "memory"

from fastapi.testclient import TestClient

from taskboard.api_app import create_fastapi_app
from taskboard.config.settings import Config
from taskboard.infrastructure.persistence import InMemoryTaskStore
from taskboard.setup.ioc.container import InMemoryPersistenceProvider, create_container

OWNER = "owner@example.com"
INTRUDER = "intruder@example.com"


def service_token(email=OWNER, **overrides):
    now = int(time.time())
    claims = {
        "sub": email,
        "email": email,
        "iat": now,
        "exp": now + 300,
        "iss": Config.SERVICE_AUTH_ISSUER,
        "aud": Config.SERVICE_AUTH_AUDIENCE,
    }
    claims.update(overrides)
    return jwt.encode(claims, Config.SERVICE_AUTH_SECRET, algorithm="HS256")


@pytest.fixture()
def store():
    return InMemoryTaskStore()


@pytest.fixture()
def container(store):
    return create_container(InMemoryPersistenceProvider(store))


@pytest.fixture()
def app(container):
    """A fresh FastAPI app (and task store) for each test."""
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    # Unhandled errors must come back as 500 responses, not test exceptions
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def auth_headers():
    return {"Authorization": f"Bearer {service_token(OWNER)}"}


@pytest.fixture()
def intruder_headers():
    return {"Authorization": f"Bearer {service_token(INTRUDER)}"}
