import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("GUARD_SECRET", "Secret")

from guesser.core.deps import SerializedGuard, get_guard
from guesser.core.guard import CredentialGuard
from guesser.core.rate_limit import rate_limiter
from guesser.main import app


@pytest.fixture
def guard():
    return SerializedGuard(CredentialGuard("Secret"))


@pytest.fixture
def client(guard):
    # свежий гвард и пустой лимитер на каждый тест
    rate_limiter.reset()
    app.dependency_overrides[get_guard] = lambda: guard
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    rate_limiter.reset()
