import json
from pathlib import Path

import pytest
from onefuse_client.core.config import ConnectionContext

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def context():
    return ConnectionContext(
        scheme="https",
        host="onefuse.example.com",
        port=8443,
        username="admin",
        password="s3cret",
        verify_ssl=False,
    )


@pytest.fixture
def load_fixture():
    def _load(name: str) -> dict:
        with open(FIXTURES_DIR / name, encoding="utf-8") as f:
            return json.load(f)

    return _load
