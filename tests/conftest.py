import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path for direct pytest runs
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from nominatim_client import Client, IdentificationMethod  # noqa: E402


@pytest.fixture
def client():
    c = Client(IdentificationMethod.from_user_agent("nominatim-client-tests/1.0"))
    yield c
    c.close()
