"""Global test configuration and fixtures."""
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Add project root to Python path for imports
sys.path.insert(0, str(PROJECT_ROOT))

from telnyx_storage import TelnyxStorageClient  # noqa: E402
from tests.common.fake_storage import FakeStorageTransport  # noqa: E402

TEST_API_KEY = "test-api-key"


@pytest.fixture
def fake_storage():
    """In-memory storage provider."""
    return FakeStorageTransport()


@pytest.fixture
def client(fake_storage):
    """Client wired to the in-memory provider."""
    return TelnyxStorageClient.from_api_key(TEST_API_KEY, transport=fake_storage)
