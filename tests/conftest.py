import os
import sys
import pytest
from unittest.mock import patch, MagicMock, AsyncMock

# Add the project root directory to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

TEST_USER = "relay@example.com"
TEST_PASS = "app-secret-123"

def pytest_configure(config):
    """Add custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "api: API tests")

@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env and mail settings out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("EMAIL_USER", "EMAIL_PASS", "FALLBACK_CONTACT", "SMTP_HOST", "SMTP_PORT", "SMTP_TIMEOUT", "LOG_LEVEL", "LOG_FILE_PATH"):
        monkeypatch.delenv(name, raising=False)

@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("EMAIL_USER", TEST_USER)
    monkeypatch.setenv("EMAIL_PASS", TEST_PASS)
    return TEST_USER, TEST_PASS

@pytest.fixture
def mock_smtp():
    """Replace the aiosmtplib client with an in-memory mock.

    Yields the patched class; ``mock_smtp.return_value`` is the client the
    code under test talks to.
    """
    client = MagicMock()
    client.connect = AsyncMock()
    client.quit = AsyncMock()
    client.send_message = AsyncMock(return_value=({}, "250 OK"))
    client.close = MagicMock()
    with patch("app.email_service.aiosmtplib.SMTP", return_value=client) as smtp_cls:
        yield smtp_cls

@pytest.fixture
def valid_payload():
    return {
        "materialTitle": "Signal box photo",
        "materialDescription": "Line 1\nPlatform A",
        "materialType": "photo",
        "contactInfo": "a@b.com",
        "agreeTerms": True,
    }

@pytest.fixture
def sent_message(mock_smtp):
    """Return the last EmailMessage handed to the mocked client."""
    def _last():
        return mock_smtp.return_value.send_message.call_args.args[0]
    return _last
