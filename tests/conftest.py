import json

import pytest
import respx

from tempmail_scout.config import DEFAULT_BASE_URL
from tempmail_scout.models import ApiDescriptor

LIST_URL = f"{DEFAULT_BASE_URL}/models/gemini-3-flash-preview:generateContent"
CODE_URL = f"{DEFAULT_BASE_URL}/models/gemini-3-pro-preview:generateContent"

RAW_APIS = [
    {
        "name": "Mail.tm",
        "website": "https://mail.tm",
        "baseUrl": "https://api.mail.tm",
        "description": "Free disposable email with a full REST API.",
        "authType": "No Auth",
        "supportsAttachments": True,
        "rateLimit": "8 req/s",
        "hasInboxAccess": True,
    },
    {
        "name": "Guerrilla Mail",
        "website": "https://www.guerrillamail.com",
        "baseUrl": "http://api.guerrillamail.com/ajax.php",
        "description": "Long-running throwaway address service.",
        "authType": "No Auth",
        "rateLimit": "Unknown",
        "hasInboxAccess": False,
    },
]


def gemini_reply(payload) -> dict:
    """Wrap a JSON-serialisable payload the way generateContent returns it."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


@pytest.fixture
def respx_mock():
    """Provide a respx mocker fixture for HTTPX mocking."""
    with respx.mock(assert_all_called=False) as m:
        yield m


@pytest.fixture
def sample_apis():
    return [ApiDescriptor.model_validate(item) for item in RAW_APIS]


@pytest.fixture
def api_key_env(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    for name in ("GEMINI_BASE_URL", "API_LIST_MODEL", "CODE_GEN_MODEL", "HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    return "test-key"


@pytest.fixture
def reply():
    return gemini_reply


@pytest.fixture
def list_url():
    return LIST_URL


@pytest.fixture
def code_url():
    return CODE_URL


@pytest.fixture
def raw_apis():
    return [dict(item) for item in RAW_APIS]
