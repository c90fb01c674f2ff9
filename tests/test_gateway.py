import asyncio
import json

import httpx
import pytest

from tempmail_scout.config import ConfigError
from tempmail_scout.gateway import (FALLBACK_CODE, FALLBACK_EXPLANATION, ModelGateway, fallback_sample,
                                    parse_descriptors)
from tempmail_scout.models import AuthType, CodeSample, Language
from tempmail_scout.prompts import DISCOVERY_SCHEMA, CODE_SCHEMA, build_code_prompt


def _fetch_apis():
    async def go():
        async with ModelGateway(api_key="test-key") as gw:
            return await gw.fetch_apis()
    return asyncio.run(go())


def _generate(api, language):
    async def go():
        async with ModelGateway(api_key="test-key") as gw:
            return await gw.generate_code(api, language)
    return asyncio.run(go())


def test_gateway_requires_key():
    with pytest.raises(ConfigError):
        ModelGateway(api_key="")


def test_fetch_apis_parses_schema_reply(respx_mock, list_url, reply, raw_apis):
    route = respx_mock.post(list_url).respond(200, json=reply(raw_apis))
    apis = _fetch_apis()

    assert [a.name for a in apis] == ["Mail.tm", "Guerrilla Mail"]
    assert apis[0].auth_type == AuthType.NO_AUTH
    assert apis[0].base_url == "https://api.mail.tm"
    assert apis[0].supports_attachments is True
    # optional fields fall back to defaults
    assert apis[1].supports_attachments is False

    request = route.calls.last.request
    assert request.headers["x-goog-api-key"] == "test-key"
    body = json.loads(request.content)
    assert body["generationConfig"]["responseMimeType"] == "application/json"
    assert body["generationConfig"]["responseSchema"] == DISCOVERY_SCHEMA
    assert "Temporary Email" in body["contents"][0]["parts"][0]["text"]


def test_fetch_apis_network_error_returns_empty(respx_mock, list_url):
    respx_mock.post(list_url).mock(side_effect=httpx.ConnectError("connection refused"))
    assert _fetch_apis() == []


def test_fetch_apis_http_error_returns_empty(respx_mock, list_url):
    respx_mock.post(list_url).respond(500, json={"error": {"message": "internal"}})
    assert _fetch_apis() == []


@pytest.mark.parametrize("payload", [
    {"candidates": []},
    {"candidates": [{"content": {"parts": [{"text": "   "}]}}]},
    {"candidates": [{"content": {"parts": [{"text": "not json at all"}]}}]},
    {"candidates": [{"content": {"parts": [{"text": "{\"name\": \"x\"}"}]}}]},
])
def test_fetch_apis_bad_replies_return_empty(respx_mock, list_url, payload):
    respx_mock.post(list_url).respond(200, json=payload)
    assert _fetch_apis() == []


def test_fetch_apis_drops_invalid_entries(respx_mock, list_url, reply, raw_apis):
    broken = {"name": "Broken", "website": "https://b.example"}
    bad_enum = dict(raw_apis[0], name="Weird", authType="Magic Link")
    respx_mock.post(list_url).respond(200, json=reply([broken, raw_apis[1], bad_enum, raw_apis[0]]))
    apis = _fetch_apis()
    assert [a.name for a in apis] == ["Guerrilla Mail", "Mail.tm"]


def test_parse_descriptors_rejects_non_array(raw_apis):
    from tempmail_scout.gateway import GatewayError
    with pytest.raises(GatewayError):
        parse_descriptors({"apis": raw_apis})


def test_generate_code_success(respx_mock, code_url, reply, sample_apis):
    payload = {"language": "python", "code": "import requests\n", "explanation": "Creates an account."}
    route = respx_mock.post(code_url).respond(200, json=reply(payload))

    sample = _generate(sample_apis[0], "python")
    assert sample == CodeSample(**payload)

    body = json.loads(route.calls.last.request.content)
    assert body["generationConfig"]["responseSchema"] == CODE_SCHEMA
    prompt = body["contents"][0]["parts"][0]["text"]
    assert "Mail.tm" in prompt
    assert "https://api.mail.tm" in prompt
    assert "Inbox Access: Yes" in prompt


def test_generate_code_failure_returns_placeholder(respx_mock, code_url, sample_apis):
    respx_mock.post(code_url).mock(side_effect=httpx.ReadTimeout("timed out"))
    sample = _generate(sample_apis[1], Language.CURL)
    assert sample.code == FALLBACK_CODE
    assert sample.explanation == FALLBACK_EXPLANATION
    assert sample.language == "curl"


def test_generate_code_schema_mismatch_returns_placeholder(respx_mock, code_url, reply, sample_apis):
    respx_mock.post(code_url).respond(200, json=reply({"language": "python"}))
    assert _generate(sample_apis[0], "python") == fallback_sample("python")


def test_generate_code_rejects_unknown_language(sample_apis):
    with pytest.raises(ValueError):
        _generate(sample_apis[0], "cobol")


def test_code_prompt_for_address_only_api(sample_apis):
    prompt = build_code_prompt(sample_apis[1], Language.JAVASCRIPT)
    assert "Inbox Access: No" in prompt
    assert "does not support inbox retrieval" in prompt
    assert "using javascript" in prompt


def test_from_settings_uses_configured_models(api_key_env, monkeypatch, respx_mock, reply):
    from tempmail_scout.config import load_settings

    monkeypatch.setenv("API_LIST_MODEL", "custom-list")
    monkeypatch.setenv("GEMINI_BASE_URL", "https://models.example/v1/")
    settings = load_settings()
    route = respx_mock.post("https://models.example/v1/models/custom-list:generateContent").respond(
        200, json=reply([]))

    async def go():
        async with ModelGateway.from_settings(settings) as gw:
            return await gw.fetch_apis()

    assert asyncio.run(go()) == []
    assert route.called
