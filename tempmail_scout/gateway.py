"""Model gateway for the Generative Language REST API.

Two calls are exposed:

- ``fetch_apis()``: asks the list model for a catalog of temp-mail APIs.
- ``generate_code(api, language)``: asks the code model for an integration sample.

Both calls constrain the reply with a JSON response schema and validate the
decoded JSON with the pydantic models before handing it back. Transport and
parse failures never escape: discovery degrades to an empty list, synthesis to
``fallback_sample(language)``.

Usage:
    async with ModelGateway(api_key=settings.require_api_key()) as gw:
        apis = await gw.fetch_apis()
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError

from .config import API_LIST_MODEL, CODE_GEN_MODEL, DEFAULT_BASE_URL, ConfigError, Settings
from .models import ApiDescriptor, CodeSample, Language
from .prompts import CODE_SCHEMA, DISCOVERY_PROMPT, DISCOVERY_SCHEMA, build_code_prompt

logger = logging.getLogger(__name__)

FALLBACK_CODE = "// Error generating code. Please try again."
FALLBACK_EXPLANATION = "Gemini encountered an error."


class GatewayError(RuntimeError):
    """Empty or malformed reply from the model."""


def fallback_sample(language: Union[Language, str]) -> CodeSample:
    lang = language.value if isinstance(language, Language) else str(language)
    return CodeSample(language=lang, code=FALLBACK_CODE, explanation=FALLBACK_EXPLANATION)


def _coerce_language(language: Union[Language, str]) -> Language:
    try:
        return Language(language)
    except ValueError:
        allowed = ", ".join(l.value for l in Language)
        raise ValueError(f"Unsupported language {language!r}; expected one of: {allowed}")


def _extract_text(payload: Dict[str, Any]) -> str:
    """Join the text parts of the first candidate."""
    candidates = payload.get("candidates") or []
    if not candidates:
        feedback = payload.get("promptFeedback")
        raise GatewayError(f"No candidates in model reply (promptFeedback={feedback})")
    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
    if not text.strip():
        raise GatewayError("Model reply contained no text")
    return text


def parse_descriptors(raw: Any) -> List[ApiDescriptor]:
    """Validate a decoded discovery reply item by item, keeping source order."""
    if not isinstance(raw, list):
        raise GatewayError(f"Expected a JSON array of APIs, got {type(raw).__name__}")
    apis: List[ApiDescriptor] = []
    for idx, item in enumerate(raw):
        try:
            apis.append(ApiDescriptor.model_validate(item))
        except ValidationError as e:
            logger.warning("Dropping catalog entry %d: %s", idx, e.errors(include_url=False))
    return apis


class ModelGateway:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        list_model: str = API_LIST_MODEL,
        code_model: str = CODE_GEN_MODEL,
        timeout: float = 60.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if not api_key:
            raise ConfigError("ModelGateway requires an API key")
        self.base_url = base_url.rstrip("/")
        self.list_model = list_model
        self.code_model = code_model
        self._headers = {"Content-Type": "application/json", "x-goog-api-key": api_key}
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[httpx.AsyncClient] = None) -> "ModelGateway":
        return cls(
            api_key=settings.require_api_key(),
            base_url=settings.GEMINI_BASE_URL,
            list_model=settings.API_LIST_MODEL,
            code_model=settings.CODE_GEN_MODEL,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            client=client,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ModelGateway":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    def endpoint(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent"

    async def _generate_json(self, model: str, prompt: str, schema: Dict[str, Any]) -> Any:
        body = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": schema,
            },
        }
        resp = await self._client.post(self.endpoint(model), json=body, headers=self._headers)
        resp.raise_for_status()
        text = _extract_text(resp.json())
        return json.loads(text)

    async def fetch_apis(self) -> List[ApiDescriptor]:
        """Run the discovery call. Returns [] on any failure."""
        try:
            raw = await self._generate_json(self.list_model, DISCOVERY_PROMPT, DISCOVERY_SCHEMA)
            apis = parse_descriptors(raw)
        except (httpx.HTTPError, json.JSONDecodeError, GatewayError) as e:
            logger.error("Failed to fetch API list: %s", e)
            return []
        except Exception:
            logger.exception("Unexpected error while fetching API list")
            return []
        logger.info("Discovered %d APIs with %s", len(apis), self.list_model)
        return apis

    async def generate_code(self, api: ApiDescriptor, language: Union[Language, str]) -> CodeSample:
        """Run the synthesis call. Returns ``fallback_sample(language)`` on any failure."""
        lang = _coerce_language(language)
        prompt = build_code_prompt(api, lang)
        try:
            raw = await self._generate_json(self.code_model, prompt, CODE_SCHEMA)
            sample = CodeSample.model_validate(raw)
        except (httpx.HTTPError, json.JSONDecodeError, ValidationError, GatewayError) as e:
            logger.error("Failed to generate %s code for %s: %s", lang.value, api.name, e)
            return fallback_sample(lang)
        except Exception:
            logger.exception("Unexpected error while generating %s code for %s", lang.value, api.name)
            return fallback_sample(lang)
        return sample
