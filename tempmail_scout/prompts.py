"""Prompt text and response schemas for the two model calls."""
from typing import Any, Dict

from .models import ApiDescriptor, AuthType, Language


DISCOVERY_PROMPT = """
Find 5 to 7 reliable, free, and currently usable Temporary Email (Disposable Email) APIs.
Focus on services that are popular among developers (e.g., 1secmail, Mail.tm, Guerrilla Mail, Temp-Mail.org, etc.).

For each API, determine:
1. Base URL and Auth requirements.
2. Whether it supports checking the inbox/retrieving messages programmatically ('hasInboxAccess': true) or if it only generates addresses/aliases ('hasInboxAccess': false).

Provide accurate details.
"""

DISCOVERY_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "name": {"type": "STRING"},
            "website": {"type": "STRING"},
            "baseUrl": {"type": "STRING"},
            "description": {"type": "STRING"},
            "authType": {"type": "STRING", "format": "enum", "enum": [a.value for a in AuthType]},
            "supportsAttachments": {"type": "BOOLEAN"},
            "rateLimit": {"type": "STRING"},
            "hasInboxAccess": {
                "type": "BOOLEAN",
                "description": "True if API allows reading emails, False if just address generation",
            },
        },
        "required": ["name", "website", "baseUrl", "description", "authType", "hasInboxAccess"],
    },
}

CODE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "language": {"type": "STRING"},
        "code": {"type": "STRING"},
        "explanation": {"type": "STRING"},
    },
    "required": ["language", "code", "explanation"],
}


def build_code_prompt(api: ApiDescriptor, language: Language) -> str:
    if api.has_inbox_access:
        second_step = "Check the inbox and retrieve the latest message."
    else:
        second_step = "Print the generated address (API does not support inbox retrieval)."
    return f"""
Generate a robust code example for the "{api.name}" API using {language.value}.
Base URL: {api.base_url}
Inbox Access: {"Yes" if api.has_inbox_access else "No"}

The code should demonstrate how to:
1. Generate a new email address.
2. {second_step}

Include comments explaining the steps.
"""
