from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AuthType(str, Enum):
    NO_AUTH = "No Auth"
    API_KEY = "API Key"
    OAUTH = "OAuth"


class Language(str, Enum):
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    CURL = "curl"

    @property
    def label(self) -> str:
        return self.value.capitalize()


LANGUAGES: List[Language] = list(Language)


class FilterType(str, Enum):
    ALL = "all"
    INBOX_ONLY = "inbox"
    ADDRESS_ONLY = "address"


class ApiDescriptor(BaseModel):
    """One temporary-email service as described by the discovery call."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str
    website: str
    base_url: str
    description: str
    auth_type: AuthType
    supports_attachments: bool = False
    rate_limit: str = "Unknown"
    has_inbox_access: bool

    @property
    def is_https(self) -> bool:
        return self.base_url.lower().startswith("https")

    @property
    def capability_label(self) -> str:
        return "Inbox Supported" if self.has_inbox_access else "Address Gen Only"


class CodeSample(BaseModel):
    language: str
    code: str
    explanation: str


class FilterState(BaseModel):
    search_term: str = ""
    filter_type: FilterType = FilterType.ALL


class LatencyPoint(BaseModel):
    time: str
    latency: int = Field(ge=0)
    requests: int = Field(ge=0)
