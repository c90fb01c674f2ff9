"""State for the detail overlay.

Each open/select/close bumps ``generation``. A synthesis request remembers the
generation it started under and its result is only applied if nothing changed
while it was in flight.
"""
import logging
from enum import Enum
from typing import List, Optional, Union

from .models import ApiDescriptor, CodeSample, Language, LANGUAGES, LatencyPoint
from .stats import generate_mock_stats

logger = logging.getLogger(__name__)


class CodeStatus(str, Enum):
    IDLE = "idle"
    LOADING = "code-loading"
    READY = "code-ready"


class DetailSession:
    def __init__(self):
        self.api: Optional[ApiDescriptor] = None
        self.language: Language = LANGUAGES[0]
        self.sample: Optional[CodeSample] = None
        self.code_status = CodeStatus.IDLE
        self.stats: List[LatencyPoint] = []
        self.generation = 0

    @property
    def is_open(self) -> bool:
        return self.api is not None

    def _bump(self) -> int:
        self.generation += 1
        return self.generation

    def open(self, api: ApiDescriptor, stats_seed: Optional[int] = None) -> None:
        self._bump()
        self.api = api
        self.language = LANGUAGES[0]
        self.sample = None
        self.code_status = CodeStatus.IDLE
        self.stats = generate_mock_stats(seed=stats_seed)

    def close(self) -> None:
        if not self.is_open:
            return
        self._bump()
        self.api = None
        self.sample = None
        self.code_status = CodeStatus.IDLE
        self.stats = []

    def select_language(self, language: Union[Language, str]) -> bool:
        """Switch language; returns True if this changed the selection."""
        language = Language(language)
        if language == self.language:
            return False
        self._bump()
        self.language = language
        self.sample = None
        self.code_status = CodeStatus.IDLE
        return True

    @property
    def needs_code(self) -> bool:
        return self.is_open and self.code_status == CodeStatus.IDLE

    async def load_code(self, gateway) -> Optional[CodeSample]:
        """Request a sample for the current (api, language) and apply it unless superseded."""
        if not self.is_open:
            return None
        token = self.generation
        api, language = self.api, self.language
        self.code_status = CodeStatus.LOADING
        sample = await gateway.generate_code(api, language)
        if token != self.generation:
            logger.debug("Discarding stale %s sample for %s (generation %d != %d)",
                         language.value, api.name, token, self.generation)
            return None
        self.sample = sample
        self.code_status = CodeStatus.READY
        return sample
