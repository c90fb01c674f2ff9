import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional

from .models import ApiDescriptor, FilterState, FilterType

logger = logging.getLogger(__name__)


def matches_search(api: ApiDescriptor, search_term: str) -> bool:
    term = search_term.lower()
    return term in api.name.lower() or term in api.description.lower()


def matches_capability(api: ApiDescriptor, filter_type: FilterType) -> bool:
    if filter_type == FilterType.INBOX_ONLY:
        return api.has_inbox_access
    if filter_type == FilterType.ADDRESS_ONLY:
        return not api.has_inbox_access
    return True


def filter_apis(apis: Iterable[ApiDescriptor], search_term: str = "",
                filter_type: FilterType = FilterType.ALL) -> List[ApiDescriptor]:
    """Return the descriptors matching the search term and capability filter, in source order."""
    filter_type = FilterType(filter_type)
    return [api for api in apis
            if matches_search(api, search_term) and matches_capability(api, filter_type)]


class CatalogStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"


class CatalogStore:
    """In-memory catalog, replaced wholesale on every refresh."""

    def __init__(self, apis: Optional[Iterable[ApiDescriptor]] = None):
        self._apis: List[ApiDescriptor] = list(apis or [])
        self.status = CatalogStatus.LOADED if self._apis else CatalogStatus.EMPTY

    @property
    def apis(self) -> List[ApiDescriptor]:
        return list(self._apis)

    def __len__(self) -> int:
        return len(self._apis)

    def replace(self, apis: Iterable[ApiDescriptor]) -> None:
        self._apis = list(apis)
        self.status = CatalogStatus.LOADED if self._apis else CatalogStatus.EMPTY

    async def refresh(self, gateway) -> List[ApiDescriptor]:
        self.status = CatalogStatus.LOADING
        apis = await gateway.fetch_apis()
        self.replace(apis)
        logger.info("Catalog refreshed: %d APIs (%s)", len(self._apis), self.status.value)
        return self.apis

    def view(self, state: Optional[FilterState] = None) -> List[ApiDescriptor]:
        state = state or FilterState()
        return filter_apis(self._apis, state.search_term, state.filter_type)

    def summary(self) -> Dict[str, int]:
        inbox = sum(1 for api in self._apis if api.has_inbox_access)
        return {"total": len(self._apis), "inbox": inbox, "address_only": len(self._apis) - inbox}
