"""Bridge between Streamlit's synchronous script runs and the async gateway.

A fresh gateway (and HTTP client) is opened per action so no connection pool
outlives the event loop that created it.
"""
import asyncio
from typing import Awaitable, Callable, List, Optional, TypeVar

from ..catalog import CatalogStore
from ..config import Settings
from ..detail import DetailSession
from ..gateway import ModelGateway
from ..models import ApiDescriptor, CodeSample

T = TypeVar("T")


def run_with_gateway(settings: Settings, action: Callable[[ModelGateway], Awaitable[T]]) -> T:
    async def _run() -> T:
        async with ModelGateway.from_settings(settings) as gateway:
            return await action(gateway)
    return asyncio.run(_run())


def refresh_catalog(store: CatalogStore, settings: Settings) -> List[ApiDescriptor]:
    return run_with_gateway(settings, store.refresh)


def load_code(session: DetailSession, settings: Settings) -> Optional[CodeSample]:
    return run_with_gateway(settings, session.load_code)
