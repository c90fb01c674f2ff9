"""TempMail API Scout package

Expose the gateway, catalog helpers and settings so the Streamlit app and
tests can import them from one place.
"""
from .catalog import CatalogStore, filter_apis
from .config import ConfigError, Settings, load_settings
from .detail import DetailSession
from .gateway import ModelGateway, fallback_sample
from .models import ApiDescriptor, AuthType, CodeSample, FilterState, FilterType, Language

__all__ = [
    "ApiDescriptor",
    "AuthType",
    "CatalogStore",
    "CodeSample",
    "ConfigError",
    "DetailSession",
    "FilterState",
    "FilterType",
    "Language",
    "ModelGateway",
    "Settings",
    "fallback_sample",
    "filter_apis",
    "load_settings",
]
