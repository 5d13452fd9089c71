"""Localization package: the plural-aware lookup orchestrator.

Provides the Localization entry point together with the loading
infrastructure used to build one from an external data reader.

Submodules:
    loading      - DataLoader protocol, MappingDataLoader, FallbackInfo,
                   DataLoadResult, LoadSummary
    orchestrator - Localization (scalar and plural lookups with fallback)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from locatext.enums import LoadStatus
from locatext.localization.loading import (
    DataLoader,
    DataLoadResult,
    FallbackInfo,
    LoadSummary,
    MappingDataLoader,
)
from locatext.localization.orchestrator import Localization

__all__ = [
    # Main orchestrator
    "Localization",
    # Loader protocol and implementations
    "DataLoader",
    "MappingDataLoader",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "DataLoadResult",
    # Fallback observability
    "FallbackInfo",
]
