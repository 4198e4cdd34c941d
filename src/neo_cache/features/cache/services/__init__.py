"""Cache services - orchestration and load coalescing."""

from .cache_orchestrator import (
    CacheOrchestrator,
    CacheTier,
    LoadResult,
    create_cache_orchestrator,
)
from .single_flight import SingleFlight

__all__ = [
    "CacheOrchestrator",
    "CacheTier",
    "LoadResult",
    "create_cache_orchestrator",
    "SingleFlight",
]
