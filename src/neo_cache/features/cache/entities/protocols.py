"""Cache protocols for neo-cache.

This module defines the collaborator contracts the cache orchestrator is
composed from: the durable backing store, the shared remote cache and the
codec that turns values into the remote cache's byte representation.
"""

from abc import abstractmethod
from enum import Enum
from typing import (
    Protocol,
    runtime_checkable,
    Optional,
    Callable,
    List,
    TypeVar,
    Union,
)

K = TypeVar('K')  # Key type
V = TypeVar('V')  # Value type


class CacheBackend(str, Enum):
    """Supported remote cache backend types."""
    MEMORY = "memory"
    REDIS = "redis"


@runtime_checkable
class Store(Protocol[K, V]):
    """Durable source of truth, keyed by entity identifier.
    
    Implementations do no caching of their own. Missing keys are reported
    with ``EntityNotFoundError`` on update/delete and with ``None`` on get;
    any other failure is raised as ``StoreUnavailableError``.
    """
    
    @abstractmethod
    async def get(self, key: K) -> Optional[V]:
        """Get entity by key, None if absent."""
        ...
    
    @abstractmethod
    async def create(self, value: V) -> K:
        """Persist a new entity and return its assigned key."""
        ...
    
    @abstractmethod
    async def update(self, key: K, value: V) -> None:
        """Replace the entity stored under key."""
        ...
    
    @abstractmethod
    async def delete(self, key: K) -> None:
        """Delete the entity stored under key."""
        ...
    
    @abstractmethod
    async def list(
        self,
        predicate: Optional[Callable[[V], bool]] = None,
        offset: int = 0,
        limit: int = 100
    ) -> List[V]:
        """List entities matching predicate, ordered by key."""
        ...


@runtime_checkable
class RemoteCache(Protocol):
    """Shared key to bytes map reachable over the network.
    
    May be slow or unavailable; failures are raised as ``CacheError``
    subclasses and are never fatal to a cache read.
    """
    
    @abstractmethod
    async def get(self, key: str) -> Optional[bytes]:
        """Get raw bytes for key, None on miss."""
        ...
    
    @abstractmethod
    async def set(self, key: str, value: bytes, ttl: Optional[int] = None) -> bool:
        """Store raw bytes under key with optional TTL in seconds."""
        ...
    
    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete key, True if it existed."""
        ...


@runtime_checkable
class EntryCodec(Protocol[V]):
    """Converts values to and from the remote cache byte representation."""
    
    @abstractmethod
    def encode(self, value: V) -> bytes:
        """Encode value to bytes."""
        ...
    
    @abstractmethod
    def decode(self, data: Union[bytes, str]) -> V:
        """Decode bytes to value, raising CacheDecodeError on malformed input."""
        ...
