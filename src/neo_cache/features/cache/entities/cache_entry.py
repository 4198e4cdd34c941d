"""Cache entry entity."""

import time
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

V = TypeVar('V')


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    """A value held by a cache tier.
    
    Local and remote tiers keep independent populations of entries for the
    same key space; they are not required to agree at any instant.
    """
    
    key: Any
    value: V
    stored_at: float = field(default_factory=time.time)
    
    def age(self, now: Optional[float] = None) -> float:
        """Seconds since the entry was stored."""
        current = time.time() if now is None else now
        return max(0.0, current - self.stored_at)
    
    def is_expired(self, ttl_seconds: Optional[int], now: Optional[float] = None) -> bool:
        """Check expiry against a TTL, None meaning never."""
        if ttl_seconds is None:
            return False
        return self.age(now) >= ttl_seconds
