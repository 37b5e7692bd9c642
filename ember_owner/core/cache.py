"""
Resolution caching.

Remembers what the resolver returned for each normalized name, including
names it could not resolve, so repeated lookups skip the resolver.
"""

from typing import Dict, Any, Optional, Set
import time

MISSING = object()


class ResolutionCache:
    """
    In-memory cache of resolved factories and known misses, with optional TTL.
    """
    
    def __init__(self, ttl: Optional[float] = None, enabled: bool = True):
        """
        Initialize cache.
        
        Args:
            ttl: Time to live in seconds (None for no expiration)
            enabled: When False nothing is stored and every get misses
        """
        self._hits: Dict[str, tuple[Any, float]] = {}
        self._misses: Dict[str, float] = {}
        self.ttl = ttl
        self.enabled = enabled
    
    def _expired(self, timestamp: float) -> bool:
        return bool(self.ttl) and (time.time() - timestamp) > self.ttl
    
    def get(self, key: str) -> Any:
        """
        Get a cached resolution.
        
        Args:
            key: Normalized full name
            
        Returns:
            Cached value, or MISSING if not cached or expired
        """
        if key not in self._hits:
            return MISSING
        
        value, timestamp = self._hits[key]
        if self._expired(timestamp):
            del self._hits[key]
            return MISSING
        
        return value
    
    def set(self, key: str, value: Any):
        """Cache a resolved value; it stops being a known miss."""
        if not self.enabled:
            return
        self._misses.pop(key, None)
        self._hits[key] = (value, time.time())
    
    def has(self, key: str) -> bool:
        """Check if key has a (non-expired) cached resolution."""
        return self.get(key) is not MISSING
    
    def is_miss(self, key: str) -> bool:
        """Check if key is a known (non-expired) miss."""
        timestamp = self._misses.get(key)
        if timestamp is None:
            return False
        if self._expired(timestamp):
            del self._misses[key]
            return False
        return True
    
    def add_miss(self, key: str):
        """Remember that key resolved to nothing."""
        if self.enabled:
            self._misses[key] = time.time()
    
    def discard(self, key: str):
        """Forget both the cached resolution and the miss for key."""
        self._hits.pop(key, None)
        self._misses.pop(key, None)
    
    def discard_miss(self, key: str):
        self._misses.pop(key, None)
    
    def misses(self) -> Set[str]:
        return {key for key in list(self._misses) if self.is_miss(key)}
    
    def clear(self):
        """Clear all cached values and misses."""
        self._hits.clear()
        self._misses.clear()
    
    def __len__(self) -> int:
        return len(self._hits)
