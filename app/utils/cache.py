import threading
import time
from typing import Optional, Dict, Any, Iterable, Set
import logging

logger = logging.getLogger(__name__)

DEFAULT_TTL = 300

_memory_cache: Dict[str, Dict[str, Any]] = {}
_tag_index: Dict[str, Set[str]] = {}
_cache_lock = threading.Lock()

def get(key: str) -> Optional[Any]:
    """Get item from cache"""
    with _cache_lock:
        item = _memory_cache.get(key)
        if item is None:
            return None
        if item["expiry"] == 0 or time.time() < item["expiry"]:
            return item["value"]
        _drop(key)
        return None

def set(key: str, value: Any, ttl: Optional[int] = None, tags: Iterable[str] = ()) -> bool:
    """Store ``value`` under ``key``; ``ttl=0`` never expires."""
    if ttl is None:
        ttl = DEFAULT_TTL

    with _cache_lock:
        _drop(key)
        tags = frozenset(tags)
        _memory_cache[key] = {
            "value": value,
            "expiry": time.time() + ttl if ttl > 0 else 0,
            "tags": tags,
        }
        for tag in tags:
            _tag_index.setdefault(tag, {key}).add(key)
    return True

def delete(key: str) -> bool:
    with _cache_lock:
        return _drop(key)

def invalidate_tag(tag: str) -> int:
    """Drop every entry stored with ``tag``. Returns how many were removed."""
    with _cache_lock:
        keys = list(_tag_index.pop(tag, ()))
        removed = sum(1 for key in keys if _drop(key))
    if removed:
        logger.info(f"Invalidated {removed} cache entries tagged '{tag}'")
    return removed

def clear() -> bool:
    with _cache_lock:
        _memory_cache.clear()
        _tag_index.clear()
    return True

def _drop(key: str) -> bool:
    item = _memory_cache.pop(key, None)
    if item is None:
        return False
    for tag in item["tags"]:
        keys = _tag_index.get(tag)
        if keys is not None:
            keys.discard(key)
            if not keys:
                del _tag_index[tag]
    return True
