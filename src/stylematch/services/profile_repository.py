"""
Durable storage for preference profiles.

One JSON record per user, replaced as a whole on every write. Only the
completed-quiz profile is stored; in-progress quiz state never is.

Supports two backends:
1. InMemory: For development/testing (default)
2. Redis: For production (when the redis package is available)
"""

import json
import threading
from typing import Dict, Optional, Protocol

from pydantic import ValidationError

from stylematch.config.settings import Settings, get_settings
from stylematch.core.errors import ProfilePersistenceError
from stylematch.core.logging import get_logger
from stylematch.scoring.models import UserPreferenceProfile

logger = get_logger(__name__)


class ProfileRepository(Protocol):
    """Key-value store for UserPreferenceProfile records."""

    def load(self, user_id: str) -> Optional[UserPreferenceProfile]:
        ...

    def save(self, user_id: str, profile: UserPreferenceProfile) -> None:
        ...

    def delete(self, user_id: str) -> None:
        ...


def _encode(profile: UserPreferenceProfile) -> str:
    return json.dumps(profile.to_record(), sort_keys=True)


def _decode(user_id: str, raw: str) -> UserPreferenceProfile:
    try:
        return UserPreferenceProfile.from_record(json.loads(raw))
    except (ValueError, ValidationError) as e:
        raise ProfilePersistenceError(
            f"Stored profile for '{user_id}' is not a valid record: {e}"
        ) from e


# =============================================================================
# In-memory backend
# =============================================================================

class InMemoryProfileBackend:
    """
    Process-local profile storage.

    Records are kept JSON-encoded so that reads go through the same
    decode path as the Redis backend.
    """

    def __init__(self):
        self._records: Dict[str, str] = {}
        self._lock = threading.Lock()

    def load(self, user_id: str) -> Optional[UserPreferenceProfile]:
        with self._lock:
            raw = self._records.get(user_id)
        if raw is None:
            return None
        return _decode(user_id, raw)

    def save(self, user_id: str, profile: UserPreferenceProfile) -> None:
        encoded = _encode(profile)
        with self._lock:
            self._records[user_id] = encoded

    def delete(self, user_id: str) -> None:
        with self._lock:
            self._records.pop(user_id, None)

    def get_stats(self) -> Dict[str, object]:
        with self._lock:
            return {"backend": "memory", "profiles": len(self._records)}


# =============================================================================
# Redis backend
# =============================================================================

class RedisProfileBackend:
    """
    Redis-backed profile storage.

    Requires: pip install redis
    """

    def __init__(
        self,
        redis_url: Optional[str] = None,
        key_prefix: str = "profile:",
        ttl_seconds: int = 0,
        socket_timeout: Optional[float] = None,
        client=None,
    ):
        """
        Args:
            redis_url: Redis connection URL (default from settings)
            key_prefix: Prefix prepended to the user id
            ttl_seconds: Record expiry; 0 keeps records forever
            socket_timeout: Connect and command timeout in seconds (default
                from settings), so a stalled server fails instead of hanging
            client: Pre-built redis client (tests, shared pools)
        """
        if client is None:
            try:
                import redis
            except ImportError:
                raise ImportError(
                    "Redis backend requires 'redis' package. Install with: pip install redis"
                )
            settings = get_settings()
            redis_url = redis_url or settings.redis_url
            if socket_timeout is None:
                socket_timeout = settings.redis_socket_timeout
            client = redis.from_url(
                redis_url,
                decode_responses=True,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_timeout,
            )
            client.ping()
            logger.info("profile_backend_connected", backend="redis", url=redis_url.split("@")[-1])

        self._redis = client
        self._prefix = key_prefix
        self._ttl = ttl_seconds

    def _key(self, user_id: str) -> str:
        return f"{self._prefix}{user_id}"

    def load(self, user_id: str) -> Optional[UserPreferenceProfile]:
        try:
            raw = self._redis.get(self._key(user_id))
        except Exception as e:
            raise ProfilePersistenceError(f"Redis read failed for '{user_id}': {e}") from e
        if raw is None:
            return None
        return _decode(user_id, raw)

    def save(self, user_id: str, profile: UserPreferenceProfile) -> None:
        encoded = _encode(profile)
        try:
            if self._ttl > 0:
                self._redis.setex(self._key(user_id), self._ttl, encoded)
            else:
                self._redis.set(self._key(user_id), encoded)
        except Exception as e:
            raise ProfilePersistenceError(f"Redis write failed for '{user_id}': {e}") from e

    def delete(self, user_id: str) -> None:
        try:
            self._redis.delete(self._key(user_id))
        except Exception as e:
            raise ProfilePersistenceError(f"Redis delete failed for '{user_id}': {e}") from e


# =============================================================================
# Backend selection
# =============================================================================

def get_profile_repository(
    backend: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> ProfileRepository:
    """
    Build a profile repository.

    Args:
        backend: "auto", "redis" or "memory" (default from settings).
            "auto" tries Redis and falls back to memory if it is unreachable.
        settings: Settings to read Redis options from (default: get_settings())
    """
    settings = settings or get_settings()
    backend = (backend or settings.profile_backend).lower()

    if backend == "memory":
        return InMemoryProfileBackend()

    redis_kwargs = dict(
        redis_url=settings.redis_url,
        key_prefix=settings.profile_key_prefix,
        ttl_seconds=settings.profile_ttl_seconds,
        socket_timeout=settings.redis_socket_timeout,
    )

    if backend == "redis":
        return RedisProfileBackend(**redis_kwargs)

    if backend == "auto":
        try:
            return RedisProfileBackend(**redis_kwargs)
        except Exception as e:
            logger.warning("profile_backend_fallback", backend="memory", error=str(e))
            return InMemoryProfileBackend()

    raise ValueError(f"Unknown profile backend: {backend!r}")
