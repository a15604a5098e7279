# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redis-backed cache adapter.

Connection and command failures surface as ``CacheUnavailableError`` so the
caller can fall back to the store. The client is created lazily by redis-py;
no connection is opened until the first command.
"""

from __future__ import annotations

import redis
from redis.exceptions import RedisError

from storefront.application.interfaces import KeyValueCache
from storefront.shared.config import CacheConfig
from storefront.shared.errors.base import CacheUnavailableError
from storefront.shared.logging import logger


class RedisKeyValueCache(KeyValueCache):
    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: CacheConfig) -> RedisKeyValueCache:
        client = redis.Redis.from_url(
            config.redis_url,
            decode_responses=False,
            socket_connect_timeout=config.socket_timeout,
            socket_timeout=config.socket_timeout,
        )
        return cls(client)

    def get(self, key: str) -> bytes | None:
        try:
            return self._client.get(key)
        except RedisError as exc:
            logger.error(f"redis: get failed key={key}: {exc}")
            raise CacheUnavailableError("get", key) from exc

    def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        try:
            self._client.set(key, value, ex=ttl_seconds)
        except RedisError as exc:
            logger.error(f"redis: set failed key={key}: {exc}")
            raise CacheUnavailableError("set", key) from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except RedisError as exc:
            logger.error(f"redis: delete failed key={key}: {exc}")
            raise CacheUnavailableError("delete", key) from exc

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except RedisError as exc:
            logger.warning(f"redis: ping failed: {exc}")
            return False

    def close(self) -> None:
        self._client.close()


def connect_cache(cache: KeyValueCache) -> bool:
    """Probe the backend once at startup; failure is logged, never raised."""

    if cache.ping():
        logger.info("Connected to cache backend")
        return True
    logger.warning("Cache backend unreachable, product reads will hit the database")
    return False


__all__ = ["RedisKeyValueCache", "connect_cache"]
