"""Key/value blob stores holding the serialized evacuation collections."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Protocol

import redis

from ..config import Settings, settings
from ..errors import StoreUnavailableError

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    """Stores opaque string payloads under fixed keys.

    ``get`` returns None only when the key has never been written. Backend
    failures raise StoreUnavailableError.
    """

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, *keys: str) -> None: ...

    def ping(self) -> bool: ...


class FileBlobStore:
    """One file per key under ``<root>/state``."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.state_root = self.root / "state"
        self.state_root.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.state_root / f"{key.replace(':', '__')}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            with path.open("r", encoding="utf-8") as handle:
                return handle.read()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.error("Failed to read %s: %s", path, exc)
            raise StoreUnavailableError(key, str(exc)) from exc

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_path, path)
        except OSError as exc:
            logger.error("Failed to write %s: %s", path, exc)
            raise StoreUnavailableError(key, str(exc)) from exc

    def delete(self, *keys: str) -> None:
        for key in keys:
            try:
                self._path(key).unlink(missing_ok=True)
            except OSError as exc:
                logger.error("Failed to delete %s: %s", key, exc)
                raise StoreUnavailableError(key, str(exc)) from exc

    def ping(self) -> bool:
        return self.state_root.is_dir() and os.access(self.state_root, os.W_OK)


class RedisBlobStore:
    """Plain string keys in Redis, read and written whole."""

    def __init__(self, client: redis.Redis) -> None:
        self.client = client

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(key)
        except redis.RedisError as exc:
            logger.error("Redis error reading %s: %s", key, exc)
            raise StoreUnavailableError(key, str(exc)) from exc
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(key, value)
        except redis.RedisError as exc:
            logger.error("Redis error writing %s: %s", key, exc)
            raise StoreUnavailableError(key, str(exc)) from exc

    def delete(self, *keys: str) -> None:
        if not keys:
            return
        try:
            self.client.delete(*keys)
        except redis.RedisError as exc:
            logger.error("Redis error deleting %s: %s", ", ".join(keys), exc)
            raise StoreUnavailableError(",".join(keys), str(exc)) from exc

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError as exc:
            logger.warning("Redis ping failed: %s", exc)
            return False


def create_redis_client(config: Settings) -> redis.Redis:
    if config.uses_redis_cloud:
        logger.info("Connecting to Redis Cloud at %s:%d", config.redis_cloud_host, config.redis_cloud_port)
        return redis.Redis(
            host=config.redis_cloud_host,
            port=config.redis_cloud_port,
            username=config.redis_cloud_user,
            password=config.redis_cloud_password,
            decode_responses=True,
        )
    logger.info("Connecting to Redis at %s", config.redis_url)
    return redis.Redis.from_url(config.redis_url, decode_responses=True)


def create_store(config: Settings | None = None) -> BlobStore:
    config = config or settings
    if config.storage_backend == "redis":
        return RedisBlobStore(create_redis_client(config))
    return FileBlobStore(root=config.data_root)
