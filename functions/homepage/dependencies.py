"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging
from typing import Callable

from homepage.config import get_settings
from homepage.kv import (
    InMemoryKeyValueStore,
    KeyValueStore,
    ObjectStorageKeyValueStore,
    RedisKeyValueStore,
    SqlKeyValueStore,
)
from homepage.notifications import NotificationDispatcher

logger = logging.getLogger(__name__)

_kv_store: KeyValueStore | None = None
_notification_dispatcher: NotificationDispatcher | None = None


def get_kv_store() -> KeyValueStore:
    """
    Return a singleton key-value store so records persist across requests.
    """
    global _kv_store
    if _kv_store:
        return _kv_store

    settings = get_settings()
    if settings.use_in_memory_backends:
        _kv_store = InMemoryKeyValueStore()
    elif settings.redis_url:
        _kv_store = RedisKeyValueStore(
            url=settings.redis_url,
            key_prefix=settings.redis_key_prefix,
        )
    elif settings.database_url:
        _kv_store = SqlKeyValueStore(settings.database_url)
    elif settings.kv_bucket:
        _kv_store = ObjectStorageKeyValueStore(
            bucket=settings.kv_bucket,
            region=settings.kv_region or "",
            endpoint=settings.kv_endpoint or "",
            access_key_id=settings.aws_access_key_id or "",
            secret_access_key=settings.aws_secret_access_key or "",
            prefix=settings.kv_prefix,
        )
    else:
        _kv_store = InMemoryKeyValueStore()
    logger.info("Using %s for records", type(_kv_store).__name__)
    return _kv_store


def get_kv_store_factory() -> Callable[[], KeyValueStore]:
    """
    Return the store builder rather than the store, so each route opens the
    store inside its own error handling (a backend that cannot connect is a
    route failure, not an unhandled dependency error).
    """
    return get_kv_store


def get_notification_dispatcher() -> NotificationDispatcher:
    global _notification_dispatcher
    if _notification_dispatcher:
        return _notification_dispatcher

    settings = get_settings()
    _notification_dispatcher = NotificationDispatcher(
        url=settings.notification_api_url,
        timeout=settings.request_timeout,
    )
    return _notification_dispatcher


def reset_dependencies() -> None:
    """Drop cached singletons so the next call re-reads settings (useful in tests)."""
    global _kv_store, _notification_dispatcher
    _kv_store = None
    _notification_dispatcher = None
