"""
Key-value store abstraction for the homepage records.

Values are opaque strings (the record layer stores JSON-encoded lists).
Supports an in-memory fallback for tests/local runs plus Redis, SQL and
S3-compatible object storage implementations for production.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

import boto3
import redis
from botocore.config import Config
from botocore.exceptions import ClientError
from sqlalchemy import Column, String, Text, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker


class KeyValueStore(Protocol):
    """Minimal string-keyed get/put interface."""

    def get(self, key: str) -> Optional[str]:
        ...

    def put(self, key: str, value: str) -> None:
        ...


@dataclass
class InMemoryKeyValueStore:
    """Dict-backed store for testing/dev."""

    values: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def put(self, key: str, value: str) -> None:
        self.values[key] = value

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.values.clear()


@dataclass
class RedisKeyValueStore:
    """Redis-backed store using plain string keys under a namespace prefix."""

    url: str
    key_prefix: str = "homepage:"

    def __post_init__(self):
        self.client = redis.Redis.from_url(self.url)

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        value = self.client.get(self._key(key))
        if value is None:
            return None
        return value.decode("utf-8")

    def put(self, key: str, value: str) -> None:
        self.client.set(self._key(key), value.encode("utf-8"))


Base = declarative_base()


class KvEntryRow(Base):
    __tablename__ = "kv_entries"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)


class SqlKeyValueStore:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlKeyValueStore")
        self.engine = create_engine(
            database_url,
            future=True,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    def get(self, key: str) -> Optional[str]:
        with self.Session() as session:
            row = session.get(KvEntryRow, key)
            return row.value if row else None

    def put(self, key: str, value: str) -> None:
        with self.Session() as session:
            existing = session.get(KvEntryRow, key)
            if existing:
                existing.value = value
            else:
                session.add(KvEntryRow(key=key, value=value))
            session.commit()


@dataclass
class ObjectStorageKeyValueStore:
    """
    S3-compatible object storage as a key-value store, one object per key.
    """

    bucket: str
    region: str
    endpoint: str
    access_key_id: str
    secret_access_key: str
    prefix: str = "kv/"

    def __post_init__(self):
        # Use virtual-hosted style addressing to satisfy COS requirements.
        config = Config(
            s3={"addressing_style": "virtual"},
            signature_version="s3v4",
        )
        self._client = boto3.client(
            "s3",
            endpoint_url=self.endpoint or None,
            region_name=self.region or None,
            aws_access_key_id=self.access_key_id or None,
            aws_secret_access_key=self.secret_access_key or None,
            config=config,
        )

    def _path(self, key: str) -> str:
        return f"{self.prefix}{key}.json"

    def get(self, key: str) -> Optional[str]:
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=self._path(key))
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                return None
            raise
        return response["Body"].read().decode("utf-8")

    def put(self, key: str, value: str) -> None:
        self._client.put_object(
            Bucket=self.bucket,
            Key=self._path(key),
            Body=value.encode("utf-8"),
            ContentType="application/json",
        )
