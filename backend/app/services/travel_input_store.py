"""Travel input store — per-user persistence of the latest travel input.

Two backends behind one interface:
    InMemoryTravelInputStore   process-local dict (default, used in tests)
    RedisTravelInputStore      redis.asyncio, JSON values with a TTL

When Redis cannot be reached, or a single call fails, the Redis store keeps
working against an in-memory fallback and logs a warning. Reads check the
fallback on a Redis miss so inputs saved during an outage stay visible.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone

import redis.asyncio as redis

from app.config import settings
from app.schemas.travel_input import StoredTravelInput, TravelInput

logger = logging.getLogger(__name__)

KEY_PREFIX = "travel_input"


def store_key(user_id: str) -> str:
    return f"{KEY_PREFIX}:{user_id}"


class TravelInputStore(ABC):
    @abstractmethod
    async def save(self, user_id: str, travel_input: TravelInput) -> StoredTravelInput:
        ...

    @abstractmethod
    async def get(self, user_id: str) -> StoredTravelInput | None:
        ...

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Returns True when something was removed."""
        ...

    async def close(self):
        pass

    @staticmethod
    def _stamp(user_id: str, travel_input: TravelInput) -> StoredTravelInput:
        return StoredTravelInput(
            user_id=user_id,
            travel_input=travel_input,
            last_updated=datetime.now(timezone.utc),
        )


class InMemoryTravelInputStore(TravelInputStore):

    def __init__(self):
        self._items: dict[str, StoredTravelInput] = {}

    async def save(self, user_id: str, travel_input: TravelInput) -> StoredTravelInput:
        stored = self._stamp(user_id, travel_input.model_copy(deep=True))
        self._items[store_key(user_id)] = stored
        return stored

    async def get(self, user_id: str) -> StoredTravelInput | None:
        stored = self._items.get(store_key(user_id))
        return stored.model_copy(deep=True) if stored else None

    async def delete(self, user_id: str) -> bool:
        return self._items.pop(store_key(user_id), None) is not None


class RedisTravelInputStore(TravelInputStore):
    """Redis-backed store with TTL; degrades to memory when Redis is down."""

    def __init__(self, url: str, ttl: int = settings.travel_input_ttl_seconds):
        self._url = url
        self._ttl = ttl
        self._redis: redis.Redis | None = None
        self._fallback = InMemoryTravelInputStore()
        self._unavailable = False

    async def _get_redis(self) -> redis.Redis | None:
        if self._unavailable:
            return None
        if self._redis is None:
            try:
                self._redis = redis.from_url(
                    self._url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await self._redis.ping()
            except Exception as e:
                logger.warning(f"Redis unavailable, storing travel input in memory: {e}")
                self._redis = None
                self._unavailable = True
                return None
        return self._redis

    async def save(self, user_id: str, travel_input: TravelInput) -> StoredTravelInput:
        r = await self._get_redis()
        if r is None:
            return await self._fallback.save(user_id, travel_input)
        stored = self._stamp(user_id, travel_input)
        try:
            await r.set(store_key(user_id), stored.model_dump_json(by_alias=True), ex=self._ttl)
        except Exception as e:
            logger.warning(f"Redis set failed, storing travel input in memory: {e}")
            return await self._fallback.save(user_id, travel_input)
        return stored

    async def get(self, user_id: str) -> StoredTravelInput | None:
        r = await self._get_redis()
        if r is None:
            return await self._fallback.get(user_id)
        try:
            raw = await r.get(store_key(user_id))
        except Exception as e:
            logger.warning(f"Redis get failed, reading travel input from memory: {e}")
            return await self._fallback.get(user_id)
        if raw is None:
            return await self._fallback.get(user_id)
        return StoredTravelInput.model_validate_json(raw)

    async def delete(self, user_id: str) -> bool:
        r = await self._get_redis()
        removed_locally = await self._fallback.delete(user_id)
        if r is None:
            return removed_locally
        try:
            return bool(await r.delete(store_key(user_id))) or removed_locally
        except Exception as e:
            logger.warning(f"Redis delete failed for travel input: {e}")
            return removed_locally

    async def close(self):
        if self._redis:
            await self._redis.aclose()
            self._redis = None


def create_travel_input_store() -> TravelInputStore:
    if settings.redis_url:
        logger.info("Travel input store: redis")
        return RedisTravelInputStore(settings.redis_url)
    logger.info("Travel input store: in-memory")
    return InMemoryTravelInputStore()


travel_input_store = create_travel_input_store()
