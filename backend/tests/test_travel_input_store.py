import asyncio
import logging

import pytest

from app.schemas.travel_input import TravelInput
from app.services import travel_input_store as store_module
from app.services.travel_input_store import RedisTravelInputStore, store_key


class FakeRedis:
    """Dict-backed stand-in for redis.asyncio.Redis; ops in `fail_on` raise."""

    def __init__(self, fail_on=(), ping_fails=False):
        self.data: dict[str, str] = {}
        self.fail_on = set(fail_on)
        self.ping_fails = ping_fails
        self.closed = False

    def _check(self, op: str):
        if op in self.fail_on:
            raise ConnectionError("redis went away")

    async def ping(self):
        if self.ping_fails:
            raise ConnectionError("connection refused")
        return True

    async def set(self, key, value, ex=None):
        self._check("set")
        self.data[key] = value
        return True

    async def get(self, key):
        self._check("get")
        return self.data.get(key)

    async def delete(self, key):
        self._check("delete")
        return 1 if self.data.pop(key, None) is not None else 0

    async def aclose(self):
        self.closed = True


@pytest.fixture
def fake_redis(monkeypatch):
    def install(**kwargs) -> FakeRedis:
        client = FakeRedis(**kwargs)
        monkeypatch.setattr(store_module.redis, "from_url", lambda *args, **kw: client)
        return client
    return install


@pytest.fixture
def trip() -> TravelInput:
    return TravelInput(destinations=["Peru"], experiences=["hiking"])


def test_redis_round_trip(fake_redis, trip):
    client = fake_redis()
    store = RedisTravelInputStore("redis://test", ttl=60)

    async def scenario():
        await store.save("u1", trip)
        loaded = await store.get("u1")
        removed = await store.delete("u1")
        missing = await store.get("u1")
        await store.close()
        return loaded, removed, missing

    loaded, removed, missing = asyncio.run(scenario())
    assert loaded.user_id == "u1"
    assert loaded.travel_input == trip
    assert removed is True
    assert missing is None
    assert store_key("u1") not in client.data
    assert client.closed is True


def test_unreachable_redis_uses_memory(fake_redis, trip, caplog):
    fake_redis(ping_fails=True)
    store = RedisTravelInputStore("redis://test")

    async def scenario():
        await store.save("u1", trip)
        return await store.get("u1"), await store.delete("u1"), await store.get("u1")

    with caplog.at_level(logging.WARNING):
        loaded, removed, missing = asyncio.run(scenario())
    assert loaded.travel_input == trip
    assert removed is True
    assert missing is None
    assert "Redis unavailable" in caplog.text


def test_failed_set_after_ping_falls_back(fake_redis, trip, caplog):
    client = fake_redis(fail_on={"set"})
    store = RedisTravelInputStore("redis://test")

    async def scenario():
        saved = await store.save("u1", trip)
        return saved, await store.get("u1")

    with caplog.at_level(logging.WARNING):
        saved, loaded = asyncio.run(scenario())
    assert saved.travel_input == trip
    assert loaded.travel_input == trip
    assert client.data == {}
    assert "Redis set failed" in caplog.text


def test_failed_get_and_delete_fall_back(fake_redis, trip, caplog):
    client = fake_redis()
    store = RedisTravelInputStore("redis://test")

    async def scenario():
        await store.save("u1", trip)
        client.fail_on = {"get", "delete"}
        return await store.get("u1"), await store.delete("u1")

    with caplog.at_level(logging.WARNING):
        loaded, removed = asyncio.run(scenario())
    assert loaded is None
    assert removed is False
    assert "Redis get failed" in caplog.text
    assert "Redis delete failed" in caplog.text
