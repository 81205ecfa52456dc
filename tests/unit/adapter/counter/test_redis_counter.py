"""Unit tests for the Redis like counter (read paths and key layout)."""

import pytest

from board.adapter.counter import RedisLikeCounterGateway
from board.domain.value import PostId, UserName


class _ScriptRecorder:
    def __init__(self, result: int):
        self.result = result
        self.calls: list[tuple[list, list]] = []

    async def __call__(self, keys=None, args=None):
        self.calls.append((keys, args))
        return self.result


class _InMemoryRedis:
    """Tiny stand-in for the redis client's key/value commands."""

    def __init__(self, values: dict[str, bytes] | None = None):
        self.values = values or {}
        self.scripts: list[_ScriptRecorder] = []
        self.mget_calls = 0

    def register_script(self, script: str) -> _ScriptRecorder:
        recorder = _ScriptRecorder(result=1)
        self.scripts.append(recorder)
        return recorder

    async def get(self, key: str):
        return self.values.get(key)

    async def mget(self, keys):
        self.mget_calls += 1
        return [self.values.get(key) for key in keys]


def test_key_layout():
    gateway = RedisLikeCounterGateway(_InMemoryRedis(), key_prefix="fc")

    assert gateway.count_key(PostId(7)) == "fc:post:7:count"
    assert gateway.likers_key(PostId(7)) == "fc:post:7:likers"


@pytest.mark.asyncio
async def test_count_reads_missing_as_zero():
    redis = _InMemoryRedis({"board:post:1:count": b"3"})
    gateway = RedisLikeCounterGateway(redis)

    assert await gateway.count(PostId(1)) == 3
    assert await gateway.count(PostId(2)) == 0


@pytest.mark.asyncio
async def test_count_batch_is_single_mget():
    redis = _InMemoryRedis({"board:post:1:count": b"3", "board:post:3:count": b"1"})
    gateway = RedisLikeCounterGateway(redis)

    counts = await gateway.count_batch([PostId(1), PostId(2), PostId(3)])

    assert counts == {1: 3, 2: 0, 3: 1}
    assert redis.mget_calls == 1


@pytest.mark.asyncio
async def test_count_batch_of_nothing_skips_redis():
    redis = _InMemoryRedis()
    gateway = RedisLikeCounterGateway(redis)

    assert await gateway.count_batch([]) == {}
    assert redis.mget_calls == 0


@pytest.mark.asyncio
async def test_increment_runs_script_with_both_keys():
    redis = _InMemoryRedis()
    gateway = RedisLikeCounterGateway(redis)
    like_script = redis.scripts[0]

    count = await gateway.increment(PostId(5), UserName("abel"))

    assert count == 1
    assert like_script.calls == [
        (["board:post:5:count", "board:post:5:likers"], ["abel"])
    ]


@pytest.mark.asyncio
async def test_negative_counter_reads_as_zero():
    redis = _InMemoryRedis({"board:post:1:count": b"-1"})
    gateway = RedisLikeCounterGateway(redis)

    assert await gateway.count(PostId(1)) == 0
    assert await gateway.count_batch([PostId(1)]) == {1: 0}


@pytest.mark.asyncio
async def test_unlike_result_is_never_negative():
    redis = _InMemoryRedis()
    gateway = RedisLikeCounterGateway(redis)
    unlike_script = redis.scripts[1]
    unlike_script.result = -1

    assert await gateway.decrement(PostId(1), UserName("abel")) == 0
