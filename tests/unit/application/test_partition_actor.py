"""Tests for PartitionActor serialization and persistence contract."""

from __future__ import annotations

import asyncio

import pytest

from viewcounter.adapters.persistence.memory import InMemoryCounterStore
from viewcounter.application.actors.partition_actor import PartitionActor
from viewcounter.domain.errors import MethodNotSupportedError, StorageError
from viewcounter.domain.value_objects.partition_key import PartitionKey

from tests.fakes import FailingStore

KEY = PartitionKey(host="a.com", path="/post/1")


@pytest.mark.asyncio
async def test_first_get_returns_zero(store):
    actor = PartitionActor(KEY, store)
    assert await actor.get() == 0


@pytest.mark.asyncio
async def test_get_does_not_write(store):
    actor = PartitionActor(KEY, store)
    await actor.get()
    await actor.get()
    assert store.stores == 0
    assert store.loads == 2


@pytest.mark.asyncio
async def test_increment_reads_once_and_writes_once(store):
    actor = PartitionActor(KEY, store)
    assert await actor.increment() == 1
    assert store.loads == 1
    assert store.stores == 1
    assert store.snapshot() == {"a.com/post/1": 1}


@pytest.mark.asyncio
async def test_concurrent_increments_are_not_lost(store):
    actor = PartitionActor(KEY, store)
    results = await asyncio.gather(*(actor.increment() for _ in range(200)))
    assert await actor.get() == 200
    # Every caller saw a distinct post-increment value.
    assert sorted(results) == list(range(1, 201))


@pytest.mark.asyncio
async def test_recreated_actor_continues_from_store(store):
    first = PartitionActor(KEY, store)
    await first.increment()
    await first.increment()

    second = PartitionActor(KEY, store)
    assert await second.get() == 2
    assert await second.increment() == 3


@pytest.mark.asyncio
async def test_reads_reflect_out_of_band_writes():
    store = InMemoryCounterStore()
    actor = PartitionActor(KEY, store)
    assert await actor.increment() == 1
    await store.store(str(KEY), 41)
    assert await actor.get() == 41
    assert await actor.increment() == 42


@pytest.mark.asyncio
async def test_handle_dispatches_get_and_post(store):
    actor = PartitionActor(KEY, store)
    assert await actor.handle("POST") == 1
    assert await actor.handle("GET") == 1


@pytest.mark.asyncio
async def test_handle_rejects_other_methods_without_touching_store(store):
    actor = PartitionActor(KEY, store)
    with pytest.raises(MethodNotSupportedError) as exc:
        await actor.handle("DELETE")
    assert exc.value.status_code == 405
    assert store.loads == 0
    assert store.stores == 0


@pytest.mark.asyncio
async def test_failed_write_leaves_value_unchanged():
    inner = InMemoryCounterStore({str(KEY): 5})
    failing = FailingStore(inner, failing_keys={str(KEY)}, fail_writes_only=True)
    actor = PartitionActor(KEY, failing)

    with pytest.raises(StorageError):
        await actor.increment()
    assert await actor.get() == 5

    failing.failing_keys.clear()
    assert await actor.increment() == 6


@pytest.mark.asyncio
async def test_failed_read_propagates():
    failing = FailingStore(InMemoryCounterStore(), failing_keys={str(KEY)})
    actor = PartitionActor(KEY, failing)
    with pytest.raises(StorageError):
        await actor.get()


@pytest.mark.asyncio
async def test_actor_is_idle_only_when_nothing_pending():
    gate = asyncio.Event()

    class BlockingStore(InMemoryCounterStore):
        async def load(self, key):
            await gate.wait()
            return await super().load(key)

    actor = PartitionActor(KEY, BlockingStore())
    assert actor.is_idle

    running = asyncio.create_task(actor.increment())
    queued = asyncio.create_task(actor.get())
    await asyncio.sleep(0)
    assert not actor.is_idle

    gate.set()
    assert await running == 1
    assert await queued == 1
    assert actor.is_idle
