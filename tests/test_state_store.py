"""
Tests for StateStore: replay of the current value, ordering, streams, close.
"""

from __future__ import annotations

import asyncio

import pytest

from catalog_browser.orchestration.state import StateStore


def test_subscribe_receives_current_then_updates() -> None:
    store: StateStore[int] = StateStore(0)
    seen: list[int] = []
    store.subscribe(seen.append)
    store.set(1)
    store.set(2)
    assert seen == [0, 1, 2]
    assert store.value == 2


def test_late_subscriber_sees_latest_value() -> None:
    store: StateStore[str] = StateStore("a")
    early: list[str] = []
    store.subscribe(early.append)
    store.set("b")
    late: list[str] = []
    store.subscribe(late.append)
    assert early[-1] == late[-1] == "b"


def test_unsubscribe() -> None:
    store: StateStore[int] = StateStore(0)
    seen: list[int] = []
    unsubscribe = store.subscribe(seen.append)
    unsubscribe()
    store.set(5)
    assert seen == [0]


def test_reentrant_set_keeps_order_for_every_observer() -> None:
    """A set() from inside a callback is delivered after the current value reaches everyone."""
    store: StateStore[int] = StateStore(0)
    first: list[int] = []
    second: list[int] = []

    def bump(v: int) -> None:
        first.append(v)
        if v == 1:
            store.set(2)

    store.subscribe(bump)
    store.subscribe(second.append)
    store.set(1)
    assert first == [0, 1, 2]
    assert second == [0, 1, 2]


def test_failing_observer_does_not_block_others() -> None:
    store: StateStore[int] = StateStore(0)
    calls: list[int] = []

    def broken(v: int) -> None:
        calls.append(v)
        if v > 0:
            raise ValueError("ui bug")

    later: list[int] = []
    store.subscribe(broken)
    store.subscribe(later.append)
    store.set(1)
    store.set(2)
    assert calls == [0, 1, 2]
    assert later == [0, 1, 2]
    assert store.value == 2


def test_set_after_close_raises() -> None:
    store: StateStore[int] = StateStore(0)
    store.close()
    with pytest.raises(RuntimeError):
        store.set(1)


@pytest.mark.asyncio
async def test_stream_yields_in_order_and_ends_on_close() -> None:
    store: StateStore[int] = StateStore(0)
    received: list[int] = []

    async def collect() -> None:
        async for v in store.stream():
            received.append(v)

    task = asyncio.ensure_future(collect())
    await asyncio.sleep(0)
    store.set(1)
    store.set(2)
    store.close()
    await asyncio.wait_for(task, timeout=1)
    assert received == [0, 1, 2]


@pytest.mark.asyncio
async def test_stream_on_closed_store_yields_last_value() -> None:
    store: StateStore[int] = StateStore(3)
    store.close()
    assert [v async for v in store.stream()] == [3]
