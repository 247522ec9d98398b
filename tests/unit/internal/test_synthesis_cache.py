from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from synthwire._internal.cache import SynthesisCache
from synthwire.lock_mode import LockMode

_THREAD_WORKERS = 8


@pytest.mark.parametrize("lock_mode", [LockMode.THREAD, LockMode.NONE])
def test_get_or_create_calls_factory_once_per_key(lock_mode: LockMode) -> None:
    cache: SynthesisCache[str, object] = SynthesisCache(lock_mode=lock_mode)
    calls: list[str] = []

    def factory() -> object:
        calls.append("a")
        return object()

    first = cache.get_or_create("a", factory)
    second = cache.get_or_create("a", factory)

    assert first is second
    assert calls == ["a"]
    assert "a" in cache
    assert len(cache) == 1


def test_get_returns_none_for_missing_key() -> None:
    cache: SynthesisCache[str, int] = SynthesisCache()

    assert cache.get("missing") is None
    assert "missing" not in cache


def test_failing_factory_stores_nothing() -> None:
    cache: SynthesisCache[str, int] = SynthesisCache()

    def failing_factory() -> int:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        cache.get_or_create("a", failing_factory)

    assert "a" not in cache
    assert cache.get_or_create("a", lambda: 1) == 1
    assert cache.get_or_create("b", lambda: 2) == 2


def test_thread_lock_mode_runs_factory_once_under_contention() -> None:
    cache: SynthesisCache[str, object] = SynthesisCache(lock_mode=LockMode.THREAD)
    barrier = threading.Barrier(_THREAD_WORKERS)
    calls = 0

    def slow_factory() -> object:
        nonlocal calls
        calls += 1
        time.sleep(0.01)
        return object()

    def get_value() -> object:
        barrier.wait()
        return cache.get_or_create("key", slow_factory)

    with ThreadPoolExecutor(max_workers=_THREAD_WORKERS) as pool:
        futures = [pool.submit(get_value) for _ in range(_THREAD_WORKERS)]
        results = [future.result() for future in futures]

    assert calls == 1
    assert all(result is results[0] for result in results)


def test_entries_are_never_evicted() -> None:
    cache: SynthesisCache[int, int] = SynthesisCache()
    for key in range(100):
        cache.get_or_create(key, lambda key=key: key * 2)

    assert len(cache) == 100
    assert cache.get(0) == 0
    assert cache.get(99) == 198
