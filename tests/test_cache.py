"""Tests for the per-document language model cache."""

import pytest

from vuecheck.documents.models import Document
from vuecheck.validation.cache import CacheDisposedError, LanguageModelCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _doc(name: str, version: int = 0, text: str = "x") -> Document:
    return Document(uri=f"file:///{name}.vue", language_id="vue", version=version, text=text)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def calls() -> list:
    return []


def _cache(calls, clock, max_entries=10, interval=60):
    def compute(document):
        calls.append(document.uri)
        return document.text.upper()

    return LanguageModelCache(max_entries, interval, compute, clock=clock)


class TestMemoization:
    def test_computes_once(self, calls, clock):
        cache = _cache(calls, clock)
        doc = _doc("a")
        assert cache.get(doc) == "X"
        assert cache.get(doc) == "X"
        assert calls == ["file:///a.vue"]

    def test_new_version_recomputes(self, calls, clock):
        cache = _cache(calls, clock)
        cache.get(_doc("a", version=0))
        assert cache.get(_doc("a", version=1, text="y")) == "Y"
        assert len(calls) == 2
        assert len(cache) == 1

    def test_evicts_oldest_above_limit(self, calls, clock):
        cache = _cache(calls, clock, max_entries=2)
        for i, name in enumerate(["a", "b", "c"]):
            clock.now = float(i)
            cache.get(_doc(name))
        assert len(cache) == 2
        cache.get(_doc("a"))
        assert calls.count("file:///a.vue") == 2

    def test_recently_read_entry_survives_overflow(self, calls, clock):
        cache = _cache(calls, clock, max_entries=2)
        for i, name in enumerate(["a", "b", "a", "c"]):
            clock.now = float(i)
            cache.get(_doc(name))
        calls.clear()
        cache.get(_doc("a"))
        assert calls == []
        cache.get(_doc("b"))
        assert calls == ["file:///b.vue"]

    def test_entry_in_use_does_not_expire(self, calls, clock):
        cache = _cache(calls, clock, interval=60)
        for second in range(0, 100, 10):
            clock.now = float(second)
            cache.get(_doc("a"))
        assert calls == ["file:///a.vue"]

    def test_expires_after_interval(self, calls, clock):
        cache = _cache(calls, clock, interval=60)
        cache.get(_doc("a"))
        clock.now = 61.0
        cache.get(_doc("a"))
        assert len(calls) == 2

    def test_remove(self, calls, clock):
        cache = _cache(calls, clock)
        cache.get(_doc("a"))
        cache.remove(_doc("a"))
        assert len(cache) == 0


class TestDispose:
    def test_dispose_clears(self, calls, clock):
        cache = _cache(calls, clock)
        cache.get(_doc("a"))
        cache.dispose()
        assert cache.disposed is True
        assert len(cache) == 0

    def test_use_after_dispose_raises(self, calls, clock):
        cache = _cache(calls, clock)
        cache.dispose()
        with pytest.raises(CacheDisposedError):
            cache.get(_doc("a"))

    def test_second_dispose_is_noop(self, calls, clock):
        cache = _cache(calls, clock)
        cache.dispose()
        cache.dispose()
        assert cache.disposed is True
