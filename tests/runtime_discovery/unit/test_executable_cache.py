"""Tests for per-instance runtime executable discovery."""

from __future__ import annotations

import threading
from collections import Counter
from pathlib import Path

import pytest
from runtime_launcher.configuration import FeatureSettings, LauncherSettings, RuntimeOverrides
from runtime_launcher.runtime_discovery import (
    RuntimeExecutableCache,
    UnknownRuntimeError,
    runtime_candidates,
)


class _CountingSearch:
    """Search probe that finds only the configured executable names."""

    def __init__(self, available: dict[str, str]) -> None:
        self.available = available
        self.calls: Counter[str] = Counter()
        self._lock = threading.Lock()

    def __call__(self, name: str) -> str | None:
        with self._lock:
            self.calls[name] += 1
        return self.available.get(name)


def test_resolve_returns_first_discoverable_candidate() -> None:
    search = _CountingSearch({"node.cmd": "/opt/node/node.cmd"})
    cache = RuntimeExecutableCache(search=search)

    assert cache.node() == Path("/opt/node/node.cmd")
    assert search.calls == Counter({"node": 1, "node.cmd": 1})


def test_resolve_prefers_earlier_candidates() -> None:
    search = _CountingSearch({"node": "/usr/bin/node", "node.cmd": "/opt/node/node.cmd"})
    cache = RuntimeExecutableCache(search=search)

    assert cache.resolve("node") == Path("/usr/bin/node")
    assert search.calls["node.cmd"] == 0


def test_resolve_is_memoized_per_cache_instance() -> None:
    search = _CountingSearch({"moonrun": "/home/u/.moon/bin/moonrun"})
    cache = RuntimeExecutableCache(search=search)

    first = cache.moonrun()
    second = cache.moonrun()

    assert first == second == Path("/home/u/.moon/bin/moonrun")
    assert search.calls["moonrun"] == 1


def test_separate_cache_instances_search_again() -> None:
    search = _CountingSearch({"moonrun": "/bin/moonrun"})

    RuntimeExecutableCache(search=search).moonrun()
    RuntimeExecutableCache(search=search).moonrun()

    assert search.calls["moonrun"] == 2


def test_resolve_falls_back_to_first_candidate_name_when_nothing_is_found() -> None:
    cache = RuntimeExecutableCache(runtime_candidates(moongres_enabled=True), search=lambda _: None)

    assert cache.node() == Path("node")
    assert cache.moonrun() == Path("moonrun")
    assert cache.rustica_engine() == Path("rustica-engine")


def test_failed_resolution_does_not_affect_other_runtimes() -> None:
    search = _CountingSearch({"node": "/usr/bin/node"})
    cache = RuntimeExecutableCache(search=search)

    assert cache.moonrun() == Path("moonrun")
    assert cache.node() == Path("/usr/bin/node")


def test_experimental_runtime_is_absent_without_feature() -> None:
    cache = RuntimeExecutableCache(search=lambda _: None)

    assert "rustica_engine" not in cache.runtime_names
    with pytest.raises(UnknownRuntimeError):
        cache.rustica_engine()


def test_concurrent_first_access_searches_once() -> None:
    search = _CountingSearch({"moonrun": "/bin/moonrun"})
    cache = RuntimeExecutableCache(search=search)
    barrier = threading.Barrier(8)
    results: list[Path] = []
    results_lock = threading.Lock()

    def _worker() -> None:
        barrier.wait()
        resolved = cache.moonrun()
        with results_lock:
            results.append(resolved)

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [Path("/bin/moonrun")] * 8
    assert search.calls["moonrun"] == 1


def test_from_settings_uses_overrides_without_searching(tmp_path: Path) -> None:
    search = _CountingSearch({})
    settings = LauncherSettings(
        features=FeatureSettings(moongres=True),
        runtimes=RuntimeOverrides(rustica_engine=tmp_path / "engine"),
    )
    cache = RuntimeExecutableCache.from_settings(settings, search=search)

    assert cache.rustica_engine() == tmp_path / "engine"
    assert search.calls["rustica-engine"] == 0
