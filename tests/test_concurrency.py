"""Snapshot consistency while reads and refreshes overlap."""

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest

from vanityurls.fetchers import StaticFetcher
from vanityurls.lifecycle import ConfigManager
from vanityurls.routing import resolve

PATHS = [f"/p{i}" for i in range(50)]


def _doc(tag: str) -> dict[str, Any]:
    return {
        "host": f"{tag}.example.org",
        "cache_max_age": 60 if tag == "s1" else 120,
        "paths": {p: {"repo": f"https://github.com/{tag}{p}"} for p in PATHS},
    }


def _tags_seen(manager: ConfigManager) -> set[str]:
    """Resolve every path against one snapshot and report which configs answered."""
    snapshot = manager.snapshot
    tags = {snapshot.host.split(".")[0]}
    tags.add("s1" if snapshot.cache_control.endswith("=60") else "s2")
    for path in PATHS:
        match = resolve(snapshot.entries, f"{path}/sub")
        assert match is not None
        tags.add(match.entry.repo.split("/")[3])
    return tags


class TestConcurrentReads:
    @pytest.mark.asyncio
    async def test_tasks_never_see_mixed_snapshot(self) -> None:
        fetcher = StaticFetcher(_doc("s1"))
        manager = ConfigManager(fetcher)
        manager.load()
        fetcher.update(_doc("s2"))

        async def reader() -> set[str]:
            snapshot = manager.snapshot
            await asyncio.sleep(0)
            tags = {snapshot.host.split(".")[0]}
            for path in PATHS:
                match = resolve(snapshot.entries, path)
                assert match is not None
                tags.add(match.entry.repo.split("/")[3])
                await asyncio.sleep(0)
            return tags

        readers = [asyncio.create_task(reader()) for _ in range(1000)]
        refreshed = await manager.refresh()
        results = await asyncio.gather(*readers)

        assert refreshed
        assert all(tags in ({"s1"}, {"s2"}) for tags in results)
        assert manager.snapshot.host == "s2.example.org"

    def test_threads_never_see_mixed_snapshot(self) -> None:
        fetcher = StaticFetcher(_doc("s1"))
        manager = ConfigManager(fetcher)
        manager.load()
        done = threading.Event()

        def refresher() -> int:
            swaps = 0
            tag = "s1"
            while not done.is_set():
                tag = "s2" if tag == "s1" else "s1"
                fetcher.update(_doc(tag))
                if asyncio.run(manager.refresh()):
                    swaps += 1
            return swaps

        with ThreadPoolExecutor(max_workers=9) as pool:
            swapper = pool.submit(refresher)
            reads = [pool.submit(_tags_seen, manager) for _ in range(1000)]
            results = [future.result() for future in reads]
            done.set()
            swaps = swapper.result()

        assert swaps >= 1
        assert all(tags in ({"s1"}, {"s2"}) for tags in results)
