"""Configuration lifecycle: owns the active snapshot and refreshes it.

The manager performs one synchronous load at startup (failures propagate:
an unconfigured service cannot serve traffic), then refreshes on a fixed
interval in a cancellable background task. Refresh failures are logged
and the previous snapshot stays active.

Thread safety:
    The active snapshot is a single reference to an immutable
    ``ConfigModel``. Writers swap it under ``_swap_lock``; readers never
    take the lock and only ever see a complete old or new snapshot.
"""

import asyncio
import logging
import threading
from typing import Protocol

from vanityurls._internal.invoke import invoke, invoke_sync
from vanityurls.compiler import compile_config
from vanityurls.errors import CompileError, ConfigurationError, FetchError
from vanityurls.model import ConfigModel, RawConfig

logger = logging.getLogger("vanityurls.lifecycle")


class ConfigFetcher(Protocol):
    """Anything that can produce a raw configuration.

    ``fetch`` may be sync or async. Sync fetchers are run on a worker
    thread during refresh so they never block request handling.
    """

    def fetch(self) -> RawConfig: ...


class ConfigManager:
    """Owner of the active configuration snapshot.

    Usage::

        manager = ConfigManager(FileFetcher("vanity.yaml"))
        manager.load()            # raises on a bad initial config
        manager.start()           # inside a running event loop
        snapshot = manager.snapshot
        ...
        await manager.aclose()
    """

    __slots__ = (
        "_fetcher",
        "_generation",
        "_interval",
        "_interval_override",
        "_snapshot",
        "_stop",
        "_swap_lock",
        "_task",
    )

    def __init__(self, fetcher: ConfigFetcher, *, interval: float | None = None) -> None:
        self._fetcher = fetcher
        self._interval_override = interval
        self._interval: float | None = None
        self._snapshot: ConfigModel | None = None
        self._generation = 0
        self._swap_lock = threading.Lock()
        self._stop: asyncio.Event | None = None
        self._task: asyncio.Task[None] | None = None

    # -- Readers --

    @property
    def snapshot(self) -> ConfigModel:
        """The latest successfully compiled snapshot. Never blocks."""
        snapshot = self._snapshot
        if snapshot is None:
            msg = "No configuration loaded. Call ConfigManager.load() before serving."
            raise ConfigurationError(msg)
        return snapshot

    def current_snapshot(self) -> ConfigModel:
        """Method form of ``snapshot`` for callers that prefer a call."""
        return self.snapshot

    @property
    def loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def generation(self) -> int:
        """Number of snapshots installed so far (1 after ``load()``)."""
        return self._generation

    @property
    def interval(self) -> float:
        """Seconds between refreshes, fixed by the initial load."""
        if self._interval is None:
            msg = "Refresh interval is unknown until the initial configuration is loaded."
            raise ConfigurationError(msg)
        return self._interval

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    # -- Loading --

    def load(self) -> ConfigModel:
        """Fetch and compile the initial configuration synchronously.

        Raises ``FetchError`` or a ``CompileError`` subclass on failure;
        nothing is installed in that case.
        """
        raw = invoke_sync(self._fetcher.fetch)
        return self._install_initial(compile_config(raw))

    async def aload(self) -> ConfigModel:
        """Async variant of ``load()`` for use inside a running event loop."""
        raw = await invoke(self._fetcher.fetch)
        return self._install_initial(compile_config(raw))

    def _install_initial(self, snapshot: ConfigModel) -> ConfigModel:
        if self._interval_override is not None:
            self._interval = self._interval_override
        else:
            self._interval = snapshot.fetch_interval
        self._swap(snapshot)
        logger.info(
            "loaded %d path(s), refreshing every %ss",
            len(snapshot.entries),
            self._interval,
        )
        return snapshot

    async def refresh(self) -> bool:
        """Fetch, compile and install a new snapshot.

        Returns ``True`` when a new snapshot was installed. On failure the
        error is logged, the previous snapshot stays active and ``False``
        is returned.
        """
        try:
            raw = await invoke(self._fetcher.fetch)
            snapshot = compile_config(raw)
        except (FetchError, CompileError) as exc:
            logger.error("configuration refresh failed, keeping previous snapshot: %s", exc)
            return False
        except Exception:
            logger.exception("configuration refresh failed, keeping previous snapshot")
            return False

        self._swap(snapshot)
        logger.info(
            "configuration refreshed: %d path(s), generation %d",
            len(snapshot.entries),
            self._generation,
        )
        return True

    def _swap(self, snapshot: ConfigModel) -> None:
        with self._swap_lock:
            self._snapshot = snapshot
            self._generation += 1

    # -- Background refresh --

    async def run(self) -> None:
        """Refresh every ``interval`` seconds until ``stop()`` is called."""
        interval = self.interval
        stop = self._stop_event()
        while not stop.is_set():
            try:
                await asyncio.wait_for(stop.wait(), timeout=interval)
            except TimeoutError:
                await self.refresh()

    def start(self) -> asyncio.Task[None]:
        """Spawn the refresh loop on the running event loop.

        Idempotent while the loop is running on this event loop.
        """
        loop = asyncio.get_running_loop()
        task = self._task
        if task is not None and not task.done() and task.get_loop() is loop:
            return task
        if self._interval is None:
            msg = "Cannot start refreshing before the initial configuration is loaded."
            raise ConfigurationError(msg)
        self._stop = asyncio.Event()
        self._task = loop.create_task(
            self.run(), name="vanityurls-config-refresh"
        )
        return self._task

    def stop(self) -> None:
        """Signal the refresh loop to exit after its current step."""
        if self._stop is not None:
            self._stop.set()

    async def aclose(self) -> None:
        """Stop the refresh loop and wait for it to finish."""
        self.stop()
        task, self._task = self._task, None
        if task is not None:
            await task
        self._stop = None

    def _stop_event(self) -> asyncio.Event:
        # One event per event loop; start() replaces it.
        if self._stop is None:
            self._stop = asyncio.Event()
        return self._stop
