"""Background poller that keeps the current snapshot up to date."""
import logging
import threading
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..models.snapshot import Snapshot
from .constants import DEFAULT_REFRESH_INTERVAL
from .exceptions import PollerAlreadyRunningError
from .store_loader import StoreLoader

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[Snapshot], None]


class SnapshotPoller:
    """Owns the current snapshot and replaces it on a fixed cadence.

    Readers get whole snapshots only: a new snapshot is built completely by the
    loader and then swapped in by reference. Timed and manual refreshes share
    one load lock, so at most one load is in flight at a time.
    """

    def __init__(self, root: Union[str, Path], interval: float = DEFAULT_REFRESH_INTERVAL,
                 loader: Optional[StoreLoader] = None):
        if interval <= 0:
            raise ValueError(f"Refresh interval must be positive, got {interval}")
        self.loader = loader or StoreLoader(root)
        self.interval = interval
        self._snapshot = Snapshot.empty()
        self._subscribers: List[SnapshotCallback] = []
        self._state_lock = threading.Lock()
        self._load_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def snapshot(self) -> Snapshot:
        """The most recently published snapshot."""
        with self._state_lock:
            return self._snapshot

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def subscribe(self, callback: SnapshotCallback) -> Callable[[], None]:
        """Register a callback for every newly published snapshot.

        Returns:
            A function that removes the subscription
        """
        with self._state_lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._state_lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def refresh(self) -> Snapshot:
        """Load and publish a new snapshot.

        If another load is already running, wait for it and return the
        snapshot it published instead of starting a second one.
        """
        if not self._load_lock.acquire(blocking=False):
            with self._load_lock:
                return self.snapshot
        try:
            snapshot = self.loader.load()
            self._publish(snapshot)
            return snapshot
        finally:
            self._load_lock.release()

    def _publish(self, snapshot: Snapshot) -> None:
        with self._state_lock:
            self._snapshot = snapshot
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(snapshot)
            except Exception:
                logger.exception(f"Snapshot subscriber {callback!r} failed")

    def start(self) -> None:
        """Start polling on a daemon thread; the first load happens immediately."""
        if self.running:
            raise PollerAlreadyRunningError(f"Poller for {self.loader.root} is already running")
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="agent-pulse-poller", daemon=True)
        self._thread.start()
        logger.info(f"Started polling {self.loader.root} every {self.interval}s")

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop polling and wait for the thread to exit.

        If the thread is still running when ``timeout`` expires, the poller
        stays marked as running and ``stop`` can be called again.
        """
        self._stop_event.set()
        thread = self._thread
        if thread is None:
            return
        if thread is not threading.current_thread():
            thread.join(timeout)
            if thread.is_alive():
                logger.warning(f"Polling thread for {self.loader.root} did not exit within {timeout}s")
                return
        logger.info(f"Stopped polling {self.loader.root}")
        self._thread = None

    def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.refresh()
            except Exception as e:
                logger.error(f"Error refreshing snapshot: {type(e).__name__}: {e}", exc_info=True)
            if self._stop_event.wait(self.interval):
                break

    def __enter__(self) -> "SnapshotPoller":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
