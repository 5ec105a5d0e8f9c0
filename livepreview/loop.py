import logging
import queue
import time

from typing import Any, List, Optional  # noqa

from livepreview.events import FilesChanged, QueueEventChannel, WatchError


LOGGER = logging.getLogger(__name__)

POLL_INTERVAL = 0.1


class EventHandler(object):
    def on_files_changed(self, paths):
        # type: (List[str]) -> None
        pass

    def on_watch_error(self, event):
        # type: (WatchError) -> None
        pass


class EventLoop(object):
    """Single-threaded consumer of the events published by watchers."""
    def __init__(self):
        # type: () -> None
        self._queue = queue.Queue()  # type: queue.Queue
        self._stopped = False

    def create_channel(self):
        # type: () -> QueueEventChannel
        return QueueEventChannel(self._queue)

    def poll(self, timeout=None):
        # type: (Optional[float]) -> Any
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def stop(self):
        # type: () -> None
        self._stopped = True

    def run(self, handler, timeout=None):
        # type: (EventHandler, Optional[float]) -> int
        self._stopped = False
        deadline = None
        if timeout is not None:
            deadline = time.monotonic() + timeout
        dispatched = 0
        while not self._stopped:
            wait = POLL_INTERVAL
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                wait = min(wait, remaining)
            event = self.poll(wait)
            if event is None:
                continue
            LOGGER.debug("Handling event %r", event)
            try:
                self._dispatch(handler, event)
            except Exception as e:
                LOGGER.error("Could not handle event %r: %s", event, e,
                             exc_info=True)
            dispatched += 1
        return dispatched

    def _dispatch(self, handler, event):
        # type: (EventHandler, Any) -> None
        if isinstance(event, FilesChanged):
            handler.on_files_changed(event.paths)
        elif isinstance(event, WatchError):
            handler.on_watch_error(event)
        else:
            LOGGER.debug("Ignored unknown event %r", event)
