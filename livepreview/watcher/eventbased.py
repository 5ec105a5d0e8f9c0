import logging
import os
import weakref

from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver  # noqa
from watchdog.observers.api import EventEmitter  # noqa
from watchdog.observers.api import ObservedWatch
from watchdog.events import FileSystemEventHandler
from watchdog.events import FileSystemEvent  # noqa

from livepreview.events import EventChannel, FilesChanged, WatchError  # noqa
from livepreview.utils import OSUtils
from livepreview.watcher.filter import PathFilter  # noqa
from livepreview.watcher.kinds import should_handle_event
from livepreview.watcher.resolve import find_path_to_watch
from livepreview.watcher.shared import Watcher, WatchRequestError

from typing import Any, List, Optional, Type  # noqa


LOGGER = logging.getLogger(__name__)


def event_paths(event):
    # type: (FileSystemEvent) -> List[str]
    paths = [os.fsdecode(event.src_path)]
    if event.dest_path:
        paths.append(os.fsdecode(event.dest_path))
    return paths


def reporting_emitter_class(emitter_class, channel):
    # type: (Type[EventEmitter], EventChannel) -> Type[EventEmitter]
    """Wrap a watchdog emitter so OS errors are published, not raised.

    An ``OSError`` escaping ``queue_events`` would end the emitter thread
    without anyone noticing. The error is sent as a ``WatchError`` and only
    the failing emitter is stopped; the other watched paths keep going.
    """
    class ReportingEmitter(emitter_class):  # type: ignore
        def queue_events(self, timeout, **kwargs):
            # type: (float, Any) -> None
            try:
                super(ReportingEmitter, self).queue_events(timeout, **kwargs)
            except OSError as e:
                LOGGER.error("Error on watching %s: %s", self.watch.path, e,
                             exc_info=True)
                channel.send_event(WatchError(e))
                self.stop()

    ReportingEmitter.__name__ = 'Reporting%s' % emitter_class.__name__
    return ReportingEmitter


class ReportingObserver(Observer):  # type: ignore
    """The platform observer, with emitters that report their OS errors."""
    def __init__(self, channel, **kwargs):
        # type: (EventChannel, Any) -> None
        super(ReportingObserver, self).__init__(**kwargs)
        self._emitter_class = reporting_emitter_class(
            self._emitter_class, channel)


def _stop_observer(observer):
    # type: (BaseObserver) -> None
    if observer.is_alive():
        observer.stop()
        observer.join()


class WatchDogEventAdapter(FileSystemEventHandler):
    """Turns raw watchdog events into filtered ``FilesChanged`` events.

    Runs on the observer thread. Failures are published as ``WatchError``
    events instead of being raised, since an exception here would kill the
    observer thread.
    """
    def __init__(self, channel, path_filter):
        # type: (EventChannel, PathFilter) -> None
        self._channel = channel
        self._path_filter = path_filter

    def on_any_event(self, event):
        # type: (FileSystemEvent) -> None
        try:
            self._handle_event(event)
        except Exception as e:
            LOGGER.error("Error on watching file changes: %s", e,
                         exc_info=True)
            self._channel.send_event(WatchError(e))

    def _handle_event(self, event):
        # type: (FileSystemEvent) -> None
        if not should_handle_event(event):
            LOGGER.debug("Ignored filesystem event: %r", event)
            return
        LOGGER.debug("Caught filesystem event: %r", event)
        paths = [p for p in event_paths(event)
                 if self._path_filter.should_retain(p)]
        if paths:
            LOGGER.debug("Files change event from watcher: %s", paths)
            self._channel.send_event(FilesChanged(paths))
        self._path_filter.cleanup()


class WatchdogFileWatcher(Watcher):
    """Uses watchdog to watch files for changes.

    The observer thread is stopped by ``close()``, on leaving a ``with``
    block, or when the watcher is garbage collected.
    """
    def __init__(self, channel, path_filter, osutils=None):
        # type: (EventChannel, PathFilter, Optional[OSUtils]) -> None
        super(WatchdogFileWatcher, self).__init__(channel, path_filter)
        if osutils is None:
            osutils = OSUtils()
        self._osutils = osutils
        self._adapter = WatchDogEventAdapter(channel, path_filter)
        self._observer = ReportingObserver(channel)
        self._observer.start()
        self._finalizer = weakref.finalize(
            self, _stop_observer, self._observer)

    def watch(self, path):
        # type: (str) -> None
        resolved, recursive = find_path_to_watch(path, self._osutils)
        LOGGER.debug("Watching path %s with recursive=%s",
                     resolved, recursive)
        try:
            self._observer.schedule(self._adapter, resolved,
                                    recursive=recursive)
        except OSError as e:
            raise WatchRequestError(
                "Error while starting to watch %s: %s. Note: Watching a "
                "non-existing path is unsupported. Instead watch its "
                "parent directory" % (resolved, e)) from e

    def unwatch(self, path):
        # type: (str) -> None
        resolved, recursive = find_path_to_watch(path, self._osutils)
        LOGGER.debug("Unwatching path %s with recursive=%s",
                     resolved, recursive)
        try:
            self._observer.unschedule(
                ObservedWatch(resolved, recursive=recursive))
        except KeyError as e:
            raise WatchRequestError(
                "Path %s is not being watched" % resolved) from e
        except OSError as e:
            raise WatchRequestError(
                "Error while stopping to watch %s: %s" % (resolved, e)) from e

    def close(self):
        # type: () -> None
        self._finalizer()
