from typing import Any, Optional  # noqa

from livepreview.events import EventChannel  # noqa
from livepreview.watcher.filter import PathFilter  # noqa


class WatcherError(Exception):
    pass


class PathResolutionError(WatcherError):
    def __init__(self, path):
        # type: (str) -> None
        super(PathResolutionError, self).__init__(
            "Could not watch path %s since it and all its parents "
            "don't exist" % path)
        self.path = path


class WatchRequestError(WatcherError):
    pass


class Watcher(object):
    """Watches paths and publishes change events onto a channel.

    ``FilesChanged`` and ``WatchError`` events are sent to ``channel``;
    ``path_filter`` decides which changed paths are reported.
    """
    def __init__(self, channel, path_filter):
        # type: (EventChannel, PathFilter) -> None
        self._channel = channel
        self._path_filter = path_filter

    def watch(self, path):
        # type: (str) -> None
        raise NotImplementedError('watch')

    def unwatch(self, path):
        # type: (str) -> None
        raise NotImplementedError('unwatch')

    def close(self):
        # type: () -> None
        pass

    def __enter__(self):
        # type: () -> Watcher
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        # type: (Any, Any, Any) -> None
        self.close()
