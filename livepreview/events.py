"""Events published by the watcher and the channel they travel through."""
from collections import namedtuple

from typing import Any  # noqa


class FilesChanged(namedtuple('FilesChanged', ['paths'])):
    """Absolute paths of files whose content changed in one notification."""
    __slots__ = ()


class WatchError(namedtuple('WatchError', ['error'])):
    """An error raised while handling a notification in the background."""
    __slots__ = ()

    @property
    def message(self):
        # type: () -> str
        return str(self.error)


class EventChannel(object):
    def send_event(self, event):
        # type: (Any) -> None
        raise NotImplementedError('send_event')


class QueueEventChannel(EventChannel):
    """Sends events into a queue owned by the consumer.

    The queue has no size limit so sending never blocks the thread that
    observes the filesystem.
    """
    def __init__(self, queue):
        # type: (Any) -> None
        self._queue = queue

    def send_event(self, event):
        # type: (Any) -> None
        self._queue.put_nowait(event)
