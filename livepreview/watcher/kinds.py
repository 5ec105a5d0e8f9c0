"""Decides which raw watchdog events mean "file content changed".

The backends disagree on how they report writes. inotify sends a close
event after a file opened for writing is closed, and reports attribute
changes (chmod, touch) as plain modifications, so on Linux only creation
and close-after-write count. A write on Linux therefore only surfaces once
the writer closes the file: a process that keeps the file open while
appending, or writes through mmap, produces no event until it closes it.
FSEvents and ReadDirectoryChangesW fold most
changes into a single modified event, so there modifications count.
"""
import sys

from watchdog.events import EVENT_TYPE_CLOSED
from watchdog.events import EVENT_TYPE_CREATED
from watchdog.events import EVENT_TYPE_MODIFIED
from watchdog.events import FileSystemEvent  # noqa


_INOTIFY_CONTENT_EVENTS = frozenset([EVENT_TYPE_CREATED, EVENT_TYPE_CLOSED])
_GENERIC_CONTENT_EVENTS = frozenset([EVENT_TYPE_CREATED, EVENT_TYPE_MODIFIED])


def should_handle_inotify_event(event):
    # type: (FileSystemEvent) -> bool
    return (not event.is_directory and
            event.event_type in _INOTIFY_CONTENT_EVENTS)


def should_handle_generic_event(event):
    # type: (FileSystemEvent) -> bool
    return (not event.is_directory and
            event.event_type in _GENERIC_CONTENT_EVENTS)


if sys.platform.startswith('linux'):
    should_handle_event = should_handle_inotify_event
else:
    should_handle_event = should_handle_generic_event
