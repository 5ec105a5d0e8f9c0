import sys

import pytest

from livepreview.config import FileExtensions
from livepreview.watcher.filter import PathFilter


linux_only = pytest.mark.skipif(
    not sys.platform.startswith('linux'),
    reason='Relies on inotify close-after-write events.')


class FakeClock(object):
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RecordingChannel(object):
    def __init__(self):
        self.events = []

    def send_event(self, event):
        self.events.append(event)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def channel():
    return RecordingChannel()


@pytest.fixture
def path_filter_factory(clock):
    def factory(extensions=('md',), debounce_throttle=0.3, osutils=None):
        return PathFilter(FileExtensions(list(extensions)),
                          debounce_throttle, osutils=osutils, clock=clock)
    return factory

