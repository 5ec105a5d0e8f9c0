from typing import Optional  # noqa

from livepreview.config import WatchConfig  # noqa
from livepreview.events import EventChannel  # noqa
from livepreview.utils import OSUtils  # noqa
from livepreview.watcher.filter import PathFilter
from livepreview.watcher.nop import NopFileWatcher
from livepreview.watcher.shared import Watcher  # noqa


def create_watcher(channel, config, osutils=None):
    # type: (EventChannel, WatchConfig, Optional[OSUtils]) -> Watcher
    path_filter = PathFilter.from_config(config, osutils=osutils)
    if not config.enabled:
        return NopFileWatcher(channel, path_filter)
    from livepreview.watcher.eventbased import WatchdogFileWatcher
    return WatchdogFileWatcher(channel, path_filter, osutils=osutils)
