import logging
import time

from typing import Callable, Dict, List, Optional  # noqa

from livepreview.config import FileExtensions, WatchConfig  # noqa
from livepreview.utils import OSUtils


LOGGER = logging.getLogger(__name__)


class PathFilter(object):
    """Decides which changed paths are worth reporting.

    A path is retained when its extension matches, it is a regular file and
    it was not already retained within the last ``debounce_throttle``
    seconds. The debounce is leading edge: the first change of a burst is
    reported and the following ones inside the window are dropped, so rapid
    successive saves only surface the first of them.

    Only the thread delivering filesystem events may use an instance.
    """
    def __init__(self, extensions, debounce_throttle, osutils=None,
                 clock=None):
        # type: (FileExtensions, float, Optional[OSUtils], Optional[Callable[[], float]]) -> None  # noqa
        if osutils is None:
            osutils = OSUtils()
        if clock is None:
            clock = time.monotonic
        self._extensions = extensions
        self._debounce_throttle = debounce_throttle
        self._osutils = osutils
        self._clock = clock
        self._last_changed = {}  # type: Dict[str, float]

    @classmethod
    def from_config(cls, config, osutils=None):
        # type: (WatchConfig, Optional[OSUtils]) -> PathFilter
        return cls(config.file_extensions, config.debounce_throttle,
                   osutils=osutils)

    @property
    def debounce_throttle(self):
        # type: () -> float
        return self._debounce_throttle

    def __len__(self):
        # type: () -> int
        return len(self._last_changed)

    def __contains__(self, path):
        # type: (str) -> bool
        return path in self._last_changed

    def should_retain(self, path):
        # type: (str) -> bool
        return (self._extensions.matches(path) and
                self._osutils.file_exists(path) and
                self._debounce(path))

    def _debounce(self, path):
        # type: (str) -> bool
        now = self._clock()
        last_changed = self._last_changed.get(path)
        if last_changed is not None and \
                now - last_changed <= self._debounce_throttle:
            LOGGER.debug("Debounced file-changed event for %s", path)
            return False
        self._last_changed[path] = now
        return True

    def cleanup(self):
        # type: () -> int
        now = self._clock()
        expired = [
            path for path, last_changed in self._last_changed.items()
            if now - last_changed > self._debounce_throttle
        ]  # type: List[str]
        for path in expired:
            del self._last_changed[path]
        if expired:
            LOGGER.debug("Cleaned up file-changed event debouncer. "
                         "%d entries were expired", len(expired))
        return len(expired)
