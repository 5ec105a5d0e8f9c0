"""Configuration for the change watcher.

The config file is optional JSON. Only the ``watch`` section is read::

    {
        "watch": {
            "enabled": true,
            "file_extensions": ["md", "markdown"],
            "debounce_throttle": 50
        }
    }

``debounce_throttle`` is given in milliseconds in the file and stored in
seconds on :class:`WatchConfig`.
"""
import fnmatch
import json
import logging
import os

from typing import Any, Dict, List, Optional  # noqa

from livepreview.utils import OSUtils


LOGGER = logging.getLogger(__name__)

DEFAULT_FILE_EXTENSIONS = ['md', 'mkd', 'markdown']
DEFAULT_DEBOUNCE_THROTTLE = 0.05


class ConfigError(ValueError):
    pass


class FileExtensions(object):
    """Matches a path's extension against a list of patterns.

    Patterns are extensions without the leading dot and may contain shell
    wildcards, e.g. ``['md', 'mark*']``.
    """
    def __init__(self, patterns):
        # type: (List[str]) -> None
        self._patterns = [p[1:] if p.startswith('.') else p
                          for p in patterns]

    @property
    def patterns(self):
        # type: () -> List[str]
        return list(self._patterns)

    def matches(self, path):
        # type: (str) -> bool
        ext = os.path.splitext(path)[1]
        if not ext:
            return False
        ext = ext[1:]
        return any(fnmatch.fnmatch(ext, p) for p in self._patterns)

    def __repr__(self):
        # type: () -> str
        return 'FileExtensions(%r)' % self._patterns


class WatchConfig(object):
    def __init__(self, file_extensions=None, debounce_throttle=None,
                 enabled=True):
        # type: (Optional[List[str]], Optional[float], bool) -> None
        if file_extensions is None:
            file_extensions = DEFAULT_FILE_EXTENSIONS
        if debounce_throttle is None:
            debounce_throttle = DEFAULT_DEBOUNCE_THROTTLE
        if not isinstance(file_extensions, list) or not all(
                isinstance(ext, str) for ext in file_extensions):
            raise ConfigError(
                "file_extensions must be a list of strings, got: %r"
                % (file_extensions,))
        if isinstance(debounce_throttle, bool) or \
                not isinstance(debounce_throttle, (int, float)):
            raise ConfigError(
                "debounce_throttle must be a number, got: %r"
                % (debounce_throttle,))
        if debounce_throttle < 0:
            raise ConfigError(
                "debounce_throttle must not be negative, got: %r"
                % (debounce_throttle,))
        self._file_extensions = FileExtensions(file_extensions)
        self._debounce_throttle = float(debounce_throttle)
        self._enabled = bool(enabled)

    @classmethod
    def from_dict(cls, data):
        # type: (Dict[str, Any]) -> WatchConfig
        if not isinstance(data, dict):
            raise ConfigError("Config must be a JSON object.")
        section = data.get('watch', {})
        if not isinstance(section, dict):
            raise ConfigError("The 'watch' section must be a JSON object.")
        throttle_ms = section.get('debounce_throttle')
        throttle = None
        if throttle_ms is not None:
            if isinstance(throttle_ms, bool) or \
                    not isinstance(throttle_ms, (int, float)):
                raise ConfigError(
                    "debounce_throttle must be a number of milliseconds, "
                    "got: %r" % (throttle_ms,))
            throttle = throttle_ms / 1000.0
        return cls(
            file_extensions=section.get('file_extensions'),
            debounce_throttle=throttle,
            enabled=section.get('enabled', True),
        )

    @property
    def file_extensions(self):
        # type: () -> FileExtensions
        return self._file_extensions

    @property
    def debounce_throttle(self):
        # type: () -> float
        return self._debounce_throttle

    @property
    def enabled(self):
        # type: () -> bool
        return self._enabled


def load_config(filename=None, osutils=None):
    # type: (Optional[str], Optional[OSUtils]) -> WatchConfig
    if osutils is None:
        osutils = OSUtils()
    if filename is None or not osutils.file_exists(filename):
        if filename is not None:
            LOGGER.debug("Config file %s not found, using defaults", filename)
        return WatchConfig()
    try:
        data = json.loads(osutils.get_file_contents(filename, binary=False))
    except ValueError as e:
        raise ConfigError("Unable to load the config file %s: %s"
                          % (filename, e))
    try:
        return WatchConfig.from_dict(data)
    except ConfigError as e:
        raise ConfigError("Invalid config file %s: %s" % (filename, e))
