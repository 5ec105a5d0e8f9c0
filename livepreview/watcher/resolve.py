import logging

from typing import Optional, Tuple  # noqa

from livepreview.utils import OSUtils
from livepreview.watcher.shared import PathResolutionError


LOGGER = logging.getLogger(__name__)


def find_path_to_watch(path, osutils=None):
    # type: (str, Optional[OSUtils]) -> Tuple[str, bool]
    """Return the path to hand to the OS watcher and whether to recurse.

    OS watch APIs refuse paths that don't exist, so a missing path is
    replaced by its nearest existing ancestor. The ancestor is watched
    non-recursively only when it is the immediate parent; when intermediate
    directories are missing too, their future contents must be observed so
    the watch is recursive.
    """
    if osutils is None:
        osutils = OSUtils()
    path = osutils.abspath(path)
    if osutils.directory_exists(path):
        return path, True
    if osutils.path_exists(path):
        return path, False
    current = path
    recursive = False
    while True:
        parent = osutils.dirname(current)
        if parent == current:
            break
        if osutils.path_exists(parent):
            LOGGER.warning(
                "Path %s does not exist. Watching its parent directory "
                "%s instead", path, parent)
            return parent, recursive
        current = parent
        recursive = True
    raise PathResolutionError(path)
