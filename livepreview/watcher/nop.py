from livepreview.watcher.shared import Watcher


class NopFileWatcher(Watcher):
    """Watcher used when watching is disabled. Never publishes events."""
    def watch(self, path):
        # type: (str) -> None
        pass

    def unwatch(self, path):
        # type: (str) -> None
        pass
