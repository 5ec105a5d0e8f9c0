import os


class OSUtils(object):
    """Filesystem metadata queries used by the watcher.

    Everything that touches the disk goes through this class so tests can
    swap in a double for paths that cannot exist on a real filesystem.
    """
    def path_exists(self, path):
        # type: (str) -> bool
        return os.path.exists(path)

    def file_exists(self, filename):
        # type: (str) -> bool
        return os.path.isfile(filename)

    def directory_exists(self, path):
        # type: (str) -> bool
        return os.path.isdir(path)

    def dirname(self, path):
        # type: (str) -> str
        return os.path.dirname(path)

    def abspath(self, path):
        # type: (str) -> str
        return os.path.abspath(path)

    def get_file_contents(self, filename, binary=True):
        # type: (str, bool) -> str
        mode = 'rb' if binary else 'r'
        with open(filename, mode) as f:
            return f.read()
