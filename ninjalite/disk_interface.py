"""Access to the file system, abstracted so that it can be faked in tests."""

from __future__ import annotations

import abc
import os

TimeStamp = int
"""File modification time in nanoseconds; 0 means the file is missing."""

_SEPARATORS = "\\/" if os.name == "nt" else "/"


class StatError(OSError):
    """Raised when a path cannot be examined for a reason other than absence."""


def dir_name(path: str) -> str:
    """Return the directory part of ``path``, or "" if it has none.

    Runs of separators before the last component are dropped.
    """
    slash_pos = max(path.rfind(sep) for sep in _SEPARATORS)
    if slash_pos < 0:
        return ""
    while slash_pos > 0 and path[slash_pos - 1] in _SEPARATORS:
        slash_pos -= 1
    return path[:slash_pos]


class DiskInterface(abc.ABC):
    """Interface for reading, writing and examining files."""

    @abc.abstractmethod
    def stat(self, path: str) -> TimeStamp:
        """Return the mtime of ``path``, or 0 if it is missing.

        Raise StatError on any other failure.
        """

    @abc.abstractmethod
    def make_dir(self, path: str) -> None:
        """Create the directory ``path``; an existing one is not an error."""

    @abc.abstractmethod
    def write_file(self, path: str, contents: str) -> None:
        """Create ``path`` holding ``contents``."""

    @abc.abstractmethod
    def read_file(self, path: str) -> str:
        """Return the contents of ``path``.

        Raise FileNotFoundError if it is missing, OSError on other failures.
        """

    @abc.abstractmethod
    def remove_file(self, path: str) -> bool:
        """Remove ``path`` like ``rm -f``.

        Return True if it was removed and False if it did not exist; raise
        OSError on other failures.
        """

    def make_dirs(self, path: str) -> None:
        """Create every missing parent directory of ``path``, like ``mkdir -p``."""
        directory = dir_name(path)
        if not directory:
            return  # Reached the root; assume it is there.
        if self.stat(directory) > 0:
            return
        self.make_dirs(directory)
        self.make_dir(directory)


class RealDiskInterface(DiskInterface):
    """DiskInterface that works on the real file system."""

    def stat(self, path: str) -> TimeStamp:
        try:
            st = os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return 0
        except OSError as exc:
            raise StatError(
                exc.errno, f"stat({path}): {exc.strerror}"
            ) from exc
        # A zero mtime (as some sandboxes set) must not read as "missing".
        if int(st.st_mtime) == 0:
            return 1
        return st.st_mtime_ns

    def make_dir(self, path: str) -> None:
        try:
            os.mkdir(path)
        except FileExistsError:
            pass

    def write_file(self, path: str, contents: str) -> None:
        with open(
            path, "w", encoding="utf-8", errors="surrogateescape", newline=""
        ) as handle:
            handle.write(contents)

    def read_file(self, path: str) -> str:
        with open(
            path, encoding="utf-8", errors="surrogateescape", newline=""
        ) as handle:
            return handle.read()

    def remove_file(self, path: str) -> bool:
        try:
            os.remove(path)
        except FileNotFoundError:
            return False
        return True