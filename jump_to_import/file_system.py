"""File system access used by the resolver and the config loaders."""

import os
from pathlib import Path

# (mtime in ns, size) of a file, or None when it is missing
FileStamp = tuple[int, int] | None


class LocalFileSystem:
    """Synchronous existence checks and reads against the local disk."""

    def exists(self, path: str) -> bool:
        """Check whether a regular file exists at `path`."""
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        """Read a UTF-8 text file."""
        return Path(path).read_text(encoding="utf-8")

    def stamp(self, path: str) -> FileStamp:
        """Return a cheap change marker for `path`."""
        try:
            st = os.stat(path)
        except OSError:
            return None
        return st.st_mtime_ns, st.st_size
