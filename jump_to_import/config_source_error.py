"""Error raised when one alias configuration source cannot be loaded."""


class ConfigSourceError(Exception):
    """A malformed alias source, isolated from the other sources."""

    def __init__(self, root: str, source: str, message: str) -> None:
        """Record the owning root, the offending file and what went wrong."""
        super().__init__(f"{source}: {message}")
        self.root = root
        self.source = source
        self.message = message
