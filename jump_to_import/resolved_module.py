"""Data model for the outcome of resolving a specifier to a file."""

from dataclasses import dataclass

from jump_to_import.specifier import SpecifierKind


@dataclass(frozen=True)
class ResolvedModule:
    """Represents the outcome of resolving a specifier to a file path.

    A null `path` with a non-null `method` means the symbol should be looked up
    in the currently active document instead of opening a new one.
    """

    path: str | None
    method: str | None
    kind: SpecifierKind | None = None

    @property
    def found(self) -> bool:
        """Whether there is anything for the caller to act on."""
        return self.path is not None or self.method is not None
