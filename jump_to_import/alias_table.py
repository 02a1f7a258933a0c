"""Data model for the merged alias table."""

import hashlib
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AliasTable:
    """Alias -> target mappings, scoped per project root."""

    aliases: dict[str, dict[str, str]] = field(default_factory=dict)

    def for_root(self, root: str) -> dict[str, str]:
        """Return the alias map for a root (empty if unknown)."""
        return self.aliases.get(root, {})

    def keys_longest_first(self, root: str) -> list[str]:
        """Alias keys of a root sorted longest first, ties broken lexically."""
        return sorted(self.for_root(root), key=lambda k: (-len(k), k))

    def match(self, root: str, specifier: str) -> tuple[str, str] | None:
        """Return the longest alias key that literally prefixes `specifier`.

        Matching is plain string prefixing, not path-segment aware: an alias
        `foo` also matches `foobar/x`.
        """
        aliases = self.for_root(root)
        for key in self.keys_longest_first(root):
            if specifier.startswith(key):
                return key, aliases[key]
        return None

    @property
    def fingerprint(self) -> str:
        """Stable sha256 of the table in matching order.

        Two tables with the same fingerprint resolve every specifier the same
        way, whatever order their sources were merged in.
        """
        digest = hashlib.sha256()
        for root in sorted(self.aliases):
            digest.update(f"root\0{root}\0".encode())
            aliases = self.for_root(root)
            for key in self.keys_longest_first(root):
                digest.update(f"{key}\0{aliases[key]}\0".encode())
        return digest.hexdigest()
