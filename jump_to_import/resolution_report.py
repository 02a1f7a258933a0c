"""Debug report of attempted resolutions and near misses."""

import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class ResolutionAttempt:
    """What the resolver tried for a single specifier."""

    specifier: str
    kind: str
    root: str
    strategy: str = ""  # service/template/relative_child/external/...
    alias: str | None = None
    candidates: list[str] = field(default_factory=list)
    path: str | None = None


class ResolutionReport:
    """Collects resolution attempts and the paths that could not be found."""

    def __init__(self, config_hash: str = "", *, enabled: bool = True) -> None:
        """Initialize an empty report."""
        self.config_hash = config_hash
        self.enabled = enabled
        self.attempts: list[ResolutionAttempt] = []
        self.not_found: list[str] = []
        self.start_time = time.time()

    def add_attempt(self, attempt: ResolutionAttempt) -> None:
        """Record an attempt; misses are also added to `not_found` once."""
        if not self.enabled:
            return
        self.attempts.append(attempt)
        if attempt.path is None:
            logger.debug(
                "Unresolved %s %r via %s, tried %s",
                attempt.kind,
                attempt.specifier,
                attempt.strategy or "nothing",
                attempt.candidates,
            )
            if attempt.specifier not in self.not_found:
                self.not_found.append(attempt.specifier)

    def generate_report(self, path: str) -> None:
        """Write the report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_attempts": len(self.attempts),
            },
            "attempts": [
                {
                    "specifier": a.specifier,
                    "kind": a.kind,
                    "root": a.root,
                    "strategy": a.strategy,
                    "alias": a.alias,
                    "candidates": a.candidates,
                    "path": a.path,
                }
                for a in self.attempts
            ],
            "not_found": self.not_found,
            "stats": self._compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        strategy_counts: dict[str, int] = {}
        for a in self.attempts:
            strategy_counts[a.strategy] = strategy_counts.get(a.strategy, 0) + 1
        resolved = sum(1 for a in self.attempts if a.path is not None)
        return {
            "strategy_counts": strategy_counts,
            "resolved": resolved,
            "unresolved": len(self.attempts) - resolved,
        }
