"""Tests for the resolution debug report."""

import json
from pathlib import Path

from jump_to_import.resolution_report import ResolutionAttempt, ResolutionReport


def test_report_generation(tmp_path: Path) -> None:
    """Verify that the report summarises attempts and misses."""
    report = ResolutionReport("hash123")
    report.add_attempt(
        ResolutionAttempt(
            specifier="app/models/user",
            kind="import",
            root="/r",
            strategy="alias",
            alias="app",
            candidates=["/r/src/app/models/user.js"],
            path="/r/src/app/models/user.js",
        )
    )
    report.add_attempt(
        ResolutionAttempt(
            specifier="ghost", kind="import", root="/r", strategy="external"
        )
    )

    out = tmp_path / "report.json"
    report.generate_report(str(out))
    data = json.loads(out.read_text(encoding="utf-8"))

    assert data["meta"]["config_hash"] == "hash123"
    assert data["meta"]["total_attempts"] == 2
    assert data["not_found"] == ["ghost"]
    assert data["attempts"][0]["alias"] == "app"
    assert data["stats"] == {
        "strategy_counts": {"alias": 1, "external": 1},
        "resolved": 1,
        "unresolved": 1,
    }


def test_disabled_report_records_nothing() -> None:
    """Verify a disabled report ignores attempts."""
    report = ResolutionReport(enabled=False)
    report.add_attempt(ResolutionAttempt(specifier="x", kind="import", root="/r"))
    assert report.attempts == []
    assert report.not_found == []
