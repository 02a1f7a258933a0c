"""Command line entry point for resolving modules outside an editor."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from jump_to_import.alias_table_builder import AliasTableBuilder
from jump_to_import.document_source import TextDocumentSource
from jump_to_import.jump_session import JumpToImport
from jump_to_import.project_config import PROJECT_CONFIG_FILE, create_default_config
from jump_to_import.settings import Settings


def _roots(args: argparse.Namespace, fallback: Path) -> list[str]:
    return [str(Path(r).resolve()) for r in (args.root or [fallback])]


def run_resolve(args: argparse.Namespace) -> int:
    """Resolve a word in a file and print the jump target as JSON."""
    settings = Settings.from_file(args.config)
    if args.report:
        settings.set("debug", True)

    source = TextDocumentSource.from_file(str(args.file), args.word, args.receiver)
    session = JumpToImport(settings, _roots(args, Path(source.path).parent))

    async def _run() -> Any:
        await session.setup()
        return await session.go_to_module(source)

    target = asyncio.run(_run())
    if args.report:
        session.report.generate_report(str(args.report))

    if target is None:
        miss = {"path": None, "method": None, "kind": None, "position": None}
        print(json.dumps(miss))
        return 1

    position = target.position
    print(
        json.dumps(
            {
                "path": target.file_path,
                "method": target.module.method,
                "kind": target.module.kind,
                "position": [position.row, position.column] if position else None,
            }
        )
    )
    return 0


def run_aliases(args: argparse.Namespace) -> int:
    """Print the merged alias table for the given roots."""
    settings = Settings.from_file(args.config)
    builder = AliasTableBuilder(settings, _roots(args, Path.cwd()))
    table = asyncio.run(builder.rebuild())
    print(
        json.dumps(
            {
                "fingerprint": table.fingerprint,
                "aliases": table.aliases,
                "errors": [str(e) for e in builder.errors],
            },
            indent=2,
            sort_keys=True,
        )
    )
    return 0


def run_init(args: argparse.Namespace) -> int:
    """Write a default per-root config file."""
    created = create_default_config(str(args.root_dir))
    if created is None:
        print(f"{PROJECT_CONFIG_FILE} already exists in {args.root_dir}")
        return 1
    print(f"Created {created}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    ap = argparse.ArgumentParser(
        description="Resolve JavaScript/Ember module references to files.",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log attempted paths and skipped config sources",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    resolve_ap = sub.add_parser("resolve", help="Resolve a word in a source file")
    resolve_ap.add_argument("file", type=Path, help="Source file containing the word")
    resolve_ap.add_argument(
        "word", help="Identifier, or quoted path literal, under the cursor"
    )
    resolve_ap.add_argument(
        "--receiver",
        help="Object the word is accessed on (for `receiver.word`)",
    )
    resolve_ap.add_argument(
        "--report", type=Path, help="Write a JSON debug report to this path"
    )

    aliases_ap = sub.add_parser("aliases", help="Print the merged alias table")

    for p in (resolve_ap, aliases_ap):
        p.add_argument(
            "--root",
            action="append",
            help="Project root (repeatable, default: the file's directory or cwd)",
        )
        p.add_argument("--config", help="Path to a YAML settings file")

    init_ap = sub.add_parser("init", help=f"Create a default {PROJECT_CONFIG_FILE}")
    init_ap.add_argument("root_dir", type=Path, help="Project root directory")

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if args.command == "resolve":
        return run_resolve(args)
    if args.command == "aliases":
        return run_aliases(args)
    return run_init(args)


if __name__ == "__main__":
    raise SystemExit(main())
