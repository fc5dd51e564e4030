"""Command line entry point: fix the imports of a module read from stdin."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from fix_imports.errors import FixImportsError
from fix_imports.fix_module import fix_module
from fix_imports.load_config import DEFAULT_CONFIG_FILE, load_config
from fix_imports.load_parsed_module import load_parsed_module
from fix_imports.models import FixResult
from fix_imports.registry import GhcPkgRegistry, Registry, SnapshotRegistry


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    ap = argparse.ArgumentParser(
        prog="fix-imports",
        description=(
            "Add missing qualified imports and remove unused ones. Reads the "
            "module source on stdin and writes the fixed source to stdout."
        ),
    )
    ap.add_argument(
        "module_path",
        help="Path of the module being fixed, used to prefer nearby modules",
    )
    ap.add_argument(
        "--parsed",
        type=Path,
        required=True,
        help="Parsed module dump (JSON or YAML) produced by the front-end",
    )
    ap.add_argument(
        "-i",
        dest="includes",
        action="append",
        default=[],
        metavar="PATH",
        help="Add to the module include path",
    )
    ap.add_argument(
        "-v",
        dest="verbose",
        action="store_true",
        help="Print added and removed modules on stderr",
    )
    ap.add_argument(
        "--debug",
        action="store_true",
        help="Print debugging info on stderr",
    )
    ap.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Configuration file (default: {DEFAULT_CONFIG_FILE})",
    )
    ap.add_argument(
        "--registry-dump",
        type=Path,
        help="Use a saved package listing instead of running ghc-pkg",
    )
    return ap


def make_registry(args: argparse.Namespace, executable: str) -> Registry:
    """Pick the package registry to consult."""
    if args.registry_dump:
        return SnapshotRegistry(args.registry_dump.read_text(encoding="utf-8"))
    return GhcPkgRegistry(executable)


def summarize(result: FixResult) -> str:
    """Describe what changed, e.g. ``added: A; removed: B``."""
    parts = []
    if result.added:
        parts.append("added: " + ", ".join(result.added))
    if result.removed:
        parts.append("removed: " + ", ".join(result.removed))
    return "; ".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Run the import fixer."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    source = sys.stdin.read()
    try:
        config, config_errors = load_config(args.config)
        for error in config_errors:
            print(f"config: {error}", file=sys.stderr)
        config["include"] = args.includes + config["include"]
        parsed = load_parsed_module(args.parsed)
        registry = make_registry(args, config["ghc-pkg"])
        result = fix_module(config, args.module_path, parsed, source, registry)
    except (FixImportsError, ValueError, OSError, yaml.YAMLError) as e:
        sys.stdout.write(source)
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(result.text)
    summary = summarize(result)
    if args.verbose and summary:
        print(summary, file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
