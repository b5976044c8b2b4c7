#!/usr/bin/env python3
"""
godepmap CLI

A tool for scanning a Go module for imports between its own packages and
generating a directory dependency graph in various formats.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from scanner.builder import build_graph
from scanner.config import find_config, load_config, read_module_name
from scanner.errors import DepMapError
from exporters import to_dot, to_json, to_mermaid


FORMATS = ["dot", "json", "mermaid"]
ORIENTATIONS = ["LR", "TD", "TB", "RL", "BT"]


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="godepmap",
        description="Map the dependencies between the packages of a Go module.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  godepmap cmd/server                      # Module name read from ./go.mod
  godepmap cmd/server -m github.com/acme/app
  godepmap . -C ~/src/app -f mermaid       # Start at the module root
  godepmap cmd/server -o deps.dot && dot -Tsvg deps.dot > deps.svg
        """,
    )

    # Positional arguments
    parser.add_argument(
        "entry",
        nargs="?",
        default=None,
        help="Module-relative directory to start the scan from (default: .)",
    )

    parser.add_argument(
        "-m", "--module", "--gomod",
        dest="module",
        default=None,
        help="Go module name; only imports under it are followed (default: read from go.mod)",
    )

    parser.add_argument(
        "-C", "--root",
        default=".",
        help="Module root directory that entry is relative to (default: current directory)",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: dot)",
    )

    # Mermaid-specific options
    parser.add_argument(
        "--orientation",
        choices=ORIENTATIONS,
        default=None,
        help="Mermaid flowchart orientation (default: LR)",
    )

    parser.add_argument(
        "--group-by-dir",
        action="store_true",
        help="Group packages by top-level directory in Mermaid output",
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Config file (default: .godepmap.yaml/.yml/.toml/.json in the root)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every directory and dependency as it is found",
    )

    return parser.parse_args(args)


def resolve_settings(parsed: argparse.Namespace, root: Path) -> Dict[str, Any]:
    """
    Merge command line flags, config file values and go.mod.

    Flags win over the config file, which wins over go.mod and defaults.
    """
    config_path = Path(parsed.config) if parsed.config else find_config(root)
    config: Dict[str, Any] = load_config(config_path) if config_path else {}

    def pick(name: str, default: Optional[Any] = None) -> Any:
        value = getattr(parsed, name)
        if value is not None:
            return value
        return config.get(name, default)

    settings = {
        "entry": pick("entry", "."),
        "module": pick("module") or read_module_name(root),
        "format": pick("format", "dot"),
        "output": pick("output"),
        "orientation": pick("orientation", "LR"),
    }

    if settings["format"] not in FORMATS:
        raise DepMapError(f"unknown output format {settings['format']!r}")
    if settings["orientation"] not in ORIENTATIONS:
        raise DepMapError(f"unknown orientation {settings['orientation']!r}")

    return settings


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = Path(parsed.root)
    if not root.is_dir():
        print(f"Error: '{parsed.root}' is not a directory", file=sys.stderr)
        return 1

    try:
        settings = resolve_settings(parsed, root)
    except DepMapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not settings["module"]:
        print("Error: no module name given and none found in go.mod", file=sys.stderr)
        return 1

    # Build the graph
    try:
        graph = build_graph(
            entry_dir=str(settings["entry"]),
            module_prefix=settings["module"],
            root=root,
        )
    except DepMapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Generate output
    if settings["format"] == "mermaid":
        output = to_mermaid(
            graph=graph,
            orientation=settings["orientation"],
            group_by_directory=parsed.group_by_dir,
        )
    elif settings["format"] == "json":
        output = to_json(graph=graph, module=settings["module"])
    else:  # dot (default)
        output = to_dot(graph)

    # Write output
    if settings["output"]:
        try:
            output_path = Path(settings["output"])
            output_path.write_text(output + "\n", encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
