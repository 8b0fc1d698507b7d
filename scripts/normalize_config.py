#!/usr/bin/env python3
"""Normalize an image styles config file and print the result as JSON.

Loads arrangements and groups from a YAML or JSON file, runs them through the
normalization pipeline for the given capabilities and prints the surviving
arrangements, groups and any diagnostics.

Usage:
    python scripts/normalize_config.py styles.yaml --block --inline
    python scripts/normalize_config.py --defaults --block
"""

import argparse
import json
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from imagestyle.capabilities.schemas import CapabilitySet  # noqa: E402
from imagestyle.config import StylesConfigError, configure_logging, load_styles_config  # noqa: E402
from imagestyle.diagnostics.reporter import DiagnosticsReporter, collecting_sink  # noqa: E402
from imagestyle.normalization.pipeline import resolve_styles  # noqa: E402


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Normalize an image styles configuration file"
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to a YAML or JSON styles config (omit with --defaults)",
    )
    parser.add_argument(
        "--block",
        action="store_true",
        help="Block images are supported",
    )
    parser.add_argument(
        "--inline",
        action="store_true",
        help="Inline images are supported",
    )
    parser.add_argument(
        "--defaults",
        action="store_true",
        help="Normalize the default configuration for the capabilities",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (defaults to IMAGESTYLE_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if not args.config and not args.defaults:
        parser.print_usage()
        print("Error: pass a config file or --defaults")
        return 1

    styles = None
    if args.config:
        try:
            styles = load_styles_config(args.config)
        except (FileNotFoundError, StylesConfigError) as e:
            print(f"Error: {e}")
            return 1

    # Diagnostics go into the JSON output instead of the log.
    collected = []
    reporter = DiagnosticsReporter(sink=collecting_sink(collected))
    capabilities = CapabilitySet(block=args.block, inline=args.inline)
    result = resolve_styles(styles, capabilities, reporter=reporter)

    print(json.dumps(result.model_dump(mode="json", exclude_none=True), indent=2))
    if collected:
        print(f"{len(collected)} definition(s) dropped or trimmed", file=sys.stderr)
    return 0


if __name__ == "__main__":
    exit(main())
