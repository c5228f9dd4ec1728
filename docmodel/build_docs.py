"""Convert a frontend module tree into a documentation store.

Reads a YAML module tree, converts it into documentation records, saves the
store (path cache and documents) and optionally renders Markdown pages.
"""

import argparse
import logging
from pathlib import Path

from docmodel.errors import DocModelError
from docmodel.run_conversion import run_conversion


def main() -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Convert a module tree into a documentation store.",
    )
    ap.add_argument(
        "tree",
        type=Path,
        help="YAML file describing the parsed module tree",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--store-dir",
        type=Path,
        help="Store root directory (overrides store.path)",
    )
    ap.add_argument(
        "--crate-name",
        help="Package name used for the root module (overrides crate.name)",
    )
    ap.add_argument(
        "--render-dir",
        type=Path,
        help="Also write one Markdown page per record under this directory",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Convert and report without writing anything",
    )
    ap.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_conversion(args)
    except DocModelError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    raise SystemExit(main())
