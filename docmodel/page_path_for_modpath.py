"""Utilities for mapping module paths to page paths and output files."""

import re
from pathlib import Path

from docmodel.mod_path import ModPath

# Keep letters, digits, underscore and dash in each segment.
UNSAFE_SEGMENT_RE = re.compile(r"[^A-Za-z0-9_-]+")


def page_path_for_modpath(api_root: str, path: ModPath) -> str:
    """Generate the page path for a module path."""
    # mycrate::io::read -> /api/mycrate/io/read
    processed = [
        UNSAFE_SEGMENT_RE.sub("-", s).strip("-") or "_" for s in path.segments
    ]
    return f"{api_root.rstrip('/')}/{'/'.join(processed)}"


def output_file_for_page(out_root: Path, page_path: str) -> Path:
    """Determine the output file path for a given page path."""
    # /api/mycrate/io -> out_root/api/mycrate/io.md
    rel = page_path.lstrip("/") + ".md"
    p = out_root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
