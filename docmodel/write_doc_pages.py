"""Logic for writing documentation pages to disk."""

from pathlib import Path

from docmodel.context import CrateInfo
from docmodel.documentation import Documentation
from docmodel.page_path_for_modpath import output_file_for_page, page_path_for_modpath
from docmodel.render_doc import render_doc


def write_doc_pages(
    documents: list[Documentation],
    out_root: Path,
    *,
    api_root: str = "/api",
    crate_info: CrateInfo | None = None,
) -> int:
    """Write one Markdown page per record and return the number written."""
    written = 0
    total = len(documents)
    print(f"Writing {total} documentation pages...")
    for doc in documents:
        page_path = page_path_for_modpath(api_root, doc.mod_path)
        md = render_doc(doc, api_root=api_root, crate_info=crate_info)
        out_file = output_file_for_page(out_root, page_path)
        out_file.write_text(md, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} pages")
    return written
