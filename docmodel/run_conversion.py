"""Orchestration logic for converting a module tree into a documentation store."""

import argparse
import logging
from typing import Any

from docmodel.context import Context, context_from_config
from docmodel.convert_module import convert_crate
from docmodel.errors import CacheCorruptError, CacheUnreadableError
from docmodel.load_config import load_config
from docmodel.load_module_tree import load_module_tree
from docmodel.store import Store
from docmodel.write_doc_pages import write_doc_pages

logger = logging.getLogger(__name__)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline."""
    root = load_module_tree(args.tree)
    config = _init_config(args, default_crate_name=root.path.name)
    context = context_from_config(config)

    store = _open_store(context, config)
    before = len(store.get_modpaths())
    convert_crate(root, context, store)
    logger.info(
        "Converted %d records, %d new module paths",
        len(store.documents),
        len(store.get_modpaths()) - before,
    )

    if args.dry_run:
        print(f"Dry run: {len(store.documents)} records, nothing written.")
        return 0

    store.save()

    written = 0
    if args.render_dir:
        out_root = args.render_dir.resolve()
        out_root.mkdir(parents=True, exist_ok=True)
        written = write_doc_pages(
            store.documents,
            out_root,
            api_root=config["render"]["api_root"],
            crate_info=context.crate_info,
        )

    print(f"Saved {len(store.documents)} records into: {store.path}")
    if written:
        print(f"Generated {written} Markdown pages into: {args.render_dir}")
    return 0


def _init_config(args: argparse.Namespace, default_crate_name: str) -> dict[str, Any]:
    """Load configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.store_dir:
        config["store"]["path"] = str(args.store_dir)
    if args.crate_name:
        config["crate"]["name"] = args.crate_name
    if not config["crate"]["name"]:
        config["crate"]["name"] = default_crate_name
    return config


def _open_store(context: Context, config: dict[str, Any]) -> Store:
    """Create the store and bootstrap its module paths from the cache."""
    store = Store(
        context.store_path,
        name=config["store"]["name"] or context.crate_info.package_name,
        register_ancestors=bool(config["store"]["register_ancestor_paths"]),
    )
    try:
        store.load_cache()
    except CacheUnreadableError:
        logger.info("No usable cache at %s. Starting empty.", store.cache_file)
    except CacheCorruptError as exc:
        logger.warning("%s. Starting with an empty cache.", exc)
    return store
