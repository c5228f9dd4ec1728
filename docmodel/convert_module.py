"""Conversion of module trees into flat sequences of documentation records."""

import logging
from collections.abc import Iterator

from docmodel.context import Context
from docmodel.convert_items import convert_constant, convert_function
from docmodel.convert_trait import convert_trait, convert_trait_items
from docmodel.documentation import Documentation, ModuleDoc
from docmodel.modifiers import map_visibility
from docmodel.source_nodes import SourceModule, SourceTrait
from docmodel.store import Store

logger = logging.getLogger(__name__)


def convert_module(module: SourceModule, context: Context) -> list[Documentation]:
    """Flatten a module tree into records.

    Order: constants, traits, functions, then each submodule's records
    depth-first, and finally the module's own record. Record position mirrors
    tree position, so indices built over the result depend on this order.
    """
    docs: list[Documentation] = []
    docs.extend(convert_constant(c, context) for c in module.consts)
    docs.extend(convert_trait(t, context) for t in module.traits)
    docs.extend(convert_function(f, context) for f in module.fns)
    for submodule in module.mods:
        docs.extend(convert_module(submodule, context))
    # Structs, enums, imports, unions, foreign items, typedefs, statics,
    # impls and macros are not converted yet.

    name = module.ident or context.crate_info.package_name
    docs.append(
        Documentation(
            name=name,
            attrs=module.attrs,
            mod_path=module.path,
            visibility=map_visibility(module.vis),
            inner_data=ModuleDoc(is_crate=module.is_crate),
        )
    )
    return docs


def iter_traits(module: SourceModule) -> Iterator[SourceTrait]:
    """Yield every trait in a module tree, depth-first."""
    yield from module.traits
    for submodule in module.mods:
        yield from iter_traits(submodule)


def convert_crate(
    root: SourceModule, context: Context, store: Store | None = None
) -> Store:
    """Convert a whole crate into a populated, unsaved store.

    Records are appended to ``store`` when given, otherwise to a new store at
    ``context.store_path``.
    The store also receives one record per trait member so that the trait
    links can be resolved with ``Store.load_doc``.
    """
    logger.debug("Converting crate %s", context.crate_info)
    if store is None:
        store = Store(context.store_path, name=context.crate_info.package_name)
    store.add_documents(convert_module(root, context))
    for trait in iter_traits(root):
        store.add_documents(convert_trait_items(trait, context))

    for doc in store.documents:
        logger.debug("%s %s", type(doc.inner_data).__name__, doc.mod_path)
    return store
