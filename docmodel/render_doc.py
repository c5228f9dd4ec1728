"""Rendering of documentation records as Markdown pages."""

from docmodel.context import CrateInfo
from docmodel.documentation import (
    Abi,
    ConstantDoc,
    Constness,
    DocType,
    Documentation,
    EnumDoc,
    FunctionDoc,
    MethodSig,
    ModuleDoc,
    StructDoc,
    TraitDoc,
    TraitItemConst,
    TraitItemDoc,
    TraitItemMacro,
    TraitItemMethod,
    TraitItemType,
    Unsafety,
    Visibility,
    kind_label,
)
from docmodel.md_codeblock import md_codeblock
from docmodel.page_path_for_modpath import page_path_for_modpath

LINK_SECTIONS = [
    (DocType.TRAIT_ITEM_CONST, "Associated Constants"),
    (DocType.TRAIT_ITEM_TYPE, "Associated Types"),
    (DocType.TRAIT_ITEM_METHOD, "Methods"),
    (DocType.TRAIT_ITEM_MACRO, "Macros"),
]


def _render_header(doc: Documentation, crate_info: CrateInfo | None) -> list[str]:
    parts = []
    if crate_info:
        parts += [f"*{crate_info}*", ""]
    parts += [f"# {kind_label(doc.inner_data)} {doc.mod_path}", ""]
    return parts


def _render_origin(doc: Documentation, api_root: str) -> list[str]:
    """Render where a trait member comes from."""
    if not isinstance(doc.inner_data, TraitItemDoc):
        return []
    parent = doc.mod_path.parent()
    if parent is None:
        return []
    page = page_path_for_modpath(api_root, parent)
    return [f"**From trait:** [{parent}]({page})", ""]


def _fn_qualifiers(sig: MethodSig | FunctionDoc) -> str:
    """Render the ``const unsafe extern "C"`` prefix of a function signature."""
    words = []
    if sig.constness == Constness.CONST:
        words.append("const")
    if sig.unsafety == Unsafety.UNSAFE:
        words.append("unsafe")
    if sig.abi != Abi.RUST:
        words.append(f'extern "{sig.abi.value}"')
    words.append("fn")
    return " ".join(words)


def _trait_item_signature(doc: Documentation, item: TraitItemDoc) -> str:
    node = item.node
    if isinstance(node, TraitItemConst):
        if node.expr:
            return f"const {doc.name}: {node.type_} = {node.expr};"
        return f"const {doc.name}: {node.type_};"
    if isinstance(node, TraitItemMethod):
        return f"{_fn_qualifiers(node.sig)} {doc.name}{node.sig.header};"
    if isinstance(node, TraitItemType):
        if node.ty:
            return f"type {doc.name} = {node.ty};"
        return f"type {doc.name};"
    if isinstance(node, TraitItemMacro):
        return node.mac
    msg = f"Unknown trait item kind: {type(node).__name__}"
    raise TypeError(msg)


def render_signature(doc: Documentation) -> str:
    """Render the declaration line of a record."""
    inner = doc.inner_data
    if isinstance(inner, FunctionDoc):
        decl = f"{_fn_qualifiers(inner)} {doc.name}{inner.header}"
    elif isinstance(inner, ModuleDoc):
        decl = f"mod {doc.mod_path}"
    elif isinstance(inner, EnumDoc):
        decl = f"enum {doc.name}"
    elif isinstance(inner, StructDoc):
        decl = f"struct {doc.name} {{ /* fields omitted */ }}"
    elif isinstance(inner, ConstantDoc):
        decl = f"const {doc.name}: {inner.type_} = {inner.expr};"
    elif isinstance(inner, TraitDoc):
        prefix = "unsafe trait" if inner.unsafety == Unsafety.UNSAFE else "trait"
        decl = f"{prefix} {doc.name} {{ /* items omitted */ }}"
    elif isinstance(inner, TraitItemDoc):
        decl = _trait_item_signature(doc, inner)
    else:
        msg = f"Unknown documentation variant: {type(inner).__name__}"
        raise TypeError(msg)

    if doc.visibility == Visibility.PUBLIC:
        return f"pub {decl}"
    return decl


def _render_links(doc: Documentation, api_root: str) -> list[str]:
    parts = []
    for doc_type, title in LINK_SECTIONS:
        links = doc.links.get(doc_type) or []
        if not links:
            continue
        parts += [f"## {title}", ""]
        for link in links:
            page = page_path_for_modpath(api_root, link.path)
            parts.append(f"- [{link.name}]({page})")
        parts.append("")
    return parts


def render_doc(
    doc: Documentation,
    *,
    api_root: str = "/api",
    crate_info: CrateInfo | None = None,
) -> str:
    """Render a documentation record as a Markdown page."""
    parts = _render_header(doc, crate_info)
    parts.extend(_render_origin(doc, api_root))
    parts += [md_codeblock("rust", render_signature(doc)), ""]

    body = "\n".join(doc.attrs).strip()
    if body:
        parts += [body, ""]

    parts.extend(_render_links(doc, api_root))
    return "\n".join(parts).rstrip() + "\n"
