"""Conversion of traits and their members into documentation."""

from docmodel.context import Context
from docmodel.documentation import (
    DocLink,
    DocType,
    Documentation,
    MethodSig,
    TraitDoc,
    TraitItemConst,
    TraitItemDoc,
    TraitItemKind,
    TraitItemMacro,
    TraitItemMethod,
    TraitItemType,
    Visibility,
)
from docmodel.modifiers import map_abi, map_constness, map_unsafety, map_visibility
from docmodel.source_nodes import (
    SourceMethodSig,
    SourceTrait,
    SourceTraitConst,
    SourceTraitItem,
    SourceTraitItemKind,
    SourceTraitMacro,
    SourceTraitMethod,
    SourceTraitType,
)

# Source member kind -> link category. Every kind must be listed.
TRAIT_ITEM_DOC_TYPES: dict[type, DocType] = {
    SourceTraitConst: DocType.TRAIT_ITEM_CONST,
    SourceTraitMethod: DocType.TRAIT_ITEM_METHOD,
    SourceTraitType: DocType.TRAIT_ITEM_TYPE,
    SourceTraitMacro: DocType.TRAIT_ITEM_MACRO,
}


def convert_trait(node: SourceTrait, context: Context) -> Documentation:
    """Convert a trait; its members are listed as links, not embedded."""
    return Documentation(
        name=node.ident,
        attrs=node.attrs,
        mod_path=node.path,
        visibility=map_visibility(node.vis),
        inner_data=TraitDoc(unsafety=map_unsafety(node.unsafety)),
        links=classify_trait_items(node.items, context),
    )


def classify_trait_items(
    items: list[SourceTraitItem], context: Context
) -> dict[DocType, list[DocLink]]:
    """Group trait members into const/method/type/macro links.

    Each member lands in exactly one group, groups keep source order, and all
    four categories are present even when empty.
    """
    links: dict[DocType, list[DocLink]] = {
        doc_type: [] for doc_type in TRAIT_ITEM_DOC_TYPES.values()
    }
    for item in items:
        doc_type = TRAIT_ITEM_DOC_TYPES.get(type(item.node))
        if doc_type is None:
            kind = type(item.node).__name__
            msg = f"Unknown trait item kind for {item.path}: {kind}"
            raise TypeError(msg)
        links[doc_type].append(DocLink(name=item.ident, path=item.path))
    return links


def convert_trait_item(node: SourceTraitItem, context: Context) -> Documentation:
    """Convert a single trait member into its own record."""
    return Documentation(
        name=node.ident,
        attrs=node.attrs,
        mod_path=node.path,
        # Trait members share the trait's visibility.
        visibility=Visibility.INHERITED,
        inner_data=TraitItemDoc(node=convert_trait_item_kind(node.node, context)),
    )


def convert_trait_items(node: SourceTrait, context: Context) -> list[Documentation]:
    """Convert every member of a trait, in source order."""
    return [convert_trait_item(item, context) for item in node.items]


def convert_trait_item_kind(
    node: SourceTraitItemKind, context: Context
) -> TraitItemKind:
    """Keep signature-level detail only; bodies and bounds are dropped."""
    if isinstance(node, SourceTraitConst):
        return TraitItemConst(type_=node.type_, expr=node.default)
    if isinstance(node, SourceTraitMethod):
        return TraitItemMethod(sig=convert_method_sig(node.sig, context))
    if isinstance(node, SourceTraitType):
        return TraitItemType(ty=node.default)
    if isinstance(node, SourceTraitMacro):
        return TraitItemMacro(mac=node.mac)
    msg = f"Unknown trait item kind: {type(node).__name__}"
    raise TypeError(msg)


def convert_method_sig(sig: SourceMethodSig, context: Context) -> MethodSig:
    return MethodSig(
        header=sig.decl,
        unsafety=map_unsafety(sig.unsafety),
        constness=map_constness(sig.constness),
        abi=map_abi(sig.abi),
    )
