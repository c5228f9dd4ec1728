"""Conversion of documentation records to and from JSON-compatible dicts."""

from typing import Any

from docmodel.documentation import (
    Abi,
    ConstantDoc,
    Constness,
    DocInnerData,
    DocLink,
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
    TraitItemKind,
    TraitItemMacro,
    TraitItemMethod,
    TraitItemType,
    Unsafety,
    Visibility,
)
from docmodel.mod_path import ModPath


def doc_to_dict(doc: Documentation) -> dict[str, Any]:
    """Serialize a record. Link categories are written in a stable order."""
    return {
        "name": doc.name,
        "attrs": list(doc.attrs),
        "mod_path": doc.mod_path.to_json(),
        "visibility": doc.visibility.value if doc.visibility else None,
        "inner_data": inner_data_to_dict(doc.inner_data),
        "links": {
            doc_type.value: [
                {"name": link.name, "path": link.path.to_json()}
                for link in doc.links[doc_type]
            ]
            for doc_type in DocType
            if doc_type in doc.links
        },
    }


def doc_from_dict(data: dict[str, Any]) -> Documentation:
    """Rebuild a record; raises KeyError/ValueError on malformed input."""
    visibility = data.get("visibility")
    return Documentation(
        name=str(data["name"]),
        attrs=[str(a) for a in data.get("attrs") or []],
        mod_path=ModPath.from_segments(data["mod_path"]),
        visibility=Visibility(visibility) if visibility else None,
        inner_data=inner_data_from_dict(data["inner_data"]),
        links={
            DocType(key): [
                DocLink(name=str(x["name"]), path=ModPath.from_segments(x["path"]))
                for x in links
            ]
            for key, links in (data.get("links") or {}).items()
        },
    )


def _sig_to_dict(sig: MethodSig | FunctionDoc) -> dict[str, Any]:
    return {
        "header": sig.header,
        "unsafety": sig.unsafety.value,
        "constness": sig.constness.value,
        "abi": sig.abi.value,
    }


def _sig_from_dict(data: dict[str, Any]) -> MethodSig:
    return MethodSig(
        header=str(data["header"]),
        unsafety=Unsafety(data["unsafety"]),
        constness=Constness(data["constness"]),
        abi=Abi(data["abi"]),
    )


def inner_data_to_dict(inner: DocInnerData) -> dict[str, Any]:
    """Serialize any inner data variant under a ``kind`` tag."""
    if isinstance(inner, ModuleDoc):
        return {"kind": "module", "is_crate": inner.is_crate}
    if isinstance(inner, ConstantDoc):
        return {"kind": "constant", "type": inner.type_, "expr": inner.expr}
    if isinstance(inner, FunctionDoc):
        return {"kind": "function", **_sig_to_dict(inner)}
    if isinstance(inner, TraitDoc):
        return {"kind": "trait", "unsafety": inner.unsafety.value}
    if isinstance(inner, TraitItemDoc):
        return {"kind": "trait_item", "node": trait_item_kind_to_dict(inner.node)}
    if isinstance(inner, StructDoc):
        return {"kind": "struct", "fields": dict(inner.fields)}
    if isinstance(inner, EnumDoc):
        return {"kind": "enum"}
    msg = f"Unknown documentation variant: {type(inner).__name__}"
    raise TypeError(msg)


def inner_data_from_dict(data: dict[str, Any]) -> DocInnerData:
    kind = data["kind"]
    if kind == "module":
        return ModuleDoc(is_crate=bool(data.get("is_crate")))
    if kind == "constant":
        return ConstantDoc(type_=str(data["type"]), expr=str(data["expr"]))
    if kind == "function":
        sig = _sig_from_dict(data)
        return FunctionDoc(
            header=sig.header,
            unsafety=sig.unsafety,
            constness=sig.constness,
            abi=sig.abi,
        )
    if kind == "trait":
        return TraitDoc(unsafety=Unsafety(data["unsafety"]))
    if kind == "trait_item":
        return TraitItemDoc(node=trait_item_kind_from_dict(data["node"]))
    if kind == "struct":
        return StructDoc(fields=dict(data.get("fields") or {}))
    if kind == "enum":
        return EnumDoc()
    msg = f"Unknown documentation kind: {kind!r}"
    raise ValueError(msg)


def trait_item_kind_to_dict(node: TraitItemKind) -> dict[str, Any]:
    if isinstance(node, TraitItemConst):
        return {"kind": "const", "type": node.type_, "expr": node.expr}
    if isinstance(node, TraitItemMethod):
        return {"kind": "method", "sig": _sig_to_dict(node.sig)}
    if isinstance(node, TraitItemType):
        return {"kind": "type", "ty": node.ty}
    if isinstance(node, TraitItemMacro):
        return {"kind": "macro", "mac": node.mac}
    msg = f"Unknown trait item kind: {type(node).__name__}"
    raise TypeError(msg)


def trait_item_kind_from_dict(data: dict[str, Any]) -> TraitItemKind:
    kind = data["kind"]
    if kind == "const":
        return TraitItemConst(type_=str(data["type"]), expr=data.get("expr"))
    if kind == "method":
        return TraitItemMethod(sig=_sig_from_dict(data["sig"]))
    if kind == "type":
        return TraitItemType(ty=data.get("ty"))
    if kind == "macro":
        return TraitItemMacro(mac=str(data["mac"]))
    msg = f"Unknown trait item kind: {kind!r}"
    raise ValueError(msg)
