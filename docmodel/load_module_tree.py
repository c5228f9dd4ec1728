"""Loading of frontend module trees from YAML descriptions.

The expected layout mirrors ``SourceModule``::

    path: mycrate
    is_crate: true
    attrs: ["Crate docs."]
    consts:
      - {ident: MAX, type: usize, expr: "16", vis: public}
    fns:
      - {ident: read, decl: "(buf: &mut [u8]) -> usize", abi: c}
    traits:
      - ident: Reader
        items:
          - {ident: read, kind: method, decl: "(&mut self) -> u8"}
          - {ident: Item, kind: type, default: u8}
    mods:
      - {ident: io, vis: public}

Paths are ``::``-separated; an item without ``path`` lives at its parent's
path plus its own ident. Modifier fields take the lower-case enum values.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from docmodel.errors import TreeLoadError
from docmodel.mod_path import ModPath
from docmodel.source_nodes import (
    SourceAbi,
    SourceConstant,
    SourceConstness,
    SourceFunction,
    SourceMethodSig,
    SourceModule,
    SourceTrait,
    SourceTraitConst,
    SourceTraitItem,
    SourceTraitItemKind,
    SourceTraitMacro,
    SourceTraitMethod,
    SourceTraitType,
    SourceUnsafety,
    SourceVisibility,
)

logger = logging.getLogger(__name__)


def load_module_tree(path: Path) -> SourceModule:
    """Load a YAML module tree file into source nodes."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Couldn't load module tree {path}"
        raise TreeLoadError(msg) from exc
    if not isinstance(raw, dict):
        msg = f"Module tree {path} must be a mapping"
        raise TreeLoadError(msg)
    return module_from_dict(raw)


def module_from_dict(
    data: dict[str, Any], parent: ModPath | None = None
) -> SourceModule:
    """Build a module node and all of its children."""
    if not isinstance(data, dict):
        msg = f"Module entry under {parent} must be a mapping, got {data!r}"
        raise TreeLoadError(msg)
    try:
        ident = data.get("ident")
        path = _item_path(data, parent, ident)
        module = SourceModule(
            path=path,
            ident=str(ident) if ident else None,
            vis=SourceVisibility(data.get("vis", "inherited")),
            is_crate=bool(data.get("is_crate", parent is None)),
            attrs=_attrs(data),
        )
        module.consts = [_constant(c, path) for c in data.get("consts") or []]
        module.traits = [_trait(t, path) for t in data.get("traits") or []]
        module.fns = [_function(f, path) for f in data.get("fns") or []]
        children = data.get("mods") or []
        if not isinstance(children, list):
            msg = f"'mods' must be a list, got {children!r}"
            raise TypeError(msg)
    except (KeyError, ValueError, TypeError, AttributeError) as exc:
        where = data.get("path") or data.get("ident") or "<root>"
        msg = f"Invalid module tree entry at {where}: {exc}"
        raise TreeLoadError(msg) from exc

    module.mods = [module_from_dict(m, path) for m in children]
    logger.debug(
        "Loaded module %s: %d consts, %d traits, %d fns, %d mods",
        path,
        len(module.consts),
        len(module.traits),
        len(module.fns),
        len(module.mods),
    )
    return module


def _item_path(data: dict[str, Any], parent: ModPath | None, ident: Any) -> ModPath:
    if data.get("path"):
        return ModPath.from_str(str(data["path"]))
    if parent is None or not ident:
        msg = "needs either 'path' or an 'ident' inside a parent module"
        raise ValueError(msg)
    return parent.child(str(ident))


def _attrs(data: dict[str, Any]) -> list[str]:
    return [str(a) for a in data.get("attrs") or []]


def _constant(data: dict[str, Any], parent: ModPath) -> SourceConstant:
    ident = str(data["ident"])
    return SourceConstant(
        ident=ident,
        path=_item_path(data, parent, ident),
        type_=str(data["type"]),
        expr=str(data["expr"]),
        vis=SourceVisibility(data.get("vis", "inherited")),
        attrs=_attrs(data),
    )


def _method_sig(data: dict[str, Any]) -> SourceMethodSig:
    return SourceMethodSig(
        decl=str(data.get("decl", "()")),
        unsafety=SourceUnsafety(data.get("unsafety", "normal")),
        constness=SourceConstness(data.get("constness", "not_const")),
        abi=SourceAbi(data.get("abi", "rust")),
    )


def _function(data: dict[str, Any], parent: ModPath) -> SourceFunction:
    ident = str(data["ident"])
    sig = _method_sig(data)
    return SourceFunction(
        ident=ident,
        path=_item_path(data, parent, ident),
        decl=sig.decl,
        vis=SourceVisibility(data.get("vis", "inherited")),
        unsafety=sig.unsafety,
        constness=sig.constness,
        abi=sig.abi,
        attrs=_attrs(data),
    )


def _trait_item_kind(data: dict[str, Any]) -> SourceTraitItemKind:
    kind = data["kind"]
    if kind == "const":
        return SourceTraitConst(type_=str(data["type"]), default=data.get("default"))
    if kind == "method":
        return SourceTraitMethod(sig=_method_sig(data), body=data.get("body"))
    if kind == "type":
        return SourceTraitType(
            bounds=[str(b) for b in data.get("bounds") or []],
            default=data.get("default"),
        )
    if kind == "macro":
        return SourceTraitMacro(mac=str(data["mac"]))
    msg = f"unknown trait item kind {kind!r}"
    raise ValueError(msg)


def _trait(data: dict[str, Any], parent: ModPath) -> SourceTrait:
    ident = str(data["ident"])
    path = _item_path(data, parent, ident)
    items = []
    for item in data.get("items") or []:
        item_ident = str(item["ident"])
        items.append(
            SourceTraitItem(
                ident=item_ident,
                path=_item_path(item, path, item_ident),
                node=_trait_item_kind(item),
                attrs=_attrs(item),
            )
        )
    return SourceTrait(
        ident=ident,
        path=path,
        vis=SourceVisibility(data.get("vis", "inherited")),
        unsafety=SourceUnsafety(data.get("unsafety", "normal")),
        items=items,
        attrs=_attrs(data),
    )
