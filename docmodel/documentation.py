"""Data models for normalized documentation records."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from docmodel.mod_path import ModPath


class Visibility(Enum):
    PUBLIC = "public"
    INHERITED = "inherited"
    PRIVATE = "private"


class Unsafety(Enum):
    NORMAL = "normal"
    UNSAFE = "unsafe"


class Constness(Enum):
    CONST = "const"
    NOT_CONST = "not_const"


class Abi(Enum):
    """Calling conventions; values are the names written in ``extern "..."``."""

    CDECL = "cdecl"
    STDCALL = "stdcall"
    FASTCALL = "fastcall"
    VECTORCALL = "vectorcall"
    AAPCS = "aapcs"
    WIN64 = "win64"
    SYSV64 = "sysv64"
    PTX_KERNEL = "ptx-kernel"
    MSP430_INTERRUPT = "msp430-interrupt"
    RUST = "Rust"
    C = "C"
    SYSTEM = "system"
    RUST_INTRINSIC = "rust-intrinsic"
    RUST_CALL = "rust-call"
    PLATFORM_INTRINSIC = "platform-intrinsic"
    UNADJUSTED = "unadjusted"


class DocType(Enum):
    """Categories of related items listed in a record's links."""

    TRAIT_ITEM_CONST = "trait_item_const"
    TRAIT_ITEM_METHOD = "trait_item_method"
    TRAIT_ITEM_TYPE = "trait_item_type"
    TRAIT_ITEM_MACRO = "trait_item_macro"


@dataclass(frozen=True)
class DocLink:
    """Reference to another record by name and path only."""

    name: str
    path: ModPath


@dataclass(frozen=True)
class Generics:
    """Placeholder; generic parameters and bounds are not recorded yet."""


@dataclass(frozen=True)
class MethodSig:
    header: str
    unsafety: Unsafety
    constness: Constness
    abi: Abi


@dataclass(frozen=True)
class TraitItemConst:
    type_: str
    expr: str | None = None


@dataclass(frozen=True)
class TraitItemMethod:
    sig: MethodSig


@dataclass(frozen=True)
class TraitItemType:
    ty: str | None = None


@dataclass(frozen=True)
class TraitItemMacro:
    mac: str


TraitItemKind = TraitItemConst | TraitItemMethod | TraitItemType | TraitItemMacro


@dataclass(frozen=True)
class ModuleDoc:
    is_crate: bool = False


@dataclass(frozen=True)
class ConstantDoc:
    type_: str
    expr: str


@dataclass(frozen=True)
class FunctionDoc:
    header: str
    unsafety: Unsafety
    constness: Constness
    abi: Abi
    generics: Generics = field(default_factory=Generics)


@dataclass(frozen=True)
class TraitDoc:
    unsafety: Unsafety


@dataclass(frozen=True)
class TraitItemDoc:
    node: TraitItemKind


@dataclass(frozen=True)
class StructDoc:
    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


@dataclass(frozen=True)
class EnumDoc:
    """Reserved; no conversion produces enum records yet."""


DocInnerData = (
    ModuleDoc
    | ConstantDoc
    | FunctionDoc
    | TraitDoc
    | TraitItemDoc
    | StructDoc
    | EnumDoc
)

# Every inner data variant and its display label.
INNER_DATA_KINDS: dict[type, str] = {
    ModuleDoc: "Module",
    ConstantDoc: "Constant",
    FunctionDoc: "Function",
    TraitDoc: "Trait",
    TraitItemDoc: "Trait Item",
    StructDoc: "Struct",
    EnumDoc: "Enum",
}


def kind_label(inner_data: DocInnerData) -> str:
    """Return the display label for an inner data variant."""
    try:
        return INNER_DATA_KINDS[type(inner_data)]
    except KeyError:
        msg = f"Unknown documentation variant: {type(inner_data).__name__}"
        raise TypeError(msg) from None


@dataclass(frozen=True)
class Documentation:
    """One documented entity (module, function, trait, ...).

    Records are immutable: ``attrs`` is stored as a tuple and ``links`` as a
    read-only mapping of tuples, whatever sequences the caller passed in.
    """

    name: str
    mod_path: ModPath
    inner_data: DocInnerData
    attrs: Sequence[str] = ()
    visibility: Visibility | None = None
    links: Mapping[DocType, Sequence[DocLink]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", tuple(self.attrs))
        links = {doc_type: tuple(v) for doc_type, v in self.links.items()}
        object.__setattr__(self, "links", MappingProxyType(links))
