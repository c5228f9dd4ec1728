"""Data models for the parsed source tree handed over by the frontend.

The frontend has already resolved paths and printed types, expressions and
declarations back to source text, so every such field here is a plain string.
Child items of a module are partitioned by syntactic kind.
"""

from dataclasses import dataclass, field
from enum import Enum

from docmodel.mod_path import ModPath


class SourceVisibility(Enum):
    """Visibility qualifiers as written in source."""

    PUBLIC = "public"
    CRATE = "crate"
    RESTRICTED = "restricted"
    INHERITED = "inherited"


class SourceUnsafety(Enum):
    NORMAL = "normal"
    UNSAFE = "unsafe"


class SourceConstness(Enum):
    CONST = "const"
    NOT_CONST = "not_const"


class SourceAbi(Enum):
    """Calling conventions accepted by the frontend."""

    CDECL = "cdecl"
    STDCALL = "stdcall"
    FASTCALL = "fastcall"
    VECTORCALL = "vectorcall"
    AAPCS = "aapcs"
    WIN64 = "win64"
    SYSV64 = "sysv64"
    PTX_KERNEL = "ptx-kernel"
    MSP430_INTERRUPT = "msp430-interrupt"
    RUST = "rust"
    C = "c"
    SYSTEM = "system"
    RUST_INTRINSIC = "rust-intrinsic"
    RUST_CALL = "rust-call"
    PLATFORM_INTRINSIC = "platform-intrinsic"
    UNADJUSTED = "unadjusted"


@dataclass
class SourceConstant:
    """A ``const`` item."""

    ident: str
    path: ModPath
    type_: str
    expr: str
    vis: SourceVisibility = SourceVisibility.INHERITED
    attrs: list[str] = field(default_factory=list)


@dataclass
class SourceFunction:
    """A free function item."""

    ident: str
    path: ModPath
    decl: str  # printed arguments and return type, e.g. "(x: u8) -> bool"
    vis: SourceVisibility = SourceVisibility.INHERITED
    unsafety: SourceUnsafety = SourceUnsafety.NORMAL
    constness: SourceConstness = SourceConstness.NOT_CONST
    abi: SourceAbi = SourceAbi.RUST
    attrs: list[str] = field(default_factory=list)


@dataclass
class SourceMethodSig:
    decl: str
    unsafety: SourceUnsafety = SourceUnsafety.NORMAL
    constness: SourceConstness = SourceConstness.NOT_CONST
    abi: SourceAbi = SourceAbi.RUST


@dataclass
class SourceTraitConst:
    type_: str
    default: str | None = None


@dataclass
class SourceTraitMethod:
    sig: SourceMethodSig
    body: str | None = None  # default implementation, if any


@dataclass
class SourceTraitType:
    bounds: list[str] = field(default_factory=list)
    default: str | None = None


@dataclass
class SourceTraitMacro:
    mac: str  # printed macro invocation


SourceTraitItemKind = (
    SourceTraitConst | SourceTraitMethod | SourceTraitType | SourceTraitMacro
)


@dataclass
class SourceTraitItem:
    """A member declared inside a trait body."""

    ident: str
    path: ModPath
    node: SourceTraitItemKind
    attrs: list[str] = field(default_factory=list)


@dataclass
class SourceTrait:
    """A trait item with its members in source order."""

    ident: str
    path: ModPath
    vis: SourceVisibility = SourceVisibility.INHERITED
    unsafety: SourceUnsafety = SourceUnsafety.NORMAL
    items: list[SourceTraitItem] = field(default_factory=list)
    attrs: list[str] = field(default_factory=list)


@dataclass
class SourceStructField:
    type_: str
    ident: str | None = None  # tuple struct fields have no name
    vis: SourceVisibility = SourceVisibility.INHERITED
    attrs: list[str] = field(default_factory=list)


@dataclass
class SourceStruct:
    ident: str
    path: ModPath
    vis: SourceVisibility = SourceVisibility.INHERITED
    fields: list[SourceStructField] = field(default_factory=list)
    attrs: list[str] = field(default_factory=list)


@dataclass
class SourceModule:
    """A module with its children partitioned by kind.

    ``ident`` is None for the crate root.
    """

    path: ModPath
    ident: str | None = None
    vis: SourceVisibility = SourceVisibility.INHERITED
    is_crate: bool = False
    consts: list[SourceConstant] = field(default_factory=list)
    traits: list[SourceTrait] = field(default_factory=list)
    fns: list[SourceFunction] = field(default_factory=list)
    mods: list["SourceModule"] = field(default_factory=list)
    attrs: list[str] = field(default_factory=list)
