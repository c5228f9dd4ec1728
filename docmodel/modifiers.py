"""Mappings from source-level modifiers to their normalized equivalents."""

from docmodel.documentation import Abi, Constness, Unsafety, Visibility
from docmodel.source_nodes import (
    SourceAbi,
    SourceConstness,
    SourceUnsafety,
    SourceVisibility,
)

_VISIBILITY = {
    SourceVisibility.PUBLIC: Visibility.PUBLIC,
    SourceVisibility.INHERITED: Visibility.INHERITED,
}

_UNSAFETY = {
    SourceUnsafety.NORMAL: Unsafety.NORMAL,
    SourceUnsafety.UNSAFE: Unsafety.UNSAFE,
}

_CONSTNESS = {
    SourceConstness.CONST: Constness.CONST,
    SourceConstness.NOT_CONST: Constness.NOT_CONST,
}

ABI_TABLE: dict[SourceAbi, Abi] = {
    SourceAbi.CDECL: Abi.CDECL,
    SourceAbi.STDCALL: Abi.STDCALL,
    SourceAbi.FASTCALL: Abi.FASTCALL,
    SourceAbi.VECTORCALL: Abi.VECTORCALL,
    SourceAbi.AAPCS: Abi.AAPCS,
    SourceAbi.WIN64: Abi.WIN64,
    SourceAbi.SYSV64: Abi.SYSV64,
    SourceAbi.PTX_KERNEL: Abi.PTX_KERNEL,
    SourceAbi.MSP430_INTERRUPT: Abi.MSP430_INTERRUPT,
    SourceAbi.RUST: Abi.RUST,
    SourceAbi.C: Abi.C,
    SourceAbi.SYSTEM: Abi.SYSTEM,
    SourceAbi.RUST_INTRINSIC: Abi.RUST_INTRINSIC,
    SourceAbi.RUST_CALL: Abi.RUST_CALL,
    SourceAbi.PLATFORM_INTRINSIC: Abi.PLATFORM_INTRINSIC,
    SourceAbi.UNADJUSTED: Abi.UNADJUSTED,
}


def map_visibility(vis: SourceVisibility) -> Visibility:
    """Map a source visibility; crate-local and restricted forms become PRIVATE."""
    return _VISIBILITY.get(vis, Visibility.PRIVATE)


def map_unsafety(unsafety: SourceUnsafety) -> Unsafety:
    return _UNSAFETY[unsafety]


def map_constness(constness: SourceConstness) -> Constness:
    return _CONSTNESS[constness]


def map_abi(abi: SourceAbi) -> Abi:
    """Map a calling convention. There is no fallback entry."""
    return ABI_TABLE[abi]
