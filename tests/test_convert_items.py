"""Tests for constant, function and struct conversion."""

from pathlib import Path

from docmodel.context import Context, CrateInfo
from docmodel.convert_items import convert_constant, convert_function, convert_struct
from docmodel.documentation import (
    Abi,
    ConstantDoc,
    Constness,
    FunctionDoc,
    Generics,
    StructDoc,
    Unsafety,
    Visibility,
)
from docmodel.mod_path import ModPath
from docmodel.source_nodes import (
    SourceAbi,
    SourceConstant,
    SourceConstness,
    SourceFunction,
    SourceStruct,
    SourceStructField,
    SourceUnsafety,
    SourceVisibility,
)

CONTEXT = Context(store_path=Path("store"), crate_info=CrateInfo("c"))


def test_convert_constant_keeps_source_text() -> None:
    """Verify that the constant's type and value are kept unevaluated."""
    node = SourceConstant(
        ident="MAX",
        path=ModPath.from_str("c::MAX"),
        type_="usize",
        expr="1 << 4",
        vis=SourceVisibility.PUBLIC,
        attrs=["Largest value."],
    )
    doc = convert_constant(node, CONTEXT)
    assert doc.name == "MAX"
    assert doc.mod_path == ModPath.from_str("c::MAX")
    assert doc.visibility == Visibility.PUBLIC
    assert doc.attrs == ("Largest value.",)
    assert doc.inner_data == ConstantDoc(type_="usize", expr="1 << 4")
    assert doc.links == {}


def test_convert_function_maps_modifiers() -> None:
    """Verify that function modifiers are mapped and generics left empty."""
    node = SourceFunction(
        ident="raw_read",
        path=ModPath.from_str("c::raw_read"),
        decl="(fd: i32) -> isize",
        unsafety=SourceUnsafety.UNSAFE,
        constness=SourceConstness.CONST,
        abi=SourceAbi.C,
    )
    doc = convert_function(node, CONTEXT)
    assert doc.visibility == Visibility.INHERITED
    assert doc.inner_data == FunctionDoc(
        header="(fd: i32) -> isize",
        unsafety=Unsafety.UNSAFE,
        constness=Constness.CONST,
        abi=Abi.C,
        generics=Generics(),
    )


def test_convert_struct_has_no_fields_yet() -> None:
    """Verify that struct fields are not documented."""
    node = SourceStruct(
        ident="Point",
        path=ModPath.from_str("c::Point"),
        vis=SourceVisibility.PUBLIC,
        fields=[SourceStructField(ident="x", type_="f64")],
    )
    doc = convert_struct(node, CONTEXT)
    assert doc.name == "Point"
    assert doc.visibility == Visibility.PUBLIC
    assert doc.inner_data == StructDoc(fields={})
