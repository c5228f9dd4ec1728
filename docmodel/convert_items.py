"""Conversion of constant, function and struct items into documentation."""

from docmodel.context import Context
from docmodel.documentation import (
    ConstantDoc,
    Documentation,
    FunctionDoc,
    Generics,
    StructDoc,
)
from docmodel.modifiers import map_abi, map_constness, map_unsafety, map_visibility
from docmodel.source_nodes import SourceConstant, SourceFunction, SourceStruct


def convert_constant(node: SourceConstant, context: Context) -> Documentation:
    """Convert a constant; type and value stay as unevaluated source text."""
    return Documentation(
        name=node.ident,
        attrs=node.attrs,
        mod_path=node.path,
        visibility=map_visibility(node.vis),
        inner_data=ConstantDoc(type_=node.type_, expr=node.expr),
    )


def convert_function(node: SourceFunction, context: Context) -> Documentation:
    """Convert a free function, keeping its printed signature."""
    return Documentation(
        name=node.ident,
        attrs=node.attrs,
        mod_path=node.path,
        visibility=map_visibility(node.vis),
        inner_data=FunctionDoc(
            header=node.decl,
            generics=Generics(),
            unsafety=map_unsafety(node.unsafety),
            constness=map_constness(node.constness),
            abi=map_abi(node.abi),
        ),
    )


def convert_struct(node: SourceStruct, context: Context) -> Documentation:
    """Convert a struct. Field documentation is not collected."""
    # TODO: fill StructDoc.fields from node.fields (field name -> type text).
    return Documentation(
        name=node.ident,
        attrs=node.attrs,
        mod_path=node.path,
        visibility=map_visibility(node.vis),
        inner_data=StructDoc(fields={}),
    )
