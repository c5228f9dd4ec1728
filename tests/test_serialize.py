"""Tests for record serialization."""

import json

import pytest

from docmodel.documentation import (
    INNER_DATA_KINDS,
    Abi,
    ConstantDoc,
    Constness,
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
    TraitItemMacro,
    TraitItemMethod,
    TraitItemType,
    Unsafety,
    Visibility,
)
from docmodel.mod_path import ModPath
from docmodel.serialize import doc_from_dict, doc_to_dict, inner_data_to_dict

SIG = MethodSig(
    header="(&self)",
    unsafety=Unsafety.UNSAFE,
    constness=Constness.NOT_CONST,
    abi=Abi.MSP430_INTERRUPT,
)

INNER_SAMPLES = [
    ModuleDoc(is_crate=True),
    ConstantDoc(type_="&str", expr='"hi"'),
    FunctionDoc(
        header="() -> !",
        unsafety=Unsafety.NORMAL,
        constness=Constness.CONST,
        abi=Abi.C,
    ),
    TraitDoc(unsafety=Unsafety.UNSAFE),
    TraitItemDoc(node=TraitItemConst(type_="u8")),
    TraitItemDoc(node=TraitItemMethod(sig=SIG)),
    TraitItemDoc(node=TraitItemType(ty="Vec<u8>")),
    TraitItemDoc(node=TraitItemMacro(mac="m!()")),
    StructDoc(),
    EnumDoc(),
]


def test_samples_cover_every_variant() -> None:
    """Verify the samples below exercise every inner data variant."""
    assert {type(s) for s in INNER_SAMPLES} == set(INNER_DATA_KINDS)


@pytest.mark.parametrize("inner", INNER_SAMPLES)
def test_record_survives_json(inner: object) -> None:
    """Verify a record is unchanged after passing through JSON text."""
    doc = Documentation(
        name="thing",
        mod_path=ModPath.from_str("c::thing"),
        inner_data=inner,  # type: ignore[arg-type]
        attrs=["Line one.", "Line two."],
        visibility=Visibility.PRIVATE,
        links={DocType.TRAIT_ITEM_TYPE: [DocLink("T", ModPath.from_str("c::T"))]},
    )
    text = json.dumps(doc_to_dict(doc))
    assert doc_from_dict(json.loads(text)) == doc


def test_unknown_variant_is_rejected() -> None:
    """Verify that serializing an unknown variant raises TypeError."""
    with pytest.raises(TypeError):
        inner_data_to_dict(object())  # type: ignore[arg-type]


def test_unknown_kind_is_rejected() -> None:
    """Verify that decoding an unknown kind tag raises ValueError."""
    data = {"name": "x", "mod_path": ["x"], "inner_data": {"kind": "union"}}
    with pytest.raises(ValueError, match="union"):
        doc_from_dict(data)
