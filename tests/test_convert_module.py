"""Tests for module tree conversion."""

from pathlib import Path

from docmodel.context import Context, CrateInfo
from docmodel.convert_module import convert_crate, convert_module, iter_traits
from docmodel.documentation import (
    ConstantDoc,
    DocType,
    FunctionDoc,
    ModuleDoc,
    TraitDoc,
    TraitItemDoc,
    Visibility,
)
from docmodel.mod_path import ModPath
from docmodel.source_nodes import (
    SourceConstant,
    SourceFunction,
    SourceMethodSig,
    SourceModule,
    SourceTrait,
    SourceTraitItem,
    SourceTraitMethod,
    SourceVisibility,
)


def make_context(name: str = "mycrate") -> Context:
    """Create a conversion context for testing."""
    return Context(store_path=Path("store"), crate_info=CrateInfo(name, "0.1.0"))


def make_module(path: str, **kwargs: object) -> SourceModule:
    """Create a module node whose ident is the last path segment."""
    mod_path = ModPath.from_str(path)
    return SourceModule(path=mod_path, ident=mod_path.name, **kwargs)  # type: ignore[arg-type]


def make_fn(path: str) -> SourceFunction:
    mod_path = ModPath.from_str(path)
    return SourceFunction(ident=mod_path.name, path=mod_path, decl="()")


def make_const(path: str) -> SourceConstant:
    mod_path = ModPath.from_str(path)
    return SourceConstant(ident=mod_path.name, path=mod_path, type_="u8", expr="1")


def make_trait(path: str, *methods: str) -> SourceTrait:
    mod_path = ModPath.from_str(path)
    items = [
        SourceTraitItem(
            ident=m,
            path=mod_path.child(m),
            node=SourceTraitMethod(sig=SourceMethodSig(decl="(&self)")),
        )
        for m in methods
    ]
    return SourceTrait(ident=mod_path.name, path=mod_path, items=items)


def test_empty_module_yields_only_its_own_record() -> None:
    """Verify that a module without children converts to one record."""
    docs = convert_module(make_module("mycrate::empty"), make_context())
    assert len(docs) == 1
    assert docs[0].name == "empty"
    assert isinstance(docs[0].inner_data, ModuleDoc)


def test_root_module_named_after_package() -> None:
    """Verify that a root module without ident takes the crate package name."""
    root = SourceModule(path=ModPath(("mycrate",)), is_crate=True)
    docs = convert_module(root, make_context("mycrate"))
    assert docs[-1].name == "mycrate"
    assert docs[-1].inner_data == ModuleDoc(is_crate=True)


def test_record_count_and_order() -> None:
    """Verify the consts, traits, fns, submodules, self ordering and count."""
    nested = make_module("c::sub2::sub3")
    sub1 = make_module("c::sub1", fns=[make_fn("c::sub1::f")])
    sub2 = make_module("c::sub2", mods=[nested])
    root = SourceModule(
        path=ModPath(("c",)),
        is_crate=True,
        consts=[make_const("c::A"), make_const("c::B")],
        traits=[make_trait("c::T", "m")],
        fns=[make_fn("c::f1"), make_fn("c::f2"), make_fn("c::f3")],
        mods=[sub1, sub2],
    )

    docs = convert_module(root, make_context("c"))

    # 2 consts + 1 trait + 3 fns + (1 + 1) + (1 + 1) + root
    expected_count = 11
    assert len(docs) == expected_count
    assert [str(d.mod_path) for d in docs] == [
        "c::A",
        "c::B",
        "c::T",
        "c::f1",
        "c::f2",
        "c::f3",
        "c::sub1::f",
        "c::sub1",
        "c::sub2::sub3",
        "c::sub2",
        "c",
    ]
    assert isinstance(docs[0].inner_data, ConstantDoc)
    assert isinstance(docs[2].inner_data, TraitDoc)
    assert isinstance(docs[3].inner_data, FunctionDoc)
    assert isinstance(docs[-1].inner_data, ModuleDoc)


def test_trait_members_are_links_not_records() -> None:
    """Verify that module conversion lists trait members only as links."""
    root = make_module("c", traits=[make_trait("c::T", "a", "b")])
    docs = convert_module(root, make_context())
    assert len(docs) == 2
    trait_doc = docs[0]
    assert [link.name for link in trait_doc.links[DocType.TRAIT_ITEM_METHOD]] == [
        "a",
        "b",
    ]


def test_module_visibility_is_mapped() -> None:
    """Verify that module visibility goes through the modifier mapping."""
    module = make_module("c::m", vis=SourceVisibility.CRATE)
    docs = convert_module(module, make_context())
    assert docs[0].visibility == Visibility.PRIVATE


def test_iter_traits_depth_first() -> None:
    """Verify that traits are collected from the whole tree."""
    inner = make_module("c::m", traits=[make_trait("c::m::Inner")])
    root = make_module("c", traits=[make_trait("c::Outer")], mods=[inner])
    assert [t.ident for t in iter_traits(root)] == ["Outer", "Inner"]


def test_convert_crate_populates_store() -> None:
    """Verify that crate conversion indexes modules, functions and trait members."""
    sub = make_module("c::io", fns=[make_fn("c::io::read")])
    root = SourceModule(
        path=ModPath(("c",)),
        is_crate=True,
        traits=[make_trait("c::Reader", "read")],
        fns=[make_fn("c::main")],
        mods=[sub],
    )

    store = convert_crate(root, make_context("c"))

    assert store.name == "c"
    assert store.get_modpaths() == {ModPath(("c",)), ModPath(("c", "io"))}
    assert store.get_functions(ModPath(("c",))) == {"main"}
    assert store.get_functions(ModPath(("c", "io"))) == {"read"}
    # Trait member records follow the flattened module records.
    expected_count = 6
    assert len(store.documents) == expected_count
    assert isinstance(store.documents[-1].inner_data, TraitItemDoc)
    member = store.load_doc(ModPath.from_str("c::Reader::read"))
    assert isinstance(member.inner_data, TraitItemDoc)
