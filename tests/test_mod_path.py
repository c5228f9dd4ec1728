"""Tests for module paths."""

from docmodel.mod_path import ModPath


def test_from_str_and_str() -> None:
    """Verify parsing and printing of ``::`` separated paths."""
    path = ModPath.from_str("mycrate::io::read")
    assert path.segments == ("mycrate", "io", "read")
    assert str(path) == "mycrate::io::read"
    assert ModPath.from_str("::a::::b") == ModPath(("a", "b"))


def test_parent() -> None:
    """Verify that the parent drops the last segment and the root has none."""
    assert ModPath(("a", "b", "c")).parent() == ModPath(("a", "b"))
    assert ModPath(("a",)).parent() is None
    assert ModPath().parent() is None


def test_ancestors_nearest_first() -> None:
    """Verify that ancestors are listed from the nearest enclosing path up."""
    assert ModPath(("a", "b", "c")).ancestors() == [
        ModPath(("a", "b")),
        ModPath(("a",)),
    ]
    assert ModPath(("a",)).ancestors() == []


def test_child_name_and_hashing() -> None:
    """Verify child construction and use as a dictionary key."""
    path = ModPath(("a",)).child("b")
    assert path.name == "b"
    assert len(path) == 2
    assert {path: 1}[ModPath.from_segments(["a", "b"])] == 1
    assert path.to_json() == ["a", "b"]
