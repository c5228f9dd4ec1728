"""In-memory index and on-disk persistence of documentation records."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from docmodel.documentation import Documentation, FunctionDoc, ModuleDoc, StructDoc
from docmodel.errors import (
    CacheCorruptError,
    CacheUnreadableError,
    CacheWriteError,
    DocumentCorruptError,
    DocumentNotFoundError,
    StoreWriteError,
)
from docmodel.mod_path import ModPath
from docmodel.serialize import doc_from_dict, doc_to_dict

logger = logging.getLogger(__name__)

CACHE_FILENAME = "cache.odoc"
DOCUMENTS_FILENAME = "documents.odoc"
CURRENT_SCHEMA_VERSION = 1


class Store:
    """Documentation records of one crate plus path-keyed lookup indices.

    The indices (module paths, function and struct names per scope) are
    derived from the documents and may also be bootstrapped from the cache
    alone. A store is not safe for concurrent mutation; merge records from
    parallel producers through ``add_documents`` one batch at a time.
    """

    def __init__(
        self, path: Path, name: str = "", *, register_ancestors: bool = False
    ) -> None:
        """Create an empty store rooted at ``path``."""
        self.name = name
        self.path = Path(path)
        self.register_ancestors = register_ancestors
        self.documents: list[Documentation] = []
        self.modpaths: set[ModPath] = set()
        self.functions: dict[ModPath, set[str]] = {}
        self.structs: dict[ModPath, set[str]] = {}

    @property
    def cache_file(self) -> Path:
        return self.path / CACHE_FILENAME

    @property
    def documents_file(self) -> Path:
        return self.path / DOCUMENTS_FILENAME

    # -----------------------------
    # Indexing
    # -----------------------------

    def add_document(self, doc: Documentation) -> None:
        """Append a record and update the indices it contributes to."""
        self.documents.append(doc)
        self._index(doc)

    def add_documents(self, docs: Iterable[Documentation]) -> None:
        for doc in docs:
            self.add_document(doc)

    def _index(self, doc: Documentation) -> None:
        if isinstance(doc.inner_data, ModuleDoc):
            self.add_modpath(doc.mod_path)
            self.functions.setdefault(doc.mod_path, set())
            self.structs.setdefault(doc.mod_path, set())
        elif isinstance(doc.inner_data, FunctionDoc):
            self.functions.setdefault(_scope_of(doc), set()).add(doc.name)
        elif isinstance(doc.inner_data, StructDoc):
            self.structs.setdefault(_scope_of(doc), set()).add(doc.name)

    def add_modpath(self, path: ModPath, *, with_ancestors: bool | None = None) -> None:
        """Add a module path to the set of known modules.

        Enclosing paths are only registered when ``with_ancestors`` is true,
        or when it is None and the store was created with
        ``register_ancestors``.
        """
        self.modpaths.add(path)
        if with_ancestors is None:
            with_ancestors = self.register_ancestors
        if with_ancestors:
            self.modpaths.update(path.ancestors())

    def get_modpaths(self) -> set[ModPath]:
        for path in sorted(self.modpaths):
            logger.debug("module: %s", path)
        return self.modpaths

    def get_functions(self, scope: ModPath) -> set[str] | None:
        """Return function names directly in ``scope``; None if never indexed."""
        return self.functions.get(scope)

    def get_structs(self, scope: ModPath) -> set[str] | None:
        """Return struct names directly in ``scope``; None if never indexed."""
        return self.structs.get(scope)

    # -----------------------------
    # Cache
    # -----------------------------

    def load_cache(self) -> None:
        """Replace the known module paths with the ones in the cache file.

        Raises CacheUnreadableError if the file cannot be read. If it cannot
        be decoded, the module paths are reset to empty, a warning is logged
        and CacheCorruptError is raised.
        """
        path = self.cache_file
        try:
            raw = path.read_bytes()
        except OSError as exc:
            msg = f"Couldn't read cache at {path}"
            raise CacheUnreadableError(msg, path) from exc

        logger.info("Loading cache %s", path)
        try:
            self.modpaths = _decode_cache(raw.decode("utf-8"))
        except (ValueError, TypeError, KeyError) as exc:
            self.modpaths = set()
            logger.warning("Cache at %s is corrupt (%s). Resetting it.", path, exc)
            msg = f"Couldn't decode cache at {path}"
            raise CacheCorruptError(msg, path) from exc

    def save_cache(self) -> None:
        """Write the known module paths to the cache file.

        The file is overwritten in place, so a crash mid-write can leave a
        corrupt cache behind; ``load_cache`` reports that as CacheCorruptError.
        """
        path = self.cache_file
        payload = {
            "schema_version": CURRENT_SCHEMA_VERSION,
            "modpaths": [p.to_json() for p in sorted(self.modpaths)],
        }
        try:
            path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            msg = f"Couldn't write cache at {path}"
            raise CacheWriteError(msg, path) from exc
        logger.info("Wrote %d module paths to %s", len(self.modpaths), path)

    # -----------------------------
    # Documents
    # -----------------------------

    def save(self) -> None:
        """Create the store directory and write the cache and all documents."""
        try:
            self.path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Couldn't create store directory {self.path}"
            raise StoreWriteError(msg, self.path) from exc

        self.save_cache()

        path = self.documents_file
        payload = {
            "schema_version": CURRENT_SCHEMA_VERSION,
            "name": self.name,
            "documents": [doc_to_dict(doc) for doc in self.documents],
        }
        try:
            path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            msg = f"Couldn't write documents at {path}"
            raise StoreWriteError(msg, path) from exc
        logger.info("Wrote %d documents to %s", len(self.documents), path)

    def load_documents(self) -> None:
        """Replace in-memory documents with the persisted ones and reindex."""
        docs = self._read_documents()
        self.documents = []
        self.functions = {}
        self.structs = {}
        self.add_documents(docs)

    def load_doc(self, doc_path: ModPath) -> Documentation:
        """Resolve a path to its record, in memory first, then on disk.

        When several records share a path the first one wins.
        """
        logger.info("Store path: %s, doc path: %s", self.path, doc_path)
        for doc in self.documents:
            if doc.mod_path == doc_path:
                return doc

        if self.documents_file.exists():
            for doc in self._read_documents():
                if doc.mod_path == doc_path:
                    return doc

        msg = f"No documentation for {doc_path} in store {self.path}"
        raise DocumentNotFoundError(msg, self.path)

    def _read_documents(self) -> list[Documentation]:
        path = self.documents_file
        try:
            raw = path.read_bytes()
        except FileNotFoundError as exc:
            msg = f"No documents saved at {path}"
            raise DocumentNotFoundError(msg, path) from exc
        except OSError as exc:
            msg = f"Couldn't read documents at {path}"
            raise DocumentCorruptError(msg, path) from exc

        try:
            data = json.loads(raw.decode("utf-8"))
            _check_schema_version(data)
            return [doc_from_dict(d) for d in data["documents"]]
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            msg = f"Couldn't decode documents at {path}"
            raise DocumentCorruptError(msg, path) from exc


def _scope_of(doc: Documentation) -> ModPath:
    return doc.mod_path.parent() or ModPath()


def _check_schema_version(data: dict[str, Any]) -> None:
    schema_ver = data.get("schema_version", 0)
    if schema_ver != CURRENT_SCHEMA_VERSION:
        msg = f"Schema version mismatch ({schema_ver} != {CURRENT_SCHEMA_VERSION})"
        raise ValueError(msg)


def _decode_cache(raw: str) -> set[ModPath]:
    """Decode cache content; the legacy format is a bare list of paths."""
    data = json.loads(raw)
    if isinstance(data, list):
        entries = data
    elif isinstance(data, dict):
        _check_schema_version(data)
        entries = data["modpaths"]
    else:
        msg = f"Unexpected cache content of type {type(data).__name__}"
        raise TypeError(msg)

    result = set()
    for entry in entries:
        if not isinstance(entry, list) or not all(isinstance(s, str) for s in entry):
            msg = f"Invalid module path entry: {entry!r}"
            raise TypeError(msg)
        result.add(ModPath.from_segments(entry))
    return result
