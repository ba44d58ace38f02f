# topmark:header:start
#
#   project      : TypeSniff
#   file         : instances.py
#   file_relpath : src/typesniff/types/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Test object type instances and catalog for TypeSniff.

Builds the runtime catalog of [`typesniff.types.base.TestObjectType`][] objects
from built-in groups and optionally from plugin entry points. The catalog is
constructed lazily on first access and cached thereafter.

Notes:
    * Built-ins are imported lazily from topical modules.
    * Plugins are discovered via the ``typesniff.types`` entry point group. An
      entry point may reference a list of types or a callable returning one.
    * The returned mapping is a plain ``dict`` but should be treated as
      immutable by callers; use `build_type_catalog` to get an extended copy.
"""

from __future__ import annotations

from collections.abc import Iterable as IterABC
from functools import lru_cache
from importlib import import_module
from importlib.metadata import EntryPoints, entry_points
from typing import TYPE_CHECKING, Any, Final, Iterable, Sequence, cast

from typesniff.config.logging import get_logger
from typesniff.types.base import TestObjectType
from typesniff.types.catalog import load_catalog_file

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

    from typesniff.config.logging import TypeSniffLogger

logger: TypeSniffLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "typesniff.types.builtins.services",
    "typesniff.types.builtins.data",
    "typesniff.types.builtins.api",
)

ENTRYPOINT_GROUP: Final[str] = "typesniff.types"


def _iter_builtin_types() -> Iterable[TestObjectType]:
    """Yield built-in TestObjectType objects from topical modules (lazy import)."""
    for modname in _BUILTIN_MODULES:
        try:
            mod: ModuleType = import_module(modname)
        except ImportError:
            logger.exception("Failed to import built-in test object types from %s", modname)
            continue
        types: Any = getattr(mod, "TYPES", None)
        if not isinstance(types, list):
            logger.warning("Module %s has no TYPES list; skipping", modname)
            continue
        for obj in cast("Sequence[object]", types):
            if isinstance(obj, TestObjectType):
                yield obj
            else:
                logger.warning("Non-TestObjectType entry in %s.TYPES: %r", modname, obj)


def _iter_plugin_types() -> Iterable[TestObjectType]:
    """Yield TestObjectType objects provided by external plugins (entry points)."""
    candidates: EntryPoints = entry_points().select(group=ENTRYPOINT_GROUP)

    for ep in candidates:
        try:
            provider: Any = ep.load()
            provided: Any = provider() if callable(provider) else provider
        except Exception:
            logger.exception("Failed loading test object types from entry point %s", ep.name)
            continue
        if not isinstance(provided, IterABC):
            logger.warning(
                "Entry point %s did not return an iterable of TestObjectType objects: %r",
                ep.name,
                provided,
            )
            continue
        for obj in cast("IterABC[object]", provided):
            if isinstance(obj, TestObjectType):
                yield obj
            else:
                logger.warning("Entry point %s provided non-TestObjectType: %r", ep.name, obj)


def _dedupe_by_id(items: Iterable[TestObjectType]) -> list[TestObjectType]:
    """Deduplicate by TestObjectType.id, preserving first occurrence order."""
    seen: set[str] = set()
    acc: list[TestObjectType] = []
    for tot in items:
        if tot.id in seen:
            logger.warning("Duplicate test object type id detected: %s (keeping first)", tot.id)
            continue
        seen.add(tot.id)
        acc.append(tot)
    return acc


def _aggregate_all_types() -> list[TestObjectType]:
    """Aggregate built-ins plus any plugin-provided types (deduped)."""
    ordered: list[TestObjectType] = list(_iter_builtin_types())
    ordered.extend(_iter_plugin_types())
    return _dedupe_by_id(ordered)


@lru_cache(maxsize=1)
def get_test_object_type_registry() -> dict[str, TestObjectType]:
    """Return (and cache) the built-in plus plugin catalog, keyed by type id."""
    registry: dict[str, TestObjectType] = {tot.id: tot for tot in _aggregate_all_types()}
    logger.debug("Loaded %d test object types", len(registry))
    return registry


def build_type_catalog(catalog_files: Iterable[Path] = ()) -> dict[str, TestObjectType]:
    """Return a fresh catalog: built-ins and plugins, extended by TOML catalog files.

    Entries from catalog files override earlier entries with the same id, so a
    project can refine a built-in type.

    Args:
        catalog_files (Iterable[Path]): TOML catalog files, in increasing precedence.

    Returns:
        dict[str, TestObjectType]: The catalog, keyed by type id.
    """
    catalog: dict[str, TestObjectType] = dict(get_test_object_type_registry())
    for path in catalog_files:
        for tot in load_catalog_file(path):
            if tot.id in catalog:
                logger.info("Catalog %s overrides test object type %s", path, tot.id)
            catalog[tot.id] = tot
    return catalog
