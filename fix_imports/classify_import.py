"""Logic for telling whether an existing import is local or from a package."""

import logging
from pathlib import Path

from fix_imports.models import LOCAL, ImportDecl, Provenance
from fix_imports.module_path import DEFAULT_EXTENSION, module_to_path
from fix_imports.registry import Registry

logger = logging.getLogger(__name__)


def is_local_module(module: str, includes: list[str], extension: str) -> bool:
    """True if the module's file exists directly under an include directory."""
    rel = module_to_path(module, extension)
    return any((Path(d) / rel).is_file() for d in includes)


def classify_import(
    decl: ImportDecl,
    includes: list[str],
    registry: Registry,
    extension: str = DEFAULT_EXTENSION,
) -> Provenance | None:
    """Find where an existing import comes from, or None if nowhere."""
    if is_local_module(decl.module, includes, extension):
        return LOCAL
    packages = registry.find_module(decl.module)
    logger.debug("packages exposing %s: %s", decl.module, packages)
    if packages:
        return Provenance.of_package(packages[0])
    return None
