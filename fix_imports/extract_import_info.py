"""Logic for comparing a module's imports with its qualified-name usage."""

import logging
from dataclasses import dataclass

from fix_imports.associate_comments import associate_comments
from fix_imports.import_range import import_range, in_range
from fix_imports.models import Comment, ImportBlockRange, ImportDecl, ParsedModule

logger = logging.getLogger(__name__)

DEFAULT_IMPLICIT_MODULE = "Prelude"


@dataclass(frozen=True)
class ImportInfo:
    """What the module needs, what it has, and where its imports live."""

    needed: frozenset[str]
    unused: frozenset[str]
    kept: tuple[tuple[ImportDecl, tuple[Comment, ...]], ...]
    block: ImportBlockRange


def extract_import_info(
    module: ParsedModule, implicit: str = DEFAULT_IMPLICIT_MODULE
) -> ImportInfo:
    """Work out which imports to add, which to drop and which to keep.

    ``implicit`` names the namespace that is in scope without an import, so
    ``Prelude.map`` never asks for an import and an explicit ``Prelude``
    import is never dropped, since removing it changes what is in scope.
    Unqualified imports are always kept: whether they are used can't be told
    from qualified names alone.
    """
    used = {q.qualification for q in module.qualified_names}
    imported = {d.qualification for d in module.imports} | {implicit}
    needed = frozenset(used - imported)

    block = import_range(module)
    block_comments = [
        c for c in module.comments if in_range(block, c.span.start_line)
    ]
    live = used | {implicit}
    kept = tuple(
        (decl, comments)
        for decl, comments in associate_comments(module.imports, block_comments)
        if not decl.qualified or decl.qualification in live
    )
    kept_modules = {decl.module for decl, _ in kept}
    unused = frozenset(
        d.module for d in module.imports if d.module not in kept_modules
    )
    logger.debug("needed: %s, unused: %s", sorted(needed), sorted(unused))
    return ImportInfo(needed=needed, unused=unused, kept=kept, block=block)
