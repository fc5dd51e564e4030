"""Orchestration logic for fixing the import block of one module.

Only qualified names drive the fix. Names like ``Map.insert`` are reduced to
their qualification, ``Map``, and compared with the imports:

- Qualifications with no import get one. Local modules are searched first,
  then the package registry, and one candidate is picked by priority.
- Qualified imports whose qualification is no longer used are dropped.
- Everything else is kept as written, comments included, then sorted and
  grouped, and the new block replaces the old one in the source.

If any module can't be found the whole fix fails and nothing is rewritten.
"""

import logging
from typing import Any

from fix_imports.candidate_index import EMPTY_INDEX, load_candidate_index
from fix_imports.classify_import import classify_import
from fix_imports.errors import ResolutionFailure
from fix_imports.extract_import_info import extract_import_info
from fix_imports.find_local_modules import find_local_modules
from fix_imports.format_imports import format_groups
from fix_imports.load_config import priority_config
from fix_imports.models import (
    Candidate,
    FixResult,
    ImportDecl,
    ImportLine,
    ParsedModule,
)
from fix_imports.pick_candidate import pick_candidate
from fix_imports.registry import Registry
from fix_imports.substitute_imports import substitute_imports

logger = logging.getLogger(__name__)


def include_dirs(config: dict[str, Any]) -> list[str]:
    """Include directories, always starting with the current directory."""
    return ["."] + [d for d in config["include"] if d not in (".", "./")]


def new_import_line(qualification: str, candidate: Candidate) -> ImportLine:
    """Build the qualified import that brings ``qualification`` into scope."""
    decl = ImportDecl(
        module=candidate.module,
        alias=qualification if qualification != candidate.module else None,
        qualified=True,
        provenance=candidate.provenance,
    )
    return ImportLine(decl, (), candidate.provenance)


def fix_module(
    config: dict[str, Any],
    module_path: str,
    module: ParsedModule,
    source: str,
    registry: Registry,
) -> FixResult:
    """Rewrite the import block of ``source`` to match its qualified names.

    Raises ResolutionFailure naming every module that could not be found.
    The registry listing is only loaded if some qualification has no local
    candidate.
    """
    prio = priority_config(config)
    extension = config["extension"]
    includes = include_dirs(config)
    info = extract_import_info(module, config["implicit-module"])

    needed = sorted(info.needed)
    local = {q: find_local_modules(includes, q, extension) for q in needed}
    index, diagnostics = EMPTY_INDEX, []
    if any(not candidates for candidates in local.values()):
        index, diagnostics = load_candidate_index(registry.dump())

    unresolved: list[str] = []
    new_lines: list[ImportLine] = []
    for qual in needed:
        candidates = local[qual] + list(index.lookup(qual))
        logger.debug("candidates for %s from %s: %s", qual, module_path, candidates)
        winner = pick_candidate(prio, module_path, candidates)
        if winner is None:
            unresolved.append(qual)
        else:
            new_lines.append(new_import_line(qual, winner))

    existing: list[ImportLine] = []
    for decl, comments in info.kept:
        provenance = classify_import(decl, includes, registry, extension)
        if provenance is None:
            unresolved.append(decl.module)
        else:
            existing.append(ImportLine(decl, comments, provenance))

    if unresolved:
        raise ResolutionFailure(unresolved)

    formatted = format_groups(prio, new_lines + existing)
    return FixResult(
        text=substitute_imports(formatted, info.block, source),
        added=sorted(line.decl.module for line in new_lines),
        removed=sorted(info.unused),
        diagnostics=diagnostics,
    )
