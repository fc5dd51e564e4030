"""Logic for choosing one module among the candidates for a qualification."""

import logging
from pathlib import PurePosixPath

from fix_imports.models import Candidate, PriorityConfig

logger = logging.getLogger(__name__)

CandidateKey = tuple[int, int, tuple[int, int], int]


def shared_prefix_length(a: list[str], b: list[str]) -> int:
    """Count the leading segments two paths have in common."""
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n


def file_dir_segments(module_path: str) -> list[str]:
    """Directory components of the file being fixed, ignoring ``.``."""
    parent = PurePosixPath(module_path).parent
    return [part for part in parent.parts if part not in (".", "/")]


def package_rank(package: str, prio: PriorityConfig) -> tuple[int, int]:
    """Rank a package: high-priority ones in order, then unlisted, then low.

    Packages in ``prio-package-low`` rank below unlisted ones, so a package
    such as ``haskell98`` loses even to packages nobody configured.
    """
    if package in prio.prio_package_high:
        return (0, prio.prio_package_high.index(package))
    if package in prio.prio_package_low:
        return (2, prio.prio_package_low.index(package))
    return (1, 0)


def candidate_key(
    prio: PriorityConfig, file_dirs: list[str], candidate: Candidate
) -> CandidateKey:
    """Sort key for a candidate, lower is better.

    Fields, in order: not an exact override, not local, proximity to the
    fixed file (locals) or package rank (packages), segment count (packages).
    Every exact override gets the same key.
    """
    if candidate.module in prio.prio_module_high:
        # Overrides skip the remaining rules; equal keys keep input order.
        return (0, 0, (0, 0), 0)
    package = candidate.provenance.package
    if package is None:
        module_dirs = candidate.module.split(".")[:-1]
        affinity = shared_prefix_length(file_dirs, module_dirs)
        return (1, 0, (-affinity, 0), 0)
    return (1, 1, package_rank(package, prio), candidate.segment_count)


def pick_candidate(
    prio: PriorityConfig, module_path: str, candidates: list[Candidate]
) -> Candidate | None:
    """Pick the best candidate, or None if there are none.

    Exact ``prio-module-high`` matches win outright. Otherwise local modules
    beat package modules, closer locals beat further ones, and among packages
    the package priority decides before the shorter module path does. Ties
    go to the earliest candidate.
    """
    if not candidates:
        return None
    file_dirs = file_dir_segments(module_path)
    best = min(candidates, key=lambda c: candidate_key(prio, file_dirs, c))
    logger.debug("picked %s from %s", best, candidates)
    return best
