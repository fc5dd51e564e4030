"""Logic for locating project-local modules under the include directories."""

import logging
from pathlib import Path

from fix_imports.models import LOCAL, Candidate
from fix_imports.module_path import DEFAULT_EXTENSION, module_to_path, path_to_module

logger = logging.getLogger(__name__)

MAX_DEPTH = 4


def find_files(depth: int, suffix: str, directory: str) -> list[str]:
    """Find files under ``directory`` whose path ends with ``suffix``.

    ``suffix`` may contain slashes; it matches a whole path or a trailing run
    of whole path components. Only subdirectories starting with an upper-case
    letter are entered, at most ``depth`` levels down. A missing directory
    yields no files.
    """
    root = Path(directory)
    try:
        entries = sorted(root.iterdir())
    except (FileNotFoundError, NotADirectoryError):
        return []

    found: list[str] = []
    subdirs: list[Path] = []
    for entry in entries:
        if entry.is_dir():
            subdirs.append(entry)
            continue
        path = entry.as_posix()
        if path == suffix or path.endswith("/" + suffix):
            found.append(path)
    if depth > 0:
        for sub in subdirs:
            if sub.name[:1].isupper():
                found.extend(find_files(depth - 1, suffix, sub.as_posix()))
    return found


def strip_dir(directory: str, path: str) -> str:
    """Make ``path`` relative to the include ``directory`` it was found in."""
    prefix = Path(directory).as_posix()
    if prefix == ".":
        return path[2:] if path.startswith("./") else path
    return path[len(prefix) :].lstrip("/")


def find_local_modules(
    includes: list[str],
    qualification: str,
    extension: str = DEFAULT_EXTENSION,
) -> list[Candidate]:
    """Find local candidates for ``qualification`` in each include directory.

    Given ``A.B``, looks for ``A/B.hs``, ``*/A/B.hs``, ``*/*/A/B.hs`` and so
    on, in include order.
    """
    target = module_to_path(qualification, extension)
    candidates = []
    for directory in includes:
        for path in find_files(MAX_DEPTH, target, directory):
            rel = strip_dir(directory, path)
            # The include directory itself is not part of the module name.
            if rel != target and not rel.endswith("/" + target):
                continue
            module = path_to_module(rel)
            candidates.append(Candidate(LOCAL, module))
    logger.debug(
        "local modules for %s: %s", qualification, [c.module for c in candidates]
    )
    return candidates
