"""Conversions between module paths and source file paths."""

from pathlib import PurePosixPath

DEFAULT_EXTENSION = ".hs"


def module_to_path(module: str, extension: str = DEFAULT_EXTENSION) -> str:
    """Convert ``A.B.C`` to ``A/B/C.hs``."""
    return module.replace(".", "/") + extension


def path_to_module(path: str) -> str:
    """Convert ``A/B/C.hs`` (or ``./A/B/C.hs``) back to ``A.B.C``."""
    p = PurePosixPath(path)
    parts = [part for part in p.with_suffix("").parts if part not in (".", "/")]
    return ".".join(parts)
