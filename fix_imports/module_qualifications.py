"""Logic for computing the qualifications a module path can be referred by."""

from fix_imports.models import module_segments


def module_qualifications(module: str) -> list[str]:
    """Return every non-empty dot-segment suffix of a module path.

    ``Data.Map.Strict`` yields ``Data.Map.Strict``, ``Map.Strict`` and
    ``Strict``, longest first.
    """
    segments = module_segments(module)
    return [".".join(segments[i:]) for i in range(len(segments))]
