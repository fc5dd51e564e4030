"""Index from qualification to the package modules that could provide it."""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from fix_imports.models import Candidate, Provenance
from fix_imports.module_qualifications import module_qualifications
from fix_imports.parse_registry_dump import parse_registry_dump

logger = logging.getLogger(__name__)


class CandidateIndex(Mapping[str, tuple[Candidate, ...]]):
    """Read-only snapshot mapping each qualification to its candidates.

    ``List`` and ``Data.List`` both map to ``Data.List``, alongside any other
    module ending in ``List``. Candidates keep package listing order and are
    never deduplicated, since that order breaks ties during disambiguation.
    """

    def __init__(self, entries: Mapping[str, tuple[Candidate, ...]]) -> None:
        """Freeze the given mapping."""
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, qualification: str) -> tuple[Candidate, ...]:
        return self._entries[qualification]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, qualification: str) -> tuple[Candidate, ...]:
        """Return the candidates for a qualification, or an empty tuple."""
        return self._entries.get(qualification, ())


EMPTY_INDEX = CandidateIndex({})


def build_candidate_index(
    packages: list[tuple[str, list[str]]],
) -> CandidateIndex:
    """Index every qualification of every exposed module."""
    entries: dict[str, list[Candidate]] = {}
    for package, modules in packages:
        provenance = Provenance.of_package(package)
        for module in modules:
            candidate = Candidate(provenance, module)
            for qual in module_qualifications(module):
                entries.setdefault(qual, []).append(candidate)
    return CandidateIndex({q: tuple(cs) for q, cs in entries.items()})


def load_candidate_index(dump: str) -> tuple[CandidateIndex, list[str]]:
    """Build the index from a raw registry listing, returning its diagnostics."""
    errors, packages = parse_registry_dump(dump)
    if errors:
        logger.warning("errors parsing package registry: %s", ", ".join(errors))
    index = build_candidate_index(packages)
    logger.debug(
        "indexed %d qualifications from %d packages", len(index), len(packages)
    )
    return index, errors
