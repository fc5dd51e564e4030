"""Tests for choosing between candidate modules."""

from fix_imports.models import LOCAL, Candidate, PriorityConfig, Provenance
from fix_imports.pick_candidate import (
    candidate_key,
    file_dir_segments,
    package_rank,
    pick_candidate,
    shared_prefix_length,
)


def local(module: str) -> Candidate:
    """A local candidate."""
    return Candidate(LOCAL, module)


def pkg(package: str, module: str) -> Candidate:
    """A package candidate."""
    return Candidate(Provenance.of_package(package), module)


def test_no_candidates() -> None:
    """Verify that an empty candidate list resolves to nothing."""
    assert pick_candidate(PriorityConfig(), "X.hs", []) is None


def test_returns_an_input_verbatim() -> None:
    """Verify that the winner is one of the given candidates."""
    candidates = [pkg("p", "A.M"), local("B.M")]
    assert pick_candidate(PriorityConfig(), "X.hs", candidates) is candidates[1]


def test_exact_override() -> None:
    """Verify that prio-module-high picks its module, but only on exact match."""
    local_ab = [local("A.M"), local("B.M")]
    assert pick_candidate(PriorityConfig(), "X.hs", local_ab) == local("A.M")
    prio = PriorityConfig(prio_module_high=("B.M",))
    assert pick_candidate(prio, "X.hs", local_ab) == local("B.M")
    prio = PriorityConfig(prio_module_high=("B",))
    assert pick_candidate(prio, "X.hs", local_ab) == local("A.M")


def test_override_beats_closer_local() -> None:
    """Verify that an override wins over a local and shorter candidate."""
    prio = PriorityConfig(prio_module_high=("Data.List",))
    candidates = [
        local("A.List"),
        pkg("haskell98", "List"),
        pkg("base", "Data.List"),
    ]
    assert pick_candidate(prio, "A/Main.hs", candidates) == pkg("base", "Data.List")



def test_several_overrides_keep_input_order() -> None:
    """Verify that among override matches the first candidate wins."""
    prio = PriorityConfig(prio_module_high=("A.B.M", "Z.M"))
    candidates = [pkg("p1", "A.B.M"), pkg("p2", "Z.M")]
    assert pick_candidate(prio, "X.hs", candidates) == pkg("p1", "A.B.M")


def test_override_ignores_package_priority() -> None:
    """Verify that package priority does not reorder override matches."""
    prio = PriorityConfig(prio_module_high=("X.Y",), prio_package_high=("base",))
    candidates = [pkg("other", "X.Y"), pkg("base", "X.Y")]
    assert pick_candidate(prio, "X.hs", candidates) is candidates[0]

def test_local_beats_package() -> None:
    """Verify that local modules take precedence over package modules."""
    candidates = [local("B.M"), pkg("pkg", "B.M")]
    assert pick_candidate(PriorityConfig(), "A/B.hs", candidates) == local("B.M")
    candidates = [pkg("pkg", "B.M"), local("A.B.M")]
    assert pick_candidate(PriorityConfig(), "A/B/C.hs", candidates) == local("A.B.M")


def test_closer_local_wins() -> None:
    """Verify that locals sharing more directories with the file win."""
    candidates = [local("A.M"), local("A.B.M")]
    assert pick_candidate(PriorityConfig(), "A/B/C.hs", candidates) == local("A.B.M")
    assert pick_candidate(PriorityConfig(), "./A/B/C.hs", candidates) == local(
        "A.B.M"
    )


def test_fewer_segments_win() -> None:
    """Verify that shorter package modules are preferred."""
    candidates = [pkg("p1", "A.B.M"), pkg("p2", "Z.M")]
    assert pick_candidate(PriorityConfig(), "X.hs", candidates) == pkg("p2", "Z.M")


def test_package_priority_before_length() -> None:
    """Verify that high priority packages win even with longer modules."""
    prio = PriorityConfig(
        prio_package_high=("base",), prio_package_low=("haskell98",)
    )
    candidates = [
        pkg("haskell98", "List"),
        pkg("other", "X.Y.List"),
        pkg("base", "Data.List"),
    ]
    assert pick_candidate(prio, "X.hs", candidates) == pkg("base", "Data.List")
    candidates = [pkg("haskell98", "List"), pkg("other", "X.Y.List")]
    assert pick_candidate(prio, "X.hs", candidates) == pkg("other", "X.Y.List")


def test_ties_keep_input_order() -> None:
    """Verify that fully tied candidates resolve to the first one."""
    candidates = [pkg("p1", "A.M"), pkg("p2", "B.M")]
    assert pick_candidate(PriorityConfig(), "X.hs", candidates) == pkg("p1", "A.M")


def test_package_rank() -> None:
    """Verify that unlisted packages sit between the high and low lists."""
    prio = PriorityConfig(prio_package_high=("a", "b"), prio_package_low=("z",))
    assert package_rank("a", prio) < package_rank("b", prio)
    assert package_rank("b", prio) < package_rank("other", prio)
    assert package_rank("other", prio) == package_rank("another", prio)
    assert package_rank("other", prio) < package_rank("z", prio)


def test_candidate_key_levels() -> None:
    """Verify each level of the ordering key in isolation."""
    prio = PriorityConfig(prio_module_high=("P.M",))
    dirs = ["A", "B"]
    assert candidate_key(prio, dirs, pkg("p", "P.M"))[0] == 0
    assert candidate_key(prio, dirs, local("A.M"))[0] == 1
    assert candidate_key(prio, dirs, local("A.M"))[1] == 0
    assert candidate_key(prio, dirs, pkg("p", "Q.M"))[1] == 1
    assert candidate_key(prio, dirs, local("A.B.M"))[2] == (-2, 0)
    assert candidate_key(prio, dirs, pkg("p", "Q.R.M"))[3] == 3


def test_path_helpers() -> None:
    """Verify directory extraction and prefix counting."""
    assert file_dir_segments("A/B/C.hs") == ["A", "B"]
    assert file_dir_segments("./A/C.hs") == ["A"]
    assert file_dir_segments("C.hs") == []
    assert shared_prefix_length(["A", "B"], ["A", "C"]) == 1
    assert shared_prefix_length(["A"], []) == 0
