"""Tests for comparing imports against qualified-name usage."""

from fix_imports.extract_import_info import extract_import_info
from fix_imports.import_range import import_range
from fix_imports.models import (
    CommentPosition,
    FreeComment,
    ImportBlockRange,
    ImportDecl,
    ParsedModule,
    QualifiedName,
    Span,
)


def decl(
    module: str, line: int, alias: str | None = None, qualified: bool = True
) -> ImportDecl:
    """An import declaration on a single line."""
    return ImportDecl(module, alias=alias, qualified=qualified, span=Span(line, line))


def uses(*quals: str) -> list[QualifiedName]:
    """Qualified name occurrences for the given qualifications."""
    return [QualifiedName(q) for q in quals]


def sample_module() -> ParsedModule:
    """A module with a header, four imports and a few qualified names."""
    return ParsedModule(
        header=Span(1, 1),
        imports=[
            decl("Data.Map", 2, alias="Map"),
            decl("Data.Set", 3, alias="Set"),
            decl("Data.List", 4, qualified=False),
            decl("Prelude", 5),
        ],
        qualified_names=uses("Map", "Text", "Prelude", "Map"),
        comments=[
            FreeComment("-- maps", Span(2, 2)),
            FreeComment("-- header", Span(1, 1)),
            FreeComment("-- body", Span(8, 8)),
        ],
    )


def test_needed_and_unused() -> None:
    """Verify that missing qualifications are needed and unused ones dropped."""
    info = extract_import_info(sample_module())
    assert info.needed == {"Text"}
    assert info.unused == {"Data.Set"}


def test_kept_declarations() -> None:
    """Verify that unqualified and implicit imports are always kept."""
    info = extract_import_info(sample_module())
    assert [d.module for d, _ in info.kept] == ["Data.Map", "Data.List", "Prelude"]


def test_only_block_comments_are_associated() -> None:
    """Verify that comments outside the import block are left alone."""
    info = extract_import_info(sample_module())
    comments = {d.module: cs for d, cs in info.kept}
    assert [(c.position, c.text) for c in comments["Data.Map"]] == [
        (CommentPosition.RIGHT, "-- maps")
    ]
    assert comments["Data.List"] == ()


def test_implicit_module_is_never_needed() -> None:
    """Verify that Prelude.x does not ask for an import."""
    info = extract_import_info(ParsedModule(qualified_names=uses("Prelude")))
    assert info.needed == frozenset()


def test_custom_implicit_module() -> None:
    """Verify that the implicit namespace can be configured."""
    module = ParsedModule(imports=[decl("Base", 1)], qualified_names=uses("Prelude"))
    info = extract_import_info(module, implicit="Base")
    assert info.needed == {"Prelude"}
    assert info.unused == frozenset()


def test_alias_is_the_qualification() -> None:
    """Verify that an aliased import is matched by its alias, not its path."""
    module = ParsedModule(
        imports=[decl("Data.Map", 1, alias="M")],
        qualified_names=uses("Data.Map"),
    )
    info = extract_import_info(module)
    assert info.needed == {"Data.Map"}
    assert info.unused == {"Data.Map"}


def test_empty_module() -> None:
    """Verify that an empty module needs and drops nothing."""
    info = extract_import_info(ParsedModule())
    assert info.needed == frozenset()
    assert info.unused == frozenset()
    assert info.kept == ()
    assert info.block == ImportBlockRange(0, 0)


def test_import_range() -> None:
    """Verify the block range with and without imports and header."""
    assert import_range(sample_module()) == ImportBlockRange(1, 5)
    multi = ParsedModule(
        imports=[
            ImportDecl("A", span=Span(3, 3)),
            ImportDecl("B", span=Span(4, 6)),
        ]
    )
    assert import_range(multi) == ImportBlockRange(2, 6)
    assert import_range(ParsedModule(header=Span(1, 3))) == ImportBlockRange(3, 3)
    assert import_range(ParsedModule()) == ImportBlockRange(0, 0)
