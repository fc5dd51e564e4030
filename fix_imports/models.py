"""Data models shared by the import fixing pipeline."""

from dataclasses import dataclass, field
from enum import Enum


def module_segments(name: str) -> list[str]:
    """Split a dotted name, rejecting empty names and empty segments."""
    segments = name.split(".")
    if not name or not all(segments):
        msg = f"invalid dotted name: {name!r}"
        raise ValueError(msg)
    return segments


@dataclass(frozen=True)
class Span:
    """Source lines covered by a syntax element, 1-based and inclusive."""

    start_line: int
    end_line: int


@dataclass(frozen=True)
class Provenance:
    """Where a module comes from: the local tree, or an installed package."""

    package: str | None = None

    @classmethod
    def of_package(cls, name: str) -> "Provenance":
        """Build the provenance of a module exposed by package ``name``."""
        return cls(package=name)

    @property
    def is_local(self) -> bool:
        """Return True for modules found under an include directory."""
        return self.package is None


LOCAL = Provenance()


@dataclass(frozen=True)
class Candidate:
    """A proposed module path satisfying some qualification."""

    provenance: Provenance
    module: str

    def __post_init__(self) -> None:
        """Validate the module path."""
        module_segments(self.module)

    @property
    def segment_count(self) -> int:
        """Number of dot-separated segments in the module path."""
        return len(self.module.split("."))


@dataclass(frozen=True)
class ImportDecl:
    """A single import declaration.

    ``text`` is the declaration exactly as the user wrote it, when it came
    from the source. Declarations synthesized by the fixer leave it unset and
    are rendered from the other fields.
    """

    module: str
    alias: str | None = None
    qualified: bool = True
    provenance: Provenance | None = None
    span: Span | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        """Validate the module path and alias."""
        module_segments(self.module)
        if self.alias is not None:
            module_segments(self.alias)

    @property
    def qualification(self) -> str:
        """The name this import makes available as a qualifier."""
        return self.alias or self.module


class CommentPosition(Enum):
    """Placement of a comment relative to the import it decorates."""

    ABOVE = "above"
    RIGHT = "right"


@dataclass(frozen=True)
class FreeComment:
    """A comment as reported by the front-end, not yet attached to anything."""

    text: str
    span: Span


@dataclass(frozen=True)
class Comment:
    """A comment attached to an import declaration."""

    position: CommentPosition
    text: str
    span: Span | None = None


@dataclass(frozen=True)
class ImportLine:
    """An import declaration together with its comments and provenance."""

    decl: ImportDecl
    comments: tuple[Comment, ...]
    provenance: Provenance


@dataclass(frozen=True)
class QualifiedName:
    """An occurrence of a qualified name like ``Map.insert`` in the body."""

    qualification: str
    span: Span | None = None

    def __post_init__(self) -> None:
        """Validate the qualification."""
        module_segments(self.qualification)


@dataclass(frozen=True)
class ImportBlockRange:
    """Half-open, 0-based line interval holding the import block."""

    start: int
    end: int


@dataclass
class ParsedModule:
    """The front-end's view of one source module."""

    header: Span | None = None
    imports: list[ImportDecl] = field(default_factory=list)
    qualified_names: list[QualifiedName] = field(default_factory=list)
    comments: list[FreeComment] = field(default_factory=list)


@dataclass(frozen=True)
class PriorityConfig:
    """Ordering and disambiguation preferences."""

    import_order_first: tuple[str, ...] = ()
    import_order_last: tuple[str, ...] = ()
    prio_module_high: tuple[str, ...] = ()
    prio_package_high: tuple[str, ...] = ()
    prio_package_low: tuple[str, ...] = ()


@dataclass
class FixResult:
    """Outcome of a successful fix."""

    text: str
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)
