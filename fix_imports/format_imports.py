"""Logic for sorting, grouping and rendering the import block."""

from itertools import groupby

from fix_imports.models import CommentPosition, ImportDecl, ImportLine, PriorityConfig

SMALL_GROUP = 2


def render_decl(decl: ImportDecl) -> str:
    """Render a declaration, verbatim if it came from the source."""
    if decl.text is not None:
        return decl.text
    words = ["import"]
    if decl.qualified:
        words.append("qualified")
    words.append(decl.module)
    if decl.alias is not None and decl.alias != decl.module:
        words.extend(["as", decl.alias])
    return " ".join(words)


def render_import_line(line: ImportLine) -> list[str]:
    """Render an import with its comments above and to the right."""
    above = [c.text for c in line.comments if c.position is CommentPosition.ABOVE]
    right = [c.text for c in line.comments if c.position is CommentPosition.RIGHT]
    decl = render_decl(line.decl).splitlines() or [""]
    if right:
        decl[-1] = " ".join([decl[-1], *right])
    return above + decl


def matches_order_entry(entry: str, module: str) -> bool:
    """True if an ordering entry selects ``module``.

    ``Z`` selects only ``Z``. A trailing dot makes it a prefix, so ``Z.``
    selects ``Z.A`` and ``Z.A.B``.
    """
    return entry == module or (entry.endswith(".") and module.startswith(entry))


def order_rank(prio: PriorityConfig, module: str) -> tuple[int, int]:
    """Rank ``import-order-first`` matches first and ``-last`` matches last."""
    for i, entry in enumerate(prio.import_order_first):
        if matches_order_entry(entry, module):
            return (0, i)
    for i, entry in enumerate(prio.import_order_last):
        if matches_order_entry(entry, module):
            return (2, i)
    return (1, 0)


def top_module(module: str) -> str:
    """First segment of a module path."""
    return module.split(".", 1)[0]


def collapse_groups(groups: list[list[ImportLine]]) -> list[list[ImportLine]]:
    """Merge each small group into the group that follows it."""
    collapsed: list[list[ImportLine]] = []
    carry: list[ImportLine] = []
    for group in groups:
        merged = carry + group
        if len(group) <= SMALL_GROUP:
            carry = merged
        else:
            collapsed.append(merged)
            carry = []
    if carry:
        collapsed.append(carry)
    return collapsed


def group_section(
    prio: PriorityConfig, lines: list[ImportLine]
) -> list[list[ImportLine]]:
    """Sort one section and split it by top-level module."""

    def sort_key(line: ImportLine) -> tuple[tuple[int, int], str]:
        return order_rank(prio, line.decl.module), line.decl.module

    ordered = sorted(lines, key=sort_key)
    groups = [
        list(group)
        for _, group in groupby(ordered, key=lambda line: top_module(line.decl.module))
    ]
    return collapse_groups(groups)


def format_groups(prio: PriorityConfig, lines: list[ImportLine]) -> list[str]:
    """Render the import block as a list of lines without line endings.

    Package imports come before local ones. Each section is grouped by
    top-level module, with blank lines between groups and sections.
    """
    package = [line for line in lines if not line.provenance.is_local]
    local = [line for line in lines if line.provenance.is_local]
    rendered: list[str] = []
    for section in (package, local):
        for group in group_section(prio, section):
            if rendered:
                rendered.append("")
            for line in group:
                rendered.extend(render_import_line(line))
    return rendered
