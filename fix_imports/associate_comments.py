"""Logic for attaching free comments to the import declarations they decorate."""

from fix_imports.models import Comment, CommentPosition, FreeComment, ImportDecl


def _associate(
    pending: list[FreeComment], decl: ImportDecl
) -> tuple[tuple[Comment, ...], list[FreeComment]]:
    """Take the comments belonging to ``decl`` off the front of ``pending``."""
    if decl.span is None:
        return (), pending
    i = 0
    attached: list[Comment] = []
    # Comments ending before the import starts are above it.
    while i < len(pending) and pending[i].span.end_line < decl.span.start_line:
        c = pending[i]
        attached.append(Comment(CommentPosition.ABOVE, c.text, c.span))
        i += 1
    # The rest, up to the import's last line, are to its right.
    while i < len(pending) and pending[i].span.start_line <= decl.span.end_line:
        c = pending[i]
        attached.append(Comment(CommentPosition.RIGHT, c.text, c.span))
        i += 1
    return tuple(attached), pending[i:]


def associate_comments(
    imports: list[ImportDecl], comments: list[FreeComment]
) -> list[tuple[ImportDecl, tuple[Comment, ...]]]:
    """Pair each import with the comments that apply to it.

    Both lists must be in file order. Comments below the last import are
    dropped. Blank lines between comments above an import are not kept.
    """
    pending = sorted(comments, key=lambda c: (c.span.start_line, c.span.end_line))
    pairs = []
    for decl in imports:
        attached, pending = _associate(pending, decl)
        pairs.append((decl, attached))
    return pairs
