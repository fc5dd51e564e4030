"""Logic for splicing a new import block into the original source."""

import logging

from fix_imports.models import ImportBlockRange

logger = logging.getLogger(__name__)

LINE_ENDINGS = ("\n", "\r")


def detect_newline(source: str) -> str:
    """Return the line ending used by the first line of ``source``."""
    first = source.splitlines(keepends=True)[:1]
    if first and first[0].endswith("\r\n"):
        return "\r\n"
    return "\n"


def substitute_imports(
    imports: list[str], block: ImportBlockRange, source: str
) -> str:
    """Replace lines ``[start, end)`` of ``source`` with ``imports``.

    Lines outside the block are kept byte for byte, line endings included.
    An out of bounds block leaves the source unchanged.
    """
    lines = source.splitlines(keepends=True)
    if not 0 <= block.start <= block.end <= len(lines):
        logger.warning(
            "import block %d-%d outside of %d source lines, not rewriting",
            block.start,
            block.end,
            len(lines),
        )
        return source

    pre = "".join(lines[: block.start])
    post = "".join(lines[block.end :])
    if not imports:
        return pre + post

    newline = detect_newline(source)
    new_block = "".join(line + newline for line in imports)
    if pre and not pre.endswith(LINE_ENDINGS):
        # Inserting after a final line that has no newline of its own.
        pre += newline
    elif not post and lines and not lines[-1].endswith(LINE_ENDINGS):
        # The block ran to the end of a file without a final newline.
        new_block = new_block[: -len(newline)]
    return pre + new_block + post
