"""Logic for locating the import block within a module's source lines."""

from fix_imports.models import ImportBlockRange, ParsedModule


def import_range(module: ParsedModule) -> ImportBlockRange:
    """Return the half-open, 0-based line range of the import block.

    The block runs from the first import's line to the line after the last
    import. Without imports it is empty and sits right after the module
    header, or at the top of the file when there is no header.
    """
    # Spans count lines from 1, so the 1-based end line of the last import is
    # already the exclusive 0-based end.
    spans = [d.span for d in module.imports if d.span is not None]
    if spans:
        start = min(s.start_line for s in spans) - 1
        end = max(s.end_line for s in spans)
        return ImportBlockRange(start, end)
    if module.header is not None:
        return ImportBlockRange(module.header.end_line, module.header.end_line)
    return ImportBlockRange(0, 0)


def in_range(block: ImportBlockRange, start_line: int) -> bool:
    """True if a 1-based line falls inside the block."""
    return block.start <= start_line - 1 < block.end
