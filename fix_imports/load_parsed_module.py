"""Logic for loading a parsed module dumped by the language front-end."""

from pathlib import Path
from typing import Any

import yaml

from fix_imports.models import (
    FreeComment,
    ImportDecl,
    ParsedModule,
    QualifiedName,
    Span,
)


def _span(raw: Any) -> Span:
    if not isinstance(raw, dict):
        msg = f"expected a span, got {raw!r}"
        raise ValueError(msg)
    return Span(int(raw["start_line"]), int(raw["end_line"]))


def parse_module_doc(doc: dict[str, Any]) -> ParsedModule:
    """Build a ParsedModule from the front-end's dump.

    The dump is a mapping with an optional ``header`` span and lists of
    ``imports``, ``qualified_names`` and ``comments``. Raises ValueError on
    malformed entries.
    """
    try:
        header = doc.get("header")
        return ParsedModule(
            header=_span(header) if header is not None else None,
            imports=[
                ImportDecl(
                    module=str(d["module"]),
                    alias=d.get("alias"),
                    qualified=bool(d.get("qualified", False)),
                    span=_span(d["span"]),
                    text=d.get("text"),
                )
                for d in doc.get("imports") or []
            ],
            qualified_names=[
                QualifiedName(str(q["qualification"]), _span(q["span"]))
                for q in doc.get("qualified_names") or []
            ],
            comments=[
                FreeComment(str(c["text"]), _span(c["span"]))
                for c in doc.get("comments") or []
            ],
        )
    except (KeyError, TypeError) as e:
        msg = f"malformed parsed module: {e!r}"
        raise ValueError(msg) from e


def load_parsed_module(path: Path) -> ParsedModule:
    """Load a parsed module dump, JSON or YAML."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(doc, dict):
        msg = f"{path}: expected a mapping"
        raise ValueError(msg)
    return parse_module_doc(doc)
