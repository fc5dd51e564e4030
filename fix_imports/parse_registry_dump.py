"""Logic for parsing the package registry's ``tag: value`` listing."""

import re

from fix_imports.errors import RegistryParseError

RECORD_TAGS = ("name", "exposed", "exposed-modules")
VALUE_SPLIT_RE = re.compile(r"[\s,]+")


def parse_sections(text: str) -> list[tuple[str, list[str]]]:
    """Split a listing into ``(tag, words)`` sections.

    A section starts at an unindented ``tag: value`` line and continues over
    the following indented lines.
    """
    sections: list[tuple[str, list[str]]] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        if line[:1].isspace() and sections:
            sections[-1][1].extend(_words(line))
            continue
        tag, _, rest = line.partition(":")
        sections.append((tag.strip(), _words(rest)))
    return sections


def _words(value: str) -> list[str]:
    return [w for w in VALUE_SPLIT_RE.split(value) if w]


def _extract_record(
    sections: list[tuple[str, list[str]]], i: int
) -> tuple[str, bool, list[str]]:
    """Read one ``name``/``exposed``/``exposed-modules`` record at index i."""
    window = sections[i : i + len(RECORD_TAGS)]
    tags = tuple(tag for tag, _ in window)
    if tags != RECORD_TAGS:
        msg = f"unexpected tag: {sections[i][0]}"
        raise RegistryParseError(msg)
    (_, name), (_, exposed), (_, modules) = window
    if len(name) != 1 or len(exposed) != 1:
        msg = f"malformed record for package: {' '.join(name)}"
        raise RegistryParseError(msg)
    return name[0], exposed[0] == "True", modules


def parse_registry_dump(text: str) -> tuple[list[str], list[tuple[str, list[str]]]]:
    """Parse a registry listing into diagnostics and exposed packages.

    Returns ``(errors, packages)`` where packages is a list of
    ``(package_name, exposed_modules)`` in listing order. Hidden packages are
    dropped. A section that does not start a well-formed record is reported
    and skipped, and parsing resumes at the next section.
    """
    sections = parse_sections(text)
    errors: list[str] = []
    packages: list[tuple[str, list[str]]] = []
    i = 0
    while i < len(sections):
        try:
            name, exposed, modules = _extract_record(sections, i)
        except RegistryParseError as e:
            errors.append(str(e))
            i += 1
            continue
        if exposed:
            packages.append((name, modules))
        i += len(RECORD_TAGS)
    return errors, packages
