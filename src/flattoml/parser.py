"""Single-pass line scanner for ``[section]`` / ``key = value`` documents.

Only a narrow subset of TOML is understood: flat sections of raw string
values. There are no nested tables, arrays, multi-line values or escapes.
``#`` starts a comment wherever it appears, including inside quotes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from .data import ParsedConfig, trim
from .errors import ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawLine:
    """One meaningful input line.

    Attributes:
        kind: ``"section"`` for a header, ``"pair"`` for a key/value line.
        name: Section name (lowercased) or key (as written).
        value: Raw value for pairs; empty for sections.
    """

    kind: Literal["section", "pair"]
    name: str
    value: str = ""


def strip_comment(line: str) -> str:
    index = line.find("#")
    if index >= 0:
        return line[:index]
    return line


def scan_line(line: str) -> RawLine | None:
    """Decompose one line, or return None for blank and unrecognized lines."""

    line = trim(strip_comment(line))
    if not line:
        return None
    if line.startswith("[") and line.endswith("]"):
        return RawLine(kind="section", name=trim(line[1:-1]).lower())
    eq = line.find("=")
    if eq > 0:
        return RawLine(kind="pair", name=trim(line[:eq]), value=trim(line[eq + 1 :]))
    return None


def parse(text: str | bytes, encoding: str = "utf-8") -> ParsedConfig:
    """Parse a document into a :class:`ParsedConfig`.

    Args:
        text: Document contents. Bytes are decoded with ``encoding``;
            undecodable sequences are replaced rather than rejected.
        encoding: Codec used when ``text`` is bytes.

    Raises:
        ParseError: If ``encoding`` names no known codec. Document contents
            never cause an error.
    """

    if isinstance(text, bytes):
        try:
            text = text.decode(encoding, errors="replace")
        except LookupError as exc:
            raise ParseError(f"unknown encoding: {encoding}") from exc

    sections: dict[str, dict[str, str]] = {}
    # An empty name means no section is open; pairs seen then are dropped.
    current = ""
    for lineno, line in enumerate(text.split("\n"), start=1):
        raw = scan_line(line)
        if raw is None:
            continue
        if raw.kind == "section":
            current = raw.name
            if current in sections:
                logger.debug("section_redeclared", extra={"section": current, "line": lineno})
            sections[current] = {}
        elif current:
            sections[current][raw.name] = raw.value
        else:
            logger.debug("pair_outside_section", extra={"key": raw.name, "line": lineno})
    return ParsedConfig(sections)
