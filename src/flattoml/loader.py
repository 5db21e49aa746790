"""Reading documents from disk."""

from __future__ import annotations

import codecs
from pathlib import Path

from .data import ParsedConfig
from .errors import ConfigFileError
from .parser import parse


def load_file(path: str | Path, encoding: str = "utf-8") -> ParsedConfig:
    """Read and parse the document at ``path``.

    Raises:
        ConfigFileError: If ``encoding`` is unknown or the file cannot be read.
    """

    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigFileError(f"cannot read {path}: unknown encoding {encoding!r}") from exc
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise ConfigFileError(f"cannot read {path}: {exc}") from exc
    return parse(raw, encoding=encoding)
