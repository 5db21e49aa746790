"""Parsed configuration data and typed lookups.

Every lookup resolves a missing section, a missing key and a malformed value
to the same zero value for its type. Callers that need to tell them apart
should inspect the mapping directly.
"""

from __future__ import annotations

import math
import re
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, TypeVar

T = TypeVar("T")

Sections = Mapping[str, Mapping[str, str]]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_BOOL_VALUES = {
    "1": True,
    "t": True,
    "T": True,
    "TRUE": True,
    "true": True,
    "True": True,
    "0": False,
    "f": False,
    "F": False,
    "FALSE": False,
    "false": False,
    "False": False,
}

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?inf(?:inity)?|nan", re.IGNORECASE)

# Unicode White_Space characters. str.strip() also drops \x1c-\x1f, which are
# kept here.
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class ParsedConfig(Mapping[str, Mapping[str, str]]):
    """Read-only two-level mapping: section -> key -> raw value.

    Section names are stored lowercased, keys exactly as written. Indexing the
    mapping directly is exact; the ``get_*`` methods lowercase the section.
    """

    def __init__(self, sections: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._sections: dict[str, dict[str, str]] = {
            name: dict(pairs) for name, pairs in (sections or {}).items()
        }

    def __getitem__(self, section: str) -> Mapping[str, str]:
        return MappingProxyType(self._sections[section])

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"ParsedConfig({self._sections!r})"

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Return a deep copy as plain dictionaries."""

        return {name: dict(pairs) for name, pairs in self._sections.items()}

    def get_string(self, section: str, key: str) -> str:
        return get_string(self, section, key)

    def get_bool(self, section: str, key: str) -> bool:
        return get_bool(self, section, key)

    def get_int(self, section: str, key: str) -> int:
        return get_int(self, section, key)

    def get_float(self, section: str, key: str) -> float:
        return get_float(self, section, key)


def trim(value: str) -> str:
    """Strip leading and trailing Unicode white space."""

    return value.strip(WHITESPACE)


def unquote(value: str) -> str:
    """Trim ``value`` and drop one pair of surrounding double quotes."""

    value = trim(value)
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_bool(text: str) -> bool:
    """Parse the conventional boolean spellings; raise ValueError otherwise."""

    try:
        return _BOOL_VALUES[text]
    except KeyError:
        raise ValueError(f"invalid boolean: {text!r}") from None


def parse_int(text: str) -> int:
    """Parse a base-10 signed 64-bit integer; raise ValueError otherwise."""

    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_float(text: str) -> float:
    """Parse a 64-bit float literal; raise ValueError otherwise.

    Finite literals that overflow to infinity are rejected.
    """

    if _SPECIAL_FLOAT_RE.fullmatch(text):
        return float(text)
    if _HEX_FLOAT_RE.fullmatch(text):
        try:
            return float.fromhex(text)
        except OverflowError:
            raise ValueError(f"float out of range: {text!r}") from None
    if _DECIMAL_FLOAT_RE.fullmatch(text):
        value = float(text)
        if math.isinf(value):
            raise ValueError(f"float out of range: {text!r}")
        return value
    raise ValueError(f"invalid float: {text!r}")


def _lookup(
    config: Sections,
    section: str,
    key: str,
    coerce: Callable[[str], T],
    default: T,
) -> T:
    # Parse-or-default: absence and malformed input both yield ``default``.
    pairs = config.get(section.lower())
    if pairs is None or key not in pairs:
        return default
    try:
        return coerce(trim(pairs[key]))
    except ValueError:
        return default


def get_string(config: Sections, section: str, key: str) -> str:
    """Return the unquoted string value, or ``""``."""

    return _lookup(config, section, key, unquote, "")


def get_bool(config: Sections, section: str, key: str) -> bool:
    """Return the boolean value, or ``False``."""

    return _lookup(config, section, key, parse_bool, False)


def get_int(config: Sections, section: str, key: str) -> int:
    """Return the integer value, or ``0``."""

    return _lookup(config, section, key, parse_int, 0)


def get_float(config: Sections, section: str, key: str) -> float:
    """Return the float value, or ``0.0``."""

    return _lookup(config, section, key, parse_float, 0.0)
