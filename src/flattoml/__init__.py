"""Reader for flat ``[section]`` / ``key = value`` configuration files."""

from .binding import ConfigTarget, SectionModel, bind_from
from .config import LoggingConfig, ReaderSettings
from .data import ParsedConfig, get_bool, get_float, get_int, get_string
from .errors import ConfigFileError, FlatTomlError, ParseError
from .loader import load_file
from .logging_utils import JsonFormatter, configure_logging
from .parser import RawLine, parse, scan_line

__all__ = [
    "ConfigTarget",
    "SectionModel",
    "bind_from",
    "LoggingConfig",
    "ReaderSettings",
    "ParsedConfig",
    "get_bool",
    "get_float",
    "get_int",
    "get_string",
    "ConfigFileError",
    "FlatTomlError",
    "ParseError",
    "load_file",
    "JsonFormatter",
    "configure_logging",
    "RawLine",
    "parse",
    "scan_line",
]
