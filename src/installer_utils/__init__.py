"""
Installer Utilities - Core Package

Process-execution and filesystem-search helpers for build and installer tooling.
"""

from .models import SearchOptions, ExecOptions, ExecResult
from .tools import (
    matches,
    FSWalker,
    list_directories,
    find,
    NotFoundError,
    log_exec,
    ExecError,
    parse_json_file,
    validate,
    JSONFileError,
    SchemaValidationError
)
from .config import load_config, ConfigurationError

__version__ = "0.1.0"
__author__ = "Installer Utilities Team"

__all__ = [
    'SearchOptions',
    'ExecOptions',
    'ExecResult',
    'matches',
    'FSWalker',
    'list_directories',
    'find',
    'NotFoundError',
    'log_exec',
    'ExecError',
    'parse_json_file',
    'validate',
    'JSONFileError',
    'SchemaValidationError',
    'load_config',
    'ConfigurationError'
]
