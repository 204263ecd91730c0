"""
Search and execution tools for the installer utilities.

This module contains the name matcher, the filesystem walker, the ``find``
orchestration, program execution and JSON file helpers.
"""

from .matcher import matches
from .fs_walker import FSWalker, list_directories
from .finder import find, NotFoundError
from .exec import log_exec, ExecError
from .json_file import parse_json_file, validate, JSONFileError, SchemaValidationError

__all__ = [
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
    'SchemaValidationError'
]
