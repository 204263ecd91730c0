"""
Search term matching for the installer utilities.

A search term is either a plain string, which matches a name that is equal to it
or that satisfies it as a shell-style glob, or a compiled regular expression,
which matches when it is found anywhere in the name.
"""

import os
import re
import fnmatch
from typing import Pattern, Union


SearchTerm = Union[str, Pattern[str]]


def validate_term(term: SearchTerm) -> SearchTerm:
    """
    Check that a search term has a supported type.

    Raises:
        TypeError: If the term is neither a string nor a compiled pattern
    """
    if isinstance(term, (str, re.Pattern)):
        return term
    raise TypeError(f"Search term must be a string or a compiled regex, got {type(term).__name__}")


def describe_term(term: SearchTerm) -> str:
    """Get the human-readable form of a search term."""
    return term.pattern if isinstance(term, re.Pattern) else term


def basename(path: str) -> str:
    """Get the final segment of a path, ignoring trailing separators."""
    stripped = path.rstrip('/' + os.sep)
    return os.path.basename(stripped)


def matches(name: str, term: SearchTerm) -> bool:
    """
    Check if a base name matches a search term.

    Args:
        name: Final path segment of the candidate
        term: Literal/glob string or compiled regular expression

    Returns:
        True if the name matches
    """
    if isinstance(term, str):
        return name == term or fnmatch.fnmatchcase(name, term)
    return term.search(name) is not None
