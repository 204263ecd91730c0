"""
Directory and file search for the installer utilities.

``find`` looks for entries whose base name matches a search term, first in an
optional cache file of known paths and then in a live walk of one or more root
directories.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union
import logging

from ..models.options import SearchOptions
from .fs_walker import FSWalker
from .matcher import SearchTerm, describe_term, validate_term


logger = logging.getLogger(__name__)


PathLike = Union[str, Path]


class NotFoundError(LookupError):
    """Raised when a search finds nothing matching its term."""

    def __init__(self, term: SearchTerm):
        self.term = term
        super().__init__(f'Cannot find anything matching "{describe_term(term)}".')


def _normalize_roots(roots: Union[PathLike, Sequence[PathLike]]) -> List[str]:
    if isinstance(roots, (str, os.PathLike)):
        return [os.fspath(roots)]
    return [os.fspath(root) for root in roots]


def _build_options(options: Optional[Union[SearchOptions, Dict[str, Any]]], overrides: Dict[str, Any]) -> SearchOptions:
    if options is None:
        options = SearchOptions()
    elif isinstance(options, dict):
        options = SearchOptions(**options)
    if overrides:
        options = SearchOptions(**{**options.model_dump(), **overrides})
    return options


def find(roots: Union[PathLike, Sequence[PathLike]], term: SearchTerm,
         options: Optional[Union[SearchOptions, Dict[str, Any]]] = None,
         **overrides: Any) -> Union[str, List[str]]:
    """
    Find files or directories by name.

    Args:
        roots: Directory, or list of directories, where to look
        term: Literal/glob string or compiled regex matched against base names
        options: SearchOptions (or a dict of its fields)
        **overrides: Individual SearchOptions fields, applied on top of ``options``

    Returns:
        Path of the first item found, or the list of every item found if ``find_all``

    Raises:
        NotFoundError: If nothing matches
        TypeError: If the term is neither a string nor a compiled regex
    """
    term = validate_term(term)
    options = _build_options(options, overrides)
    roots = _normalize_roots(roots)
    walker = FSWalker()

    occurrences = walker.scan_cache(options.cache_file, term, options.find_all)
    if occurrences:
        logger.debug(f"Found {len(occurrences)} match(es) in cache file {options.cache_file}")

    if not occurrences or options.find_all:
        for root in roots:
            occurrences.extend(walker.walk(root, term, options.find_all, options.max_depth))
            if occurrences and not options.find_all:
                logger.debug(f"Stopping search after first match in {root}")
                break

    if not occurrences:
        raise NotFoundError(term)

    logger.debug(f"Search for '{describe_term(term)}' finished: {walker.get_stats()}")
    return occurrences if options.find_all else occurrences[0]
