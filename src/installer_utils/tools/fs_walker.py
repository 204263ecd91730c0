"""
Filesystem walker for the installer utilities.

This module provides the two sources ``find`` draws candidates from: a cache file
listing known paths, and a depth-bounded recursive walk of a directory tree. Both
are exposed as lazy generators so callers can stop at the first match.
"""

import os
from itertools import islice
from pathlib import Path
from typing import Dict, List, Optional, Iterator, Union
import logging

from .matcher import SearchTerm, basename, matches


logger = logging.getLogger(__name__)


class FSWalker:
    """
    Filesystem walker that matches cache lines and directory entries against a term.

    The walker visits entries depth-first in pre-order, sorted by name in each
    directory, so results are stable for a given filesystem snapshot. Errors raised
    by the operating system while walking are not caught.
    """

    def __init__(self):
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'cache_lines_scanned': 0,
            'directories_traversed': 0,
            'entries_scanned': 0,
            'entries_matched': 0,
        }

    def iter_cache_matches(self, cache_file: Optional[Union[str, Path]], term: SearchTerm) -> Iterator[str]:
        """
        Yield the lines of a cache file whose base name matches the term.

        Args:
            cache_file: Path to a text file with one path per line (may be None)
            term: Search term

        Yields:
            Matching lines, verbatim, without the line terminator
        """
        if cache_file is None or not os.path.exists(cache_file):
            return

        logger.debug(f"Scanning cache file: {cache_file}")
        # Paths are arbitrary bytes; undecodable ones round-trip through surrogates
        with open(cache_file, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
            for line in f:
                line = line.rstrip('\n').rstrip('\r')
                self._stats['cache_lines_scanned'] += 1
                if matches(basename(line), term):
                    self._stats['entries_matched'] += 1
                    yield line

    def scan_cache(self, cache_file: Optional[Union[str, Path]], term: SearchTerm, find_all: bool = False) -> List[str]:
        """
        Collect matches from a cache file.

        Args:
            cache_file: Path to the cache file, or None
            term: Search term
            find_all: Collect every matching line instead of only the first one

        Returns:
            Matching lines in file order (at most one unless ``find_all``)
        """
        return _take(self.iter_cache_matches(cache_file, term), find_all)

    def iter_matches(self, root: Union[str, Path], term: SearchTerm, max_depth: Union[int, float] = float('inf')) -> Iterator[str]:
        """
        Recursively walk a directory tree and yield the paths whose name matches.

        Args:
            root: Directory to walk (not itself a candidate); a missing root yields nothing
            term: Search term
            max_depth: Deepest level visited; children of root are level 1

        Yields:
            Paths of matching entries, joined onto ``root``
        """
        root = os.fspath(root)
        if not os.path.isdir(root):
            logger.warning(f"Root directory does not exist: {root}")
            return

        logger.debug(f"Walking directory tree: {root} (max depth {max_depth})")
        yield from self._walk_directory(root, term, 1, max_depth)

    def _walk_directory(self, directory: str, term: SearchTerm, depth: int, max_depth: Union[int, float]) -> Iterator[str]:
        if depth > max_depth:
            return

        self._stats['directories_traversed'] += 1
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)

        for entry in entries:
            self._stats['entries_scanned'] += 1
            entry_path = os.path.join(directory, entry.name)

            if matches(entry.name, term):
                self._stats['entries_matched'] += 1
                yield entry_path

            if entry.is_dir(follow_symlinks=False):
                yield from self._walk_directory(entry_path, term, depth + 1, max_depth)

    def walk(self, root: Union[str, Path], term: SearchTerm, find_all: bool = False,
             max_depth: Union[int, float] = float('inf')) -> List[str]:
        """
        Collect matches from a directory tree.

        Args:
            root: Directory to walk
            term: Search term
            find_all: Collect every match instead of stopping at the first one
            max_depth: Deepest level visited

        Returns:
            Matching paths in walk order (at most one unless ``find_all``)
        """
        return _take(self.iter_matches(root, term, max_depth), find_all)

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the walking operations performed so far.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()


def _take(candidates: Iterator[str], find_all: bool) -> List[str]:
    if find_all:
        return list(candidates)
    return list(islice(candidates, 1))


def list_directories(src_path: Union[str, Path], full_path: bool = True) -> List[str]:
    """
    Get the list of directories directly inside a directory.

    Args:
        src_path: Directory where to look in
        full_path: Return normalized full paths instead of bare directory names

    Returns:
        Directory paths (or names), sorted by name
    """
    src_path = os.fspath(src_path)
    directories = []
    for name in sorted(os.listdir(src_path)):
        entry_path = os.path.join(src_path, name)
        if os.path.isdir(entry_path):
            directories.append(os.path.normpath(entry_path) if full_path else name)
    return directories
