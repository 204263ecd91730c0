"""
Data models for the installer utilities.

This module contains the option and result structures used throughout the package.
"""

from .options import SearchOptions, ExecOptions, ExecResult
from .config import UtilsConfig

__all__ = ['SearchOptions', 'ExecOptions', 'ExecResult', 'UtilsConfig']
