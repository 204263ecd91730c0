"""
Option models for the installer utilities.

This module defines the validated option sets accepted by ``find`` and
``log_exec``, plus the result object returned when standard streams are
retrieved from an executed program.
"""

import math
from pathlib import Path
from typing import Dict, Optional, Any, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchOptions(BaseModel):
    """
    Options controlling a single ``find`` call.

    Attributes:
        find_all: Collect every occurrence instead of stopping at the first one
        cache_file: Text file listing known paths (one per line), checked before the filesystem
        max_depth: Maximum depth of the directory walk (infinite by default)
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    find_all: bool = Field(False, description="Search for all the occurrences")
    cache_file: Optional[str] = Field(None, description="File with one known path per line")
    max_depth: Union[int, float] = Field(math.inf, description="Maximum depth of the search")

    @field_validator('cache_file', mode='before')
    @classmethod
    def validate_cache_file(cls, v) -> Optional[str]:
        """Accept path-like values and expand a leading ``~``."""
        if v is None:
            return None
        if isinstance(v, Path):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError(f"cache_file must be a path, got {type(v).__name__}")
        if not v.strip():
            return None
        return str(Path(v).expanduser()) if v.startswith('~') else v

    @field_validator('max_depth')
    @classmethod
    def validate_max_depth(cls, v: Union[int, float]) -> Union[int, float]:
        """Only non-negative whole numbers or infinity are meaningful depths."""
        if v < 0:
            raise ValueError(f"max_depth must be >= 0, got {v}")
        if isinstance(v, float):
            if math.isinf(v):
                return v
            if not v.is_integer():
                raise ValueError(f"max_depth must be an integer or infinity, got {v}")
            return int(v)
        return v

    def is_depth_bounded(self) -> bool:
        """Check whether the walk has a finite depth limit."""
        return not math.isinf(self.max_depth)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class ExecOptions(BaseModel):
    """
    Options controlling how ``log_exec`` runs a program.

    Attributes:
        run_in_background: Start the program and return its process handle immediately
        retrieve_std_streams: Return stdout, stderr and exit code instead of just stdout
        ignore_std_streams: Discard both standard streams
        detach_std_streams: Buffer standard streams in temporary files while the program runs
        stdout_file: File receiving stdout when running in background
        stderr_file: File receiving stderr when running in background
        stdout_file_mode: Mode used to open ``stdout_file``
        stderr_file_mode: Mode used to open ``stderr_file``
        cwd: Working directory
        env: Extra environment variables made available to the program
        input: Text passed to the program's stdin
    """

    model_config = ConfigDict(extra='forbid')

    run_in_background: bool = False
    retrieve_std_streams: bool = False
    ignore_std_streams: bool = False
    detach_std_streams: bool = False
    stdout_file: Optional[str] = None
    stderr_file: Optional[str] = None
    stdout_file_mode: str = 'a+'
    stderr_file_mode: str = 'a+'
    cwd: Optional[str] = None
    env: Dict[str, str] = Field(default_factory=dict)
    input: Optional[str] = None

    @field_validator('stdout_file', 'stderr_file', 'cwd', mode='before')
    @classmethod
    def validate_paths(cls, v) -> Optional[str]:
        """Convert path-like values to strings."""
        if isinstance(v, Path):
            return str(v)
        return v

    @field_validator('env', mode='before')
    @classmethod
    def validate_env(cls, v) -> Dict[str, str]:
        """Environment values are always passed to the OS as strings."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError(f"env must be a mapping, got {type(v).__name__}")
        return {str(key): '' if value is None else str(value) for key, value in v.items()}

    @field_validator('stdout_file_mode', 'stderr_file_mode')
    @classmethod
    def validate_file_mode(cls, v: str) -> str:
        if not v or v[0] not in 'wax':
            raise ValueError(f"Invalid output file mode: {v}")
        return v

    def non_empty_env(self) -> Dict[str, str]:
        """Get the environment variables that carry a value."""
        return {key: value for key, value in self.env.items() if value}


class ExecResult(BaseModel):
    """
    Outcome of a program run with ``retrieve_std_streams`` enabled.

    Attributes:
        code: Exit code of the program
        stdout: Captured standard output
        stderr: Captured standard error
    """

    code: int
    stdout: str = ""
    stderr: str = ""

    def succeeded(self) -> bool:
        return self.code == 0
