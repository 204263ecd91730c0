"""
Program execution with logging for the installer utilities.

``log_exec`` reports the command line and extra environment on a caller supplied
logger before running the program, so installer logs show exactly what was run.
"""

import json
import os
import subprocess
import tempfile
from contextlib import ExitStack
from typing import Any, Dict, IO, List, Optional, Sequence, Union
import logging

from ..models.options import ExecOptions, ExecResult


NULL_LOGGER_NAME = 'installer_utils.null'


class ExecError(RuntimeError):
    """Raised when a program cannot be started or exits with a non-zero code."""

    def __init__(self, message: str, cmd: str, code: Optional[int] = None,
                 stdout: str = "", stderr: str = ""):
        super().__init__(message)
        self.cmd = cmd
        self.code = code
        self.stdout = stdout
        self.stderr = stderr


def _get_dummy_logger() -> logging.Logger:
    """Get a logger that discards every record."""
    null_logger = logging.getLogger(NULL_LOGGER_NAME)
    if not null_logger.handlers:
        null_logger.addHandler(logging.NullHandler())
    null_logger.propagate = False
    return null_logger


def _normalize_args(args: Optional[Union[str, Sequence[str]]]) -> List[str]:
    if args is None:
        return []
    if isinstance(args, str):
        return [args]
    return [str(arg) for arg in args]


def _build_options(options: Optional[Union[ExecOptions, Dict[str, Any]]], overrides: Dict[str, Any]) -> ExecOptions:
    if options is None:
        options = ExecOptions()
    elif isinstance(options, dict):
        options = ExecOptions(**options)
    if overrides:
        options = ExecOptions(**{**options.model_dump(), **overrides})
    return options


def format_command_message(cmd: str, args: List[str]) -> str:
    """Build the message announcing a command execution."""
    message = f'Executing command: "{cmd}"'
    if len(args) == 1:
        message += f' with a single argument: "{args[0]}"'
    elif len(args) > 1:
        message += f' with arguments: {json.dumps(args, separators=(",", ":"))}'
    return message


def format_environment_message(env: Dict[str, str]) -> str:
    """Build the message listing extra environment variables."""
    return "ENVIRONMENT VARIABLES:\n" + "".join(f"{key}={value}\n" for key, value in env.items())


def log_exec(cmd: str, args: Optional[Union[str, Sequence[str]]] = None,
             options: Optional[Union[ExecOptions, Dict[str, Any]]] = None,
             logger: Optional[logging.Logger] = None,
             **overrides: Any) -> Union[str, ExecResult, subprocess.Popen]:
    """
    Execute a command logging its arguments and environment variables.

    Args:
        cmd: Command to execute
        args: Single argument or list of arguments
        options: ExecOptions (or a dict of its fields)
        logger: Logger receiving the messages; nothing is logged if omitted
        **overrides: Individual ExecOptions fields, applied on top of ``options``

    Returns:
        Program stdout, an ExecResult if ``retrieve_std_streams`` is set, or the
        process handle if ``run_in_background`` is set

    Raises:
        ExecError: If the command cannot be started or exits with a non-zero code
    """
    options = _build_options(options, overrides)
    logger = logger or _get_dummy_logger()
    args = _normalize_args(args)

    logger.info(format_command_message(cmd, args))

    env_vars = options.non_empty_env()
    if env_vars:
        logger.debug(format_environment_message(env_vars))

    env = os.environ.copy()
    env.update(options.env)

    try:
        if options.run_in_background:
            return _run_in_background(cmd, args, options, env)
        return _run(cmd, args, options, env)
    except OSError as e:
        raise ExecError(f'Cannot run command "{cmd}": {e.strerror}: {e.filename}', cmd=cmd) from e


def _open_output(stack: ExitStack, path: Optional[str], mode: str) -> Union[IO, int]:
    if path is None:
        return subprocess.DEVNULL
    return stack.enter_context(open(path, mode))


def _run_in_background(cmd: str, args: List[str], options: ExecOptions, env: Dict[str, str]) -> subprocess.Popen:
    # The child holds its own descriptors once spawned
    with ExitStack() as stack:
        stdout = _open_output(stack, options.stdout_file, options.stdout_file_mode)
        stderr = _open_output(stack, options.stderr_file, options.stderr_file_mode)
        return subprocess.Popen(
            [cmd, *args],
            stdin=subprocess.DEVNULL,
            stdout=stdout,
            stderr=stderr,
            cwd=options.cwd,
            env=env,
        )


def _run(cmd: str, args: List[str], options: ExecOptions, env: Dict[str, str]) -> Union[str, ExecResult]:
    if options.ignore_std_streams:
        completed = subprocess.run(
            [cmd, *args],
            input=options.input,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            cwd=options.cwd,
            env=env,
            text=True,
        )
        result = ExecResult(code=completed.returncode)
    elif options.detach_std_streams:
        with tempfile.TemporaryFile(mode='w+') as out, tempfile.TemporaryFile(mode='w+') as err:
            completed = subprocess.run(
                [cmd, *args],
                input=options.input,
                stdout=out,
                stderr=err,
                cwd=options.cwd,
                env=env,
                text=True,
            )
            out.seek(0)
            err.seek(0)
            result = ExecResult(code=completed.returncode, stdout=out.read(), stderr=err.read())
    else:
        completed = subprocess.run(
            [cmd, *args],
            input=options.input,
            capture_output=True,
            cwd=options.cwd,
            env=env,
            text=True,
        )
        result = ExecResult(code=completed.returncode, stdout=completed.stdout, stderr=completed.stderr)

    if options.retrieve_std_streams:
        return result

    if not result.succeeded():
        raise ExecError(
            f'Command "{cmd}" exited with code {result.code}: {result.stderr.strip()}',
            cmd=cmd,
            code=result.code,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    return result.stdout
