"""Locating commands on PATH and starting them."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping
from typing import IO, Optional, Union

from pipex.errors import ErrorCode, PipexError
from pipex.libft.strings import split

Stream = Union[int, IO, None]


def find_executable(command: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Path of an executable for ``command``, or None.

    ``command`` itself is used when it is executable as given; otherwise
    each directory of the environment's PATH is tried in order.
    """
    if env is None:
        env = os.environ
    if os.access(command, os.X_OK):
        return command
    search = env.get("PATH")
    if search is None:
        return None
    for directory in split(search, ":"):
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(
    argument: str, env: Optional[Mapping[str, str]] = None
) -> tuple[str, list[str]]:
    """Split ``argument`` on spaces and locate its program.

    Returns the executable's path and the argument list. Raises
    :class:`PipexError` when the command is empty or cannot be found.
    """
    if not argument:
        raise PipexError(ErrorCode.COMMAND_NOT_FOUND)
    words = split(argument, " ")
    if not words:
        raise PipexError(ErrorCode.COMMAND_NOT_FOUND)
    path = find_executable(words[0], env)
    if path is None:
        raise PipexError(ErrorCode.COMMAND_NOT_FOUND)
    return path, words


def execute(
    argument: str,
    stdin: Stream = None,
    stdout: Stream = None,
    env: Optional[Mapping[str, str]] = None,
) -> subprocess.Popen:
    """Start the command described by ``argument`` with the given streams.

    Raises :class:`PipexError` if the command is not found or cannot be run.
    """
    path, words = resolve_command(argument, os.environ if env is None else env)
    try:
        return subprocess.Popen(
            words,
            executable=path,
            stdin=stdin,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except OSError as exc:
        raise PipexError(ErrorCode.EXECUTION) from exc