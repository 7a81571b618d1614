"""Running ``infile < cmd1 | cmd2 > outfile``."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import Optional, Union

from pipex.errors import ErrorCode, PipexError, report
from pipex.execution import execute

PathLike = Union[str, "os.PathLike[str]"]


def _start(
    argument: str, stdin: int, stdout: int, env: Optional[Mapping[str, str]]
) -> Optional[subprocess.Popen]:
    try:
        return execute(argument, stdin, stdout, env)
    except PipexError as err:
        report(err)
        return None


def _launch_first(
    infile: PathLike, argument: str, write_fd: int, env: Optional[Mapping[str, str]]
) -> Optional[subprocess.Popen]:
    try:
        source = os.open(infile, os.O_RDONLY)
    except OSError:
        report(ErrorCode.INFILE)
        return None
    try:
        return _start(argument, source, write_fd, env)
    finally:
        os.close(source)


def _launch_second(
    outfile: PathLike, argument: str, read_fd: int, env: Optional[Mapping[str, str]]
) -> Optional[subprocess.Popen]:
    try:
        target = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError:
        report(ErrorCode.OUTFILE)
        return None
    try:
        return _start(argument, read_fd, target, env)
    finally:
        os.close(target)


def _status(proc: Optional[subprocess.Popen]) -> int:
    return 1 if proc is None else proc.wait()


def run_pipeline(
    infile: PathLike,
    first: str,
    second: str,
    outfile: PathLike,
    env: Optional[Mapping[str, str]] = None,
) -> tuple[int, int]:
    """Feed ``infile`` to ``first``, pipe its output to ``second``, write to ``outfile``.

    Each side fails on its own: its error is reported on standard error and
    its status is 1, while the other side still runs. Returns the exit
    statuses of both commands. Raises :class:`PipexError` if no pipe can be made.
    """
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise PipexError(ErrorCode.PIPE) from exc
    try:
        producer = _launch_first(infile, first, write_fd, env)
    finally:
        os.close(write_fd)
    try:
        consumer = _launch_second(outfile, second, read_fd, env)
    finally:
        os.close(read_fd)
    return _status(producer), _status(consumer)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        report(ErrorCode.ARGUMENTS)
        return 1
    infile, first, second, outfile = args
    try:
        run_pipeline(infile, first, second, outfile)
    except PipexError as err:
        report(err)
        return 1
    return 0