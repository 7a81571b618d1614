"""Error codes, their messages and the exception that carries them."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO


class ErrorCode(IntEnum):
    """Every failure the pipeline can report."""

    ARGUMENTS = 1
    PIPE = 2
    FORK = 3
    INFILE = 4
    OUTFILE = 5
    COMMAND_NOT_FOUND = 6
    DUP = 7
    EXECUTION = 8
    MEMORY = 9

    def message(self) -> str:
        """The text shown to the user for this code."""
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.ARGUMENTS: (
        "Error. Wrong number of arguments\n"
        "Correct usage: ./pipex infile cmd1 cmd2 outfile"
    ),
    ErrorCode.PIPE: "Error. Pipe failed",
    ErrorCode.FORK: "Error. Fork failed",
    ErrorCode.INFILE: "Error. Couldn't read infile",
    ErrorCode.OUTFILE: "Error. Couldn't read outfile",
    ErrorCode.COMMAND_NOT_FOUND: "Error. Command not found",
    ErrorCode.DUP: "Error. Dup2 failed",
    ErrorCode.EXECUTION: "Error. Execution failed",
    ErrorCode.MEMORY: "Error. Malloc failed",
}


class PipexError(Exception):
    """A failure identified by an :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode | int) -> None:
        self.code = ErrorCode(code)
        super().__init__(self.code.message())


def report(error: PipexError | ErrorCode | int, stream: TextIO | None = None) -> None:
    """Write the message for ``error`` and a newline to ``stream`` (standard error by default)."""
    if stream is None:
        stream = sys.stderr
    code = error.code if isinstance(error, PipexError) else ErrorCode(error)
    stream.write(code.message() + "\n")
    stream.flush()