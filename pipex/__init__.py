"""Run two commands connected by a pipe between an input and an output file."""

__version__ = "0.1.0"