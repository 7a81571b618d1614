# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file. Its output goes to the second command, and what the second
command prints goes to an output file. It does what this shell line does:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile cmd1 cmd2 outfile
```

For example, to count the lines of a file that mention "error":

```sh
pipex server.log "grep error" "wc -l" count.txt
```

Each command is split on spaces into a program name and its arguments.
Runs of spaces count as one, and no quoting or escaping is understood. The
program is used as given if it is executable. If it is not, each directory
on `PATH` is tried in order. The output file is opened for writing, created
with mode `0644` (subject to the umask) or emptied if it already exists.

The two sides fail independently. Some problems stop only their own side,
and the other side still runs:

- the input file cannot be opened,
- the output file cannot be opened,
- a command is empty or cannot be found,
- a process cannot be started.

In each of these cases a message such as `Error. Command not found` is
printed on standard error.

The exit status is 1 in two cases:

- the argument count is not exactly four, in which case a usage message is
  printed,
- no pipe can be created.

In every other case the exit status is 0, including when one side failed as
described above. The exit statuses of the two commands are not passed on.

## Library use

```python
from pipex.pipeline import run_pipeline

first_status, second_status = run_pipeline(
    "server.log", "grep error", "wc -l", "count.txt"
)
```

`run_pipeline(infile, first, second, outfile, env=None)` waits for both
commands and returns their exit statuses. A side that could not be started
has its problem reported on standard error and gets status 1. `env` is a
mapping used for the `PATH` lookup and passed to both commands. Without it
the current environment is used. If no pipe can be created,
`pipex.errors.PipexError` is raised.

`pipex.pipeline.main(argv=None)` is the command-line entry point. It
returns the exit status.

### Errors

`pipex.errors` defines the following:

- `ErrorCode`, an `IntEnum` with the members `ARGUMENTS`, `PIPE`, `FORK`,
  `INFILE`, `OUTFILE`, `COMMAND_NOT_FOUND`, `DUP`, `EXECUTION` and `MEMORY`.
  Its `message()` method returns the text shown to the user.
- `PipexError(code)`, an exception that carries an `ErrorCode` in its
  `code` attribute.
- `report(error, stream=None)`, which writes the message for a
  `PipexError`, an `ErrorCode` or an integer code, plus a newline. The
  default stream is standard error.

### Command lookup

`pipex.execution` provides three functions:

- `find_executable(command, env=None)` returns the path that would be run,
  or `None`.
- `resolve_command(argument, env=None)` splits the argument string on
  spaces and returns `(path, words)`. It raises `PipexError` with
  `COMMAND_NOT_FOUND` when the string is empty or the program is not found.
- `execute(argument, stdin=None, stdout=None, env=None)` starts the command
  and returns the `subprocess.Popen` object. It raises `PipexError` when
  the command cannot be found or started.

## Helpers

The `pipex.libft` sub-package holds small helpers that behave like the
classic C routines of the same names. Positions are returned as indices or
`None`, not as pointers.

- `pipex.libft.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `tolower`, `toupper`, `atoi`, `numlen` and `itoa`. Each takes
  a one-character string or an integer code.
- `pipex.libft.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memcmp` and `memchr`, which work on `bytes` and `bytearray`.
  `memmove(buffer, dst, src, length)` moves bytes within a single buffer
  between two offsets.
- `pipex.libft.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`
  and `striteri`, plus two functions that return a pair:
  - `strlcpy(src, size)` returns the copied text and the full length of
    `src`.
  - `strlcat(dst, src, size)` returns the joined text and the length the
    full concatenation would have had.
- `pipex.libft.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd`. Each writes to a file descriptor and returns the number of
  bytes written.
- `pipex.libft.printf`: `format_printf(fmt, *args)` returns the formatted
  text and `printf(fmt, *args)` writes it to standard output. Both handle
  `%c %s %p %d %i %u %x %X %%`. An unknown conversion produces nothing.
- `pipex.libft.linked_list`: `LinkedList`, a singly linked list of `Node`s
  with these members:
  - `push_front`, `push_back`, `last` and `pop_front`,
  - `clear`, `for_each` and `map`,
  - `len()` and iteration.
- `pipex.libft.line_reader`: `LineReader(fd, buffer_size=100000)` reads a
  file descriptor one line at a time as `bytes`, with `read_line()` or by
  iteration. `get_next_line(reader)` returns its next line or `None`.

## Limitations

- Exactly two commands are supported. There is no way to chain more.
- There is no here-document input mode.
- Command strings are split on spaces only. Quoted arguments and shell
  syntax such as globs, variables and redirections are not interpreted.