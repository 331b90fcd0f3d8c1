# pipex

A small POSIX toolkit: one pipeline command and the C-style helpers that
come with it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The `pipex` command

```
pipex input.txt output.txt
```

Takes exactly two arguments and behaves like the shell pipeline

```
cat < input.txt | grep esta > output.txt
```

The output file is created or truncated (mode `0777`, subject to the umask)
before the input file is opened. The command exits with `grep`'s status, so
it exits with 1 when no line matches. Any other number of arguments ends the
command with status 1. If a file cannot be opened, a message is written to
standard error and the status is 1.

The same pipeline is available from Python:

```python
from pipex.pipeline import run

status = run("input.txt", "output.txt")
```

`run` raises `FileNotFoundError` if the input file does not exist.

## Helpers

- `pipex.chars`: ASCII character classes and case mapping: `is_alnum`,
  `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower`, `to_upper`.
  Each accepts an integer code or a one-character string.
- `pipex.numbers`: `atoi` parses a leading decimal integer. `itoa` formats a
  32-bit signed integer and raises `OverflowError` outside that range.
- `pipex.search`: `strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
  `memchr`, `memcmp`. Positions are returned as indices, or `None` when
  nothing is found.
- `pipex.transform`: `split` drops empty pieces. Also `strtrim` and `substr`.
- `pipex.edit`: `strjoin`, `strdup`, `strmapi`, `striteri`, and the bounded
  byte-buffer copies `strlcpy` and `strlcat`.
- `pipex.memory`: `bzero`, `memset`, `memcpy`, `memmove` on writable byte
  buffers (`bytearray` or writable `memoryview`).
- `pipex.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` write to a
  stream, standard output by default.
- `pipex.printf`: `format_string` returns the formatted text. `printf` writes
  it to standard output and returns its length. Supported conversions are
  `%c %s %p %d %i %u %x %X %%`.
- `pipex.lines`: `LineReader` reads a file descriptor in fixed-size chunks
  and returns one line at a time as bytes. It can also be iterated.

```python
from pipex.printf import format_string
from pipex.transform import split

format_string("%d items, %x hex", 42, 255)   # "42 items, ff hex"
split("  a  b c ", " ")                      # ["a", "b", "c"]
```

## What it does not do

The package has no command or function that searches the directories in
`PATH` for a program and runs it. The pipeline always runs `cat` and
`grep esta`, and these are found the usual way by the operating system.
The command does not take arbitrary commands to chain.