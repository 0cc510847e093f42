# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file. Its output feeds the second command, and the second command writes
to an output file. It does the same job as this shell line:

```
< infile cmd1 | cmd2 > outfile
```

## Installation

```
pip install .
```

## Command line

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

You can also run it with `python -m pipex.cli`.

It takes exactly four arguments. Each command is split on spaces into a
program name and its arguments. Empty words are dropped, and quotes get no
special treatment. If the first word names a file that exists, that file is
run as it is. If not, `pipex` tries `directory/name` for each directory in
`PATH`, in order, and runs the first one that exists.

Example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

The output file is created with mode `0777`, minus the umask, if it does not
exist. If it exists, it is truncated.

### Errors and exit status

- **Wrong number of arguments:** the message `Error !` and
  `4 arguments are required !` goes to standard error, and the exit status
  is 1.
- **The pipe cannot be created:** `Error Pipe : ` and the system's reason go
  to standard error, and the exit status is 1.
- **A stage fails:** the reason goes to standard error, but the exit status
  is still 0 and the other stage runs anyway. A stage can fail for these
  reasons:

  | Cause | Message |
  | --- | --- |
  | A file cannot be opened | `Error Fd : ` and the reason |
  | `PATH` is not set | `Error Env path !` |
  | The program is not found in `PATH` | `Error execute_path !` |
  | The command is empty or cannot be started | `Error command not found !` |

## Library use

### `pipex.cli`

- **`run_pipeline(infile, first, second, outfile, env=None)`** runs a pipeline
  without going through the command line. When `env` is `None` it uses
  `os.environ`. It returns the exit status of the second command, or 1 if that
  command never started. It raises `PipexError` only when the pipe cannot be
  created.
- **`main(argv=None)`** is the command-line entry point. It returns the exit
  status.

### `pipex.command`

- **`parse_command(spec, env)`** splits a command string and returns a frozen
  `Command`. A `Command` holds `argv`, a tuple, and `executable`, the path
  that was found. It raises `PipexError` on failure.
- **`PipexError`** carries `message` and `exit_code`.
- **`path_directories(env)`** returns the entries of `PATH`, or `None` if
  `PATH` is not set.
- **`resolve_executable(name, directories)`** returns the first existing
  `directory/name`, or `None`.

### `pipex.linereader`

- **`LineReader(stream, chunk_size=10_000_000)`** reads a text or binary
  stream. Each line it returns keeps its trailing newline. `read_line()`
  returns `None` at the end of the stream. Iterating over a `LineReader`
  yields every line.
- **`read_lines(stream)`** is a generator over all lines of `stream`.

### `pipex.printf`

- **`format_string(fmt, *args)`** supports `%c %s %p %d %i %u %x %X %%`:
  - Integers are treated as 32-bit values: signed for `%d` and `%i`, unsigned
    for `%u`, `%x` and `%X`.
  - `%s` of `None` gives `(null)`.
  - `%p` of `None` or 0 gives `(nil)`.
  - Unknown conversions produce nothing and use up no argument.
  - A `None` format gives `""`.
  - A lone trailing `%` raises `ValueError`.
  - Too few arguments raise `TypeError`.
- **`print_formatted(fmt, *args, stream=None)`** writes the formatted text to
  `stream`, which defaults to stdout. It returns the number of characters
  written.

### `pipex.output`

`put_char`, `put_str`, `put_endl` and `put_number` write to a text stream,
which defaults to stdout. `put_str` and `put_endl` write nothing when given
`None`.

### `pipex.text`

- **`parse_int`** reads a number the way `atoi` does.
- **`split`** splits on one character and drops empty words.
- **`trim`** strips characters from both ends.
- **`find_within`** searches for a substring within the first `limit`
  characters. It returns the index, or `None` if there is no match.
- **`substring`** returns part of a string.
- **`compare_prefix`** compares strings the way `strncmp` does.

## Limitations

`pipex` runs exactly two commands. It does not support:

- quoting or escapes in command strings
- here-documents
- appending to the output file

## Running the tests

```
pip install ".[test]"
pytest
```