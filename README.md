# grepx

A multi-threaded regex search tool. It looks for a regular expression
in files or directory trees and reports how many matches each file has,
which files match, or the matching lines with their line numbers.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

```
grepx PATTERN [PATH ...] [options]
```

Options may come before or after the paths. `PATH` defaults to the
current directory. A path that is a file is searched as it is; a
directory contributes only its top-level files unless `-r` is given, in
which case every file below it is searched (symbolic links are followed,
loops are skipped). Paths that do not exist are skipped with a warning.

Matching is case-insensitive by default. `^` and `$` match at the start
and end of each line. `.` does not match a newline. Patterns use the
syntax of Python's `re` module.

| Option | Meaning |
| --- | --- |
| `-t`, `--threads N` | Worker threads (0 = one per CPU, the default) |
| `-r`, `--recursive` | Search directories recursively |
| `-s`, `--case-sensitive` | Match case exactly |
| `-n`, `--line-numbers` | Print matching lines with their line numbers |
| `-l`, `--files-with-matches` | Print only the names of files that match |
| `-c`, `--count` | Print `FILE: COUNT` for each file that matches |
| `-p`, `--progress` | Show a progress bar |
| `--chunk-size KB` | Files of at least this size are read in chunks of this size (default 64) |
| `-f`, `--format {text,json,grep}` | Accepted, but has no effect on the output yet |
| `--log-level {off,error,warn,info,debug,trace}` | Logging verbosity on standard error (default `info`) |
| `-V`, `--version` | Print the version and exit |

Only files with at least one match are reported. Without `-c`, `-l` or
`-n`, each such file gives a line `Found N matches in FILE`. With `-n`,
each file gives a `File: FILE` header, then `LINE: text` for every
matching line, then a blank line. Files are searched in parallel, so the
order of the per-file output is not fixed.

After the search, grepx prints a summary line:

```
Found 12 matches in 34 files
```

An invalid pattern prints `Error: Failed to compile regex pattern: ...`
to standard error and the command exits with status 1. Files that cannot
be read are reported on standard error and left out of the totals.

### Examples

Count occurrences of `todo` in every file below `src`, ignoring case:

```
grepx todo src -r -c
```

List files that contain `fn main`, matching case exactly:

```
grepx -s -l "fn main" . -r
```

Print matching lines with their line numbers:

```
grepx -n "^import " project
```

## Limitations

- `--format` is parsed, but there is no JSON or grep-style output; the
  output is always the plain text described above.
- Content that is not valid UTF-8 never matches. Large files are read in
  chunks of `--chunk-size` KB, and a match that spans the boundary
  between two chunks is not counted; a chunk that splits a multi-byte
  character counts no matches.
- There is no context output around matches on the command line.

## Use from Python

```python
from grepx.cli import parse_args
from grepx.engine import execute_search

args = parse_args(["error", "logs", "-r", "-c"])
result = execute_search(args)
print(result.total_matches, result.files_searched)
```

`parse_args` returns an `Args` dataclass and sets the level of the
`grepx` logger. `execute_search` prints per-file output as it goes and
returns a `SearchResult` with `total_matches`, `files_searched`,
`files_with_matches` and `bytes_processed`.

Other modules:

- `grepx.matcher.RegexMatcher(pattern, case_sensitive)` compiles a
  pattern (raising `ValueError` if it is invalid). Its `match_count`,
  `is_match` and `find_matches` methods take bytes; `find_matches`
  returns `Match` objects with `text`, `line_number` (1-based, or `None`
  when not asked for), `byte_offset` and `byte_length`.
- `grepx.reader.FileReader(path)` has `size`, `read_all`,
  `read_chunk(offset, size)` and `read_lines`; files of 1 MB or more are
  memory-mapped.
- `grepx.discovery.find_files(paths, recursive)` returns the list of
  files a search would cover.
- `grepx.text` has `extract_context`, `format_size`, `format_duration`,
  `calculate_speed` and `format_speed`.