# ninjalite

Small building blocks for build tools. The package has no dependencies outside
the standard library.

## Modules

### `ninjalite.edit_distance`

`edit_distance(s1, s2, allow_replacements=True, max_edit_distance=0)` returns
the Levenshtein distance between two strings.

- With `allow_replacements=False`, a substitution counts as a deletion plus an
  insertion.
- With a non-zero `max_edit_distance`, the computation stops early and returns
  `max_edit_distance + 1` once a whole row of the table exceeds the limit.

### `ninjalite.depfile_parser`

`DepfileParser` reads the Makefile-style dependency files that compilers emit
with `-M`/`-MD`. After `parse(content)`, `parser.out` holds the target and
`parser.ins` the list of inputs.

It handles:

- backslash-escaped spaces: 2N+1 backslashes before a space give N backslashes
  and a space, and 2N backslashes end the name;
- `\#` for a hash sign and `$$` for a dollar sign;
- line continuations with `\` followed by LF or CRLF;
- repeated rules for the same target, and empty `name:` rules of the kind that
  `-MP` produces.

Failures raise `DepfileParseError`, a subclass of `ValueError`. Examples are a
missing `:` or several different targets in one rule.

Different targets on separate lines are controlled by `DepfileParserOptions`:

- with `depfile_distinct_target_lines_action` set to
  `DepfileDistinctTargetLinesAction.WARN` (the default), a warning is issued
  through `warnings.warn` and the extra inputs are skipped;
- with `DepfileDistinctTargetLinesAction.ERROR`, a `DepfileParseError` is raised.

```python
from ninjalite.depfile_parser import DepfileParser

parser = DepfileParser()
parser.parse("out.o: a.c a.h \\\n  b.h\n")
print(parser.out, parser.ins)   # out.o ['a.c', 'a.h', 'b.h']
```

### `ninjalite.disk_interface`

`DiskInterface` is an abstract interface for file-system access, so that it can
be faked in tests. It has these methods:

- `stat(path)` returns the mtime in nanoseconds, or 0 if the file is missing;
- `make_dir(path)` creates a directory;
- `write_file(path, contents)` writes a file;
- `read_file(path)` reads a file;
- `remove_file(path)` removes a file;
- `make_dirs(path)` creates every missing parent directory of `path`, like
  `mkdir -p`.

`RealDiskInterface` implements the interface on the real disk:

- `stat` returns 1 for a file whose mtime is zero, so that it does not read as
  missing;
- `stat` raises `StatError`, a subclass of `OSError`, for failures other than a
  missing file;
- `remove_file` returns `True` if the file was removed and `False` if it did not
  exist;
- `read_file` raises `FileNotFoundError` for a missing file.

`dir_name(path)` returns the directory part of a path. It drops any run of
separators before the last component.

## What this package does not do

It is a library of parts, not a build tool:

- it has no command-line program;
- it has no build-manifest parser;
- it does not run builds;
- it has no persistent store for discovered dependencies;
- it has no filtering of compiler include-listing output.

## Tests

```
pip install -e .[test]
pytest
```