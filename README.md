# cargoconf

Building blocks for working with Cargo configuration: finding the
configuration files, merging configuration layers, remembering where each
value was defined, and running external programs.

## Installation

```
pip install cargoconf
```

## Modules

### `cargoconf.walk`

- `Walk(current_dir, cargo_home)` is an iterator over configuration file
  paths. It looks in `current_dir/.cargo` and the `.cargo` directory of every
  parent directory, nearest first, and finally in `cargo_home`. If
  `cargo_home` was already visited as one of the ancestors' `.cargo`
  directories it is not visited again. Pass `None` for `cargo_home` to skip
  it.
- `Walk.with_default_home(current_dir)` uses `cargo_home_with_cwd(current_dir)`
  as the home directory.
- `config_path(path)` returns `path/config` if it exists, otherwise
  `path/config.toml` if that exists, otherwise `None`.
- `cargo_home_with_cwd(cwd)` returns `$CARGO_HOME` (resolved against `cwd`
  when relative) or `~/.cargo`; `rustup_home_with_cwd(cwd)` does the same
  for `$RUSTUP_HOME` and `~/.rustup`. Both return `None` when no home
  directory can be found.
- `home_dir()` returns the user's home directory (on Windows `USERPROFILE`
  first), or `None`.

### `cargoconf.value`

- `Definition` records where a value was defined: `Definition.path(file)`,
  `Definition.environment(key)` or `Definition.cli(path=None)`. Its `kind`
  is a `DefinitionKind` (`PATH`, `ENVIRONMENT`, `CLI`).
  `root(current_dir)` is the directory above `.cargo` for a file, and
  `current_dir` otherwise; `root_opt` does the same but accepts `None`.
  Two definitions are equal when they are of the same kind.
- `Value(val, definition=None)` wraps a value with its definition.
  `parse(converter)` converts the inner value and keeps the definition.
  `resolve_as_path(current_dir)` joins a relative value onto the
  definition's root; `resolve_as_program_path(current_dir)` does so only
  when the value contains `/` or `\`, leaving bare program names alone.
  `set_path(path)` marks the value as defined in that file.
- `set_path(obj, path)` marks every `Value` reachable through lists, tuples,
  dict values and dataclass fields as defined in `path`.

### `cargoconf.merge`

- `merge(high, low, force)` returns the merge of `low` into `high` without
  modifying either. `None` means absent. Lists are joined with the
  higher-precedence items placed last; dicts are merged key by key; two
  dataclass instances of the same type are merged field by field (fields
  with `merge=False` in their metadata keep `high`'s value). Any other
  value, including a `Value`, is replaced by `low` only when `force` is
  true. Mixing a container with a non-container, or different kinds of
  container, raises `MergeError`.
- `merge_mapping(high, low, force)` and `merge_array(high, low)` are the
  table and array steps on their own.

### `cargoconf.process`

- `ProcessBuilder(program, *args)` builds a command line; `arg` and `args`
  add arguments and return the builder.
- `run_with_output()` runs the program with captured output and returns the
  `subprocess.CompletedProcess`. It raises `ProcessError` when the program
  cannot be started or exits with a non-zero status; the message includes
  the status and any non-empty stdout and stderr, which are also available
  as attributes.
- `read()` returns standard output decoded as UTF-8 with trailing newlines
  removed.
- `str(builder)` shows the command line in backticks;
  `display(alternate=True)` shows it without them.

## Examples

```python
from pathlib import Path

from cargoconf.walk import Walk

for config_file in Walk.with_default_home(Path.cwd()):
    print(config_file)
```

```python
from cargoconf.merge import merge_mapping

high = {"rustflags": ["-C", "opt-level=3"]}
low = {"rustflags": ["--cfg", "foo"]}
merged = merge_mapping(high, low, force=False)
# merged["rustflags"] == ["--cfg", "foo", "-C", "opt-level=3"]
```

## What this package does not do

It does not read or parse TOML configuration files, does not define a typed
model of Cargo's configuration tables, and does not resolve a complete
configuration (targets, flags, environment overrides) for a build. It has no
command-line program; it is a library of the pieces listed above.

## Running the tests

```
pip install -e ".[test]"
pytest
```