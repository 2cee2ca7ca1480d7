# ccinit

`ccinit` sets up a `.claude` configuration directory in a project by
copying a tree of template files into it. Files and directories that
already exist are left untouched, so running it again is safe.

## Installation

```
pip install .
```

## Usage

Initialize in the current directory:

```
cc-init
```

Initialize in another directory:

```
cc-init -t ./myproject
```

Preview what would be created without writing anything:

```
cc-init --dry-run
```

Show detailed output:

```
cc-init -v
```

Print the version:

```
cc-init --version
```

Running `cc-init help` prints the usage text to standard error.

### Options

| Flag | Meaning |
| --- | --- |
| `-t`, `--target DIR` | Target directory for initialization (default: `.`) |
| `--dry-run` | Preview operations without making changes |
| `-v`, `--verbose` | Enable verbose output (debug lines, template list, error details) |
| `--no-color` | Disable colored output |
| `--version` | Show version information |

### Behaviour

- The target directory must exist and be a directory. Unless `--dry-run`
  is given, it must also be writable: a probe file `.cc-init-test` is
  created there and removed again.
- Templates are read from `ccinit/data/.claude` inside the installed
  package. Every template directory is created under `<target>/.claude`
  (mode `0755`), and every template file is copied there. Files ending
  in `.sh` or `.bash` get mode `0755`; other files get mode `0644`.
- Existing entries are skipped and counted. A path that exists with the
  wrong kind (a file where a directory belongs, or the other way round)
  stops the run with an error.
- With `--dry-run`, each entry is reported as `Would create ...` or
  `Would skip ...` and nothing is written; the summary starts with
  `DRY RUN - No changes were made`.
- At the end a summary lists how many files and directories were created
  and skipped. Problems are printed as `Error: ...` on standard error
  and the command exits with status 1.

## Use as a library

```python
from ccinit.cli import main

exit_code = main(["--dry-run", "-t", "./myproject"])
```

To copy a template tree from another location:

```python
from ccinit.cli import Config, validate_config
from ccinit.engine import Engine
from ccinit.templates import TemplateManager

config = validate_config(Config(target_dir="./myproject"))
stats = Engine(config, templates=TemplateManager("./my-templates")).run()
print(stats.files_created, stats.dirs_created)
```

The modules are:

- `ccinit.cli`: `Config`, `build_parser()`, `parse_args()`,
  `validate_config()` (raises `ConfigError`) and `main()`.
- `ccinit.engine`: `Engine`, whose `run()` returns `Statistics` or
  raises `InitError`.
- `ccinit.templates`: `TemplateManager` (walk, read, list and file modes
  of a template tree), `TemplateError` and `default_template_root()`.
- `ccinit.filesystem`: the `FileSystem` interface, `OSFileSystem`,
  `DryRunFileSystem` and `FileSystemError`.
- `ccinit.logger`: `Logger` and `pluralize()`.

## What is not included

The package does not ship any template contents. Until files are placed
in `ccinit/data/.claude`, `cc-init` stops with
`no template files found in the .claude template directory`. The command
has no option for choosing another template directory; use
`TemplateManager(root)` from Python for that.

## Development

```
pip install -e ".[test]"
pytest
```