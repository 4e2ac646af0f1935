# gingest

gingest reads a local directory, or clones a remote Git repository, and
writes a single Markdown digest of it. The digest holds a summary, a
directory tree and the text of every file, one after another under clear
headers, ready to be handed to an LLM as context.

## Installation

```
pip install .
```

Remote repositories are cloned with `git`, which must be on your `PATH`.

## Command-line use

```
gingest --source=./my-project
gingest --source=https://example.com/user/repo.git --output=repo.md
gingest --source=./project --maxsize=1048576 --output=digest.md
gingest --source=https://example.com/user/repo.git --branch=develop
gingest --source=./project --exclude="*.log,node_modules,*.tmp"
gingest --source=./project --include="*.go,*.md" --exclude=".git"
```

| Option | Meaning |
| --- | --- |
| `--source=<path\|url>` | Local directory or Git URL (required) |
| `--output=<file>` | Output file (default `digest.md`) |
| `--branch=<name>` | Branch to clone for Git repositories |
| `--maxsize=<bytes>` | Largest file whose content is kept (default 2 MB) |
| `--exclude=<patterns>` | Comma-separated exclude patterns |
| `--include=<patterns>` | Comma-separated include patterns; these override excludes |
| `--version` | Show version information |
| `--help`, `-h` | Show help |

A source counts as a Git URL when it starts with `git@`, ends in `.git`,
or mentions `github.com`, `gitlab.com` or `bitbucket.org`. Anything else
must be an existing directory.

If `--exclude` is left out or empty, a full default list is used
(`gingest.defaults.get_default_exclude_patterns()`). It covers dependency
directories (`node_modules`, `.venv`, `vendor`, `target`, `build`, …),
version control, IDE and OS files, logs, binaries, media files, lock files
and environment files. Patterns are shell-style globs in which `*` and `?`
do not cross `/`; they are matched against the relative path, the file
name, and each parent directory name.

The command exits with status 0 on success, 1 on an error and 2 on a bad
option.

## What the digest contains

- A summary: source, branch, time of creation, and counts of files,
  directories, binary files and skipped files, plus total content size.
- A directory tree. Binary files are marked `(Binary)` and files over the
  size limit are marked `(Skipped - Too Large)`.
- The content of every file, each under a `FILE: <path>` header between
  separator lines. README files come first, then all other files, each
  group in path order.

Files with a NUL byte in their first 1024 bytes are written as
`[Binary File]`. Jupyter notebooks (`.ipynb`) are reduced to the source of
their code, markdown and raw cells. Files that cannot be read, including
empty files, are listed with their error on the console and left out of
the digest's file contents.

## Library use

```python
from gingest.defaults import get_default_exclude_patterns
from gingest.digest import write_digest
from gingest.ingester import process_local_directory

files, stats = process_local_directory(
    "./my-project",
    2 * 1024 * 1024,
    None,
    get_default_exclude_patterns(),
)
write_digest("digest.md", files, stats)
```

`process_local_directory` returns a list of `gingest.types.FileInfo` and a
`gingest.types.Stats`. A `max_file_size` of zero or less means no limit.

`gingest.remote.process_remote_repo(git_url, target_branch, max_file_size,
include_patterns, exclude_patterns)` makes a shallow clone in a temporary
directory, scans it, removes it and returns the same pair. If the clone
fails it raises `GitCloneError`.

Other helpers: `gingest.notebook.parse_notebook` (raises `NotebookError`),
`gingest.gitutil.is_git_url` and `is_git_available`, and in
`gingest.utils` the functions `should_include_file`, `parse_patterns`,
`generate_summary_string` and `generate_tree_string`. The combined default
exclusion list can be changed at run time with
`gingest.defaults.add_custom_exclusion`, `remove_exclusion` and
`reset_to_defaults`.