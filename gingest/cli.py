"""Command-line entry point that turns a codebase into a Markdown digest."""

from __future__ import annotations

import argparse
import os
import platform
import sys
from collections.abc import Sequence

from gingest.defaults import get_default_exclude_patterns
from gingest.digest import write_digest
from gingest.gitutil import is_git_available, is_git_url
from gingest.ingester import process_local_directory
from gingest.remote import GitCloneError, process_remote_repo
from gingest.types import FileInfo, Stats
from gingest.utils import generate_summary_string, parse_patterns

VERSION = "dev"
GIT_COMMIT = "unknown"
BUILD_DATE = "unknown"

DEFAULT_OUTPUT = "digest.md"
DEFAULT_MAX_FILE_SIZE = 2 * 1024 * 1024
_MB = 1024 * 1024

USAGE = """gingest - Convert codebases into LLM-friendly text digests

USAGE:
    gingest --source=<path|url> [OPTIONS]

EXAMPLES:
    gingest --source=./my-project
    gingest --source=https://example.com/user/repo.git --output=repo.md
    gingest --source=./project --maxsize=1048576 --output=digest.md
    gingest --source=https://example.com/user/repo.git --branch=develop
    gingest --source=./project --exclude="*.log,node_modules,*.tmp"
    gingest --source=./project --include="*.go,*.md" --exclude=".git"

OPTIONS:
    --source=<path|url>    Source path (local directory or Git URL) [REQUIRED]
    --output=<file>        Output file path (default: digest.md)
    --branch=<name>        Target branch for Git repositories
    --maxsize=<bytes>      Maximum file size in bytes (default: 2MB)
    --exclude=<patterns>   Comma-separated exclude patterns (default: comprehensive list)
    --include=<patterns>   Comma-separated include patterns (overrides excludes)
    --version              Show version information
    --help, -h             Show this help message

DESCRIPTION:
    Reads a local directory, or clones a remote Git repository, and writes a
    single Markdown file holding a summary, a directory tree and the text of
    every file, each one introduced by a header line naming its path.

    Any Git host reachable by the git command can be used. Files larger than
    the size limit are listed, but their content is replaced by a note.

    Default exclusions include: dependency directories (.venv, venv, node_modules,
    vendor, target, build, etc.), version control (.git, .svn), IDE files (.vscode,
    .idea), OS files (.DS_Store, Thumbs.db), temporary files (*.tmp, *.log),
    binary files (*.exe, *.dll, *.so), media files (*.jpg, *.mp4, *.mp3),
    and many more. Use --exclude="" to disable defaults.
"""


class _UsageError(Exception):
    """Raised by the argument parser instead of exiting."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _build_parser() -> _Parser:
    parser = _Parser(prog="gingest", add_help=False, allow_abbrev=False)
    parser.add_argument("--source", "-source", default="")
    parser.add_argument("--output", "-output", default=DEFAULT_OUTPUT)
    parser.add_argument("--branch", "-branch", default="")
    parser.add_argument("--maxsize", "-maxsize", type=int, default=DEFAULT_MAX_FILE_SIZE)
    parser.add_argument("--exclude", "-exclude", default="")
    parser.add_argument("--include", "-include", default="")
    parser.add_argument("--version", "-version", action="store_true")
    parser.add_argument("--help", "-help", "-h", action="store_true", dest="help")
    return parser


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _version_text() -> str:
    """Return the version report shown by --version."""
    lines = (
        f"gingest version {VERSION}",
        f"Git commit: {GIT_COMMIT}",
        f"Build date: {BUILD_DATE}",
        f"Python version: {platform.python_version()}",
    )
    return "\n".join(lines)


def _print_listing(files: Sequence[FileInfo]) -> None:
    print(f"Found {len(files)} files:")
    for info in files:
        if info.error is not None:
            print(f"  {info.relative_path} (ERROR: {info.error})")
        else:
            size = len(info.content.encode("utf-8", errors="surrogatepass"))
            print(f"  {info.relative_path} ({size} bytes)")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    try:
        args = _build_parser().parse_args(argv)
    except _UsageError as exc:
        print(exc, file=sys.stderr)
        sys.stderr.write(USAGE)
        return 2

    if args.help:
        sys.stderr.write(USAGE)
        return 0

    if args.version:
        print(_version_text())
        return 0

    if not args.source:
        sys.stderr.write("Error: --source is required\n\n")
        sys.stderr.write(USAGE)
        return 1

    print(f"Source Path: {args.source}")
    print(f"Output File: {args.output}")
    print(f"Max File Size: {args.maxsize} bytes ({args.maxsize / _MB:.1f} MB)")
    if args.branch:
        print(f"Target Branch: {args.branch}")
    if args.exclude:
        print(f"Exclude Patterns: {args.exclude}")
    if args.include:
        print(f"Include Patterns: {args.include}")

    excludes = parse_patterns(args.exclude) if args.exclude else get_default_exclude_patterns()
    includes = parse_patterns(args.include)

    files: list[FileInfo]
    stats: Stats
    if is_git_url(args.source):
        if not is_git_available():
            return _fail(
                "Error: git command not found. "
                "Please install Git to process remote repositories."
            )
        print(f"Processing remote Git repository: {args.source}")
        if args.branch:
            print(f"Cloning branch: {args.branch}")
        else:
            print("Cloning default branch...")
        try:
            files, stats = process_remote_repo(
                args.source, args.branch, args.maxsize, includes, excludes
            )
        except (GitCloneError, OSError) as exc:
            return _fail(f"Error processing remote repository: {exc}")
        print("Clone successful.")
    elif os.path.isdir(args.source):
        print(f"Processing local directory: {args.source}")
        print("Scanning files...")
        try:
            files, stats = process_local_directory(
                args.source, args.maxsize, includes, excludes
            )
        except OSError as exc:
            return _fail(f"Error processing directory: {exc}")
    else:
        return _fail("Source must be a valid local directory or Git URL")

    _print_listing(files)

    print(f"Writing digest to {args.output}...")
    try:
        write_digest(args.output, files, stats)
    except OSError as exc:
        return _fail(f"Error writing digest: {exc}")
    print(f"Digest created: {args.output}")

    print("\n" + generate_summary_string(stats))
    return 0