"""Helpers for recognising Git sources and locating the git command."""

from __future__ import annotations

import shutil

_GIT_HOSTS = ("github.com", "gitlab.com", "bitbucket.org")


def is_git_url(source: str) -> bool:
    """Return True if the source looks like a Git repository URL."""
    return (
        source.startswith("git@")
        or source.endswith(".git")
        or any(host in source for host in _GIT_HOSTS)
    )


def is_git_available() -> bool:
    """Return True if a git executable is on PATH."""
    return shutil.which("git") is not None