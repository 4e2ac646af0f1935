"""Default exclusion patterns, with a mutable combined list."""

from __future__ import annotations


def _patterns(*groups: str) -> tuple[str, ...]:
    """Flatten whitespace-separated pattern groups, keeping order and repeats."""
    return tuple(pattern for group in groups for pattern in group.split())


DIRECTORY_EXCLUSIONS: tuple[str, ...] = _patterns(
    ".git .svn .hg .bzr",
    "node_modules .npm .yarn bower_components",
    ".venv venv env .env __pycache__ .pytest_cache .mypy_cache .tox",
    "site-packages dist build *.egg-info .coverage",
    "vendor",
    "target .gradle .m2 build out",
    "bin obj packages .nuget",
    ".bundle vendor/bundle .gem",
    "vendor composer.phar",
    "target",
    "build cmake-build-* .cmake",
    ".vscode .idea .vs .atom .sublime-*",
    ".DS_Store Thumbs.db Desktop.ini",
    "tmp temp .tmp .temp cache .cache",
    "logs log",
    "_site docs/_build .docusaurus .next .nuxt dist public",
    "coverage .nyc_output test-results test-reports",
    ".docker",
    ".terraform *.tfstate*",
    ".kube",
)

FILE_EXCLUSIONS: tuple[str, ...] = _patterns(
    "*.log *.log.*",
    "*.tmp *.temp *~ *.swp *.swo .#* #*#",
    ".DS_Store Thumbs.db Desktop.ini *.lnk",
    "*.o *.obj *.exe *.dll *.so *.dylib *.class *.pyc *.pyo *.pyd",
    "*.zip *.tar *.tar.gz *.tgz *.rar *.7z",
    "*.jpg *.jpeg *.png *.gif *.bmp *.ico *.svg *.webp",
    "*.mp4 *.avi *.mov *.wmv *.flv *.webm",
    "*.mp3 *.wav *.flac *.aac *.ogg",
    "*.pdf *.doc *.docx *.xls *.xlsx *.ppt *.pptx",
    "package-lock.json yarn.lock pnpm-lock.yaml bun.lockb Pipfile.lock",
    "poetry.lock pdm.lock Gemfile.lock composer.lock go.sum Cargo.lock",
    "mix.lock packages.lock.json project.assets.json *.lock flake.lock",
    "deno.lock shrinkwrap.yaml npm-shrinkwrap.json uv.lock",
    ".env .env.* *.env",
    "*.iml *.ipr *.iws .project .classpath .settings",
    "coverage.xml coverage.json lcov.info .coverage",
    "*.min.js *.min.css",
    "*.map *.js.map *.css.map",
)

_active: list[str] = [*DIRECTORY_EXCLUSIONS, *FILE_EXCLUSIONS]


def get_default_exclude_patterns() -> list[str]:
    """Return the current combined exclusion patterns."""
    return list(_active)


def get_default_directory_exclusions() -> list[str]:
    """Return the built-in directory exclusion patterns."""
    return list(DIRECTORY_EXCLUSIONS)


def get_default_file_exclusions() -> list[str]:
    """Return the built-in file exclusion patterns."""
    return list(FILE_EXCLUSIONS)


def add_custom_exclusion(pattern: str) -> None:
    """Append a pattern to the combined exclusion list."""
    _active.append(pattern)


def remove_exclusion(pattern: str) -> None:
    """Remove the first occurrence of a pattern, if present."""
    try:
        _active.remove(pattern)
    except ValueError:
        pass


def reset_to_defaults() -> None:
    """Restore the combined list to the built-in patterns."""
    _active[:] = [*DIRECTORY_EXCLUSIONS, *FILE_EXCLUSIONS]