from unittest import mock

import pytest

from gingest.gitutil import is_git_available, is_git_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://github.com/user/repo.git", True),
        ("http://gitlab.com/user/repo.git", True),
        ("https://bitbucket.org/user/repo", True),
        ("[email]:user/repo.git", True),
        ("https://example.com/repo.git", True),
        ("https://github.com/user/repo", True),
        ("/local/path", False),
        ("./relative/path", False),
        ("https://example.com/page", False),
        ("ftp://example.com/file", False),
        ("", False),
    ],
)
def test_is_git_url(url, expected):
    assert is_git_url(url) is expected


def test_ssh_prefix_without_suffix():
    assert is_git_url("git@example.com:user/repo") is True


def test_git_available_when_found():
    with mock.patch("shutil.which", return_value="/usr/bin/git"):
        assert is_git_available() is True


def test_git_unavailable_when_missing():
    with mock.patch("shutil.which", return_value=None):
        assert is_git_available() is False