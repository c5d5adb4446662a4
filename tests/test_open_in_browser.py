"""Tests for launching the browser."""

import subprocess
from unittest.mock import patch

import pytest

from meta_open.errors import CommandExecutionError
from meta_open.open_in_browser import browser_command, complete_url, open_url

URL = "https://acme.my.salesforce.com/lightning/setup/ApexClasses/page?address=%2F01p1"


def test_complete_url() -> None:
    """Verify that exactly one slash joins base and relative URL."""
    assert complete_url("https://acme.com", "lightning/setup") == "https://acme.com/lightning/setup"
    assert complete_url("https://acme.com/", "/lightning/setup") == (
        "https://acme.com/lightning/setup"
    )


@pytest.mark.parametrize(
    ("platform", "expected"),
    [
        ("win32", ["cmd", "/c", "start", "", URL]),
        ("darwin", ["open", URL]),
        ("linux", ["xdg-open", URL]),
    ],
)
def test_browser_command_per_platform(platform: str, expected: list[str]) -> None:
    """Verify the platform-specific open command."""
    assert browser_command(URL, platform=platform) == expected


def test_browser_command_override() -> None:
    """Verify that a configured command replaces the placeholder or appends the URL."""
    assert browser_command(URL, override=["firefox", "--new-tab", "{url}"]) == [
        "firefox",
        "--new-tab",
        URL,
    ]
    assert browser_command(URL, override=["chromium"]) == ["chromium", URL]


def test_open_url_runs_command() -> None:
    """Verify that the command is run and checked."""
    with patch("subprocess.run") as run:
        open_url(URL, override=["browser"])
    run.assert_called_once_with(["browser", URL], check=True)


def test_open_url_failure() -> None:
    """Verify that a failing command surfaces its message."""
    error = subprocess.CalledProcessError(3, ["xdg-open", URL])
    with patch("subprocess.run", side_effect=error):
        with pytest.raises(CommandExecutionError, match="exit status 3"):
            open_url(URL)


def test_open_url_missing_command() -> None:
    """Verify that a missing executable is a command failure."""
    with patch("subprocess.run", side_effect=FileNotFoundError("xdg-open")):
        with pytest.raises(CommandExecutionError):
            open_url(URL)
