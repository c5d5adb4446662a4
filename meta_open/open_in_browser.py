"""Launching the system browser on a resolved URL."""

import logging
import subprocess
import sys
from collections.abc import Sequence

from meta_open.errors import CommandExecutionError

logger = logging.getLogger(__name__)


def complete_url(instance_url: str, relative_url: str) -> str:
    """Join the org base URL and a relative setup path with a single slash."""
    return f"{instance_url.rstrip('/')}/{relative_url.lstrip('/')}"


def browser_command(
    url: str,
    platform: str = sys.platform,
    override: Sequence[str] | None = None,
) -> list[str]:
    """Return the command that opens ``url`` in the default browser.

    ``override`` is a configured argument list; ``{url}`` in any argument is
    replaced by the URL, otherwise the URL is appended.
    """
    if override:
        args = [arg.replace("{url}", url) for arg in override]
        if not any("{url}" in arg for arg in override):
            args.append(url)
        return args
    if platform == "win32":
        # The empty string is the window title expected by start
        return ["cmd", "/c", "start", "", url]
    if platform == "darwin":
        return ["open", url]
    return ["xdg-open", url]


def open_url(url: str, override: Sequence[str] | None = None) -> None:
    """Open ``url`` with the platform's open command."""
    cmd = browser_command(url, override=override)
    logger.info("Running: %s", " ".join(cmd))
    try:
        subprocess.run(cmd, check=True)
    except (subprocess.CalledProcessError, OSError) as e:
        raise CommandExecutionError(str(e)) from e
