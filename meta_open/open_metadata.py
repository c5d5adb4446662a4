"""Orchestration: classify a path, resolve it and open it in the browser."""

import logging
from collections.abc import Sequence

from meta_open.open_in_browser import complete_url, open_url
from meta_open.org_connection import OrgConnection
from meta_open.parse_metadata_path import parse_metadata_path
from meta_open.resolve_metadata_url import resolve_metadata_url

logger = logging.getLogger(__name__)


def open_metadata(
    conn: OrgConnection,
    path_string: str,
    *,
    launch: bool = True,
    browser_override: Sequence[str] | None = None,
) -> str:
    """Resolve ``path_string`` to its setup page and open it.

    Returns the complete URL. With ``launch`` false nothing is started.
    """
    parsed = parse_metadata_path(path_string)
    relative_url = resolve_metadata_url(conn, parsed.extension, parsed)
    url = complete_url(conn.instance_url, relative_url)
    logger.info("Resolved %s to %s", parsed.base, url)
    if launch:
        open_url(url, override=browser_override)
    return url
