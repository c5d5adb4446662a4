"""Building an OrgConnection from the Salesforce CLI's stored authentication."""

import json
import logging
import os
import subprocess
from typing import Any

from simple_salesforce import Salesforce

from meta_open.errors import InvalidInputError, OrgConnectionError
from meta_open.org_connection import OrgConnection

logger = logging.getLogger(__name__)

ACCESS_TOKEN_ENV = "SF_ACCESS_TOKEN"
INSTANCE_URL_ENV = "SF_INSTANCE_URL"
TARGET_ORG_ENV = "SF_TARGET_ORG"


def resolve_target_org(flag_value: str | None, config: dict[str, Any]) -> str:
    """Pick the target org from the flag, then config, then the environment."""
    target = flag_value or config["org"].get("target_org") or os.environ.get(
        TARGET_ORG_ENV
    )
    if not target:
        msg = (
            "No target org given. Pass --target-org, set org.target_org in the "
            f"config file or export {TARGET_ORG_ENV}."
        )
        raise InvalidInputError(msg)
    return target


def display_org(target_org: str, sf_executable: str = "sf") -> dict[str, Any]:
    """Return the ``result`` block of ``sf org display --json``."""
    cmd = [sf_executable, "org", "display", "--json", "--target-org", target_org]
    logger.info("Running: %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        msg = f"Could not run {sf_executable}: {e}"
        raise OrgConnectionError(msg) from e

    try:
        payload = json.loads(proc.stdout or "{}")
    except json.JSONDecodeError as e:
        msg = f"Unreadable output from {sf_executable} org display: {e}"
        raise OrgConnectionError(msg) from e

    if proc.returncode != 0 or payload.get("status", 0) != 0:
        detail = payload.get("message") or proc.stderr.strip() or "unknown error"
        msg = f"Could not authenticate to {target_org}: {detail}"
        raise OrgConnectionError(msg)

    result = payload.get("result") or {}
    if not result.get("accessToken") or not result.get("instanceUrl"):
        msg = f"No access token or instance URL for {target_org}"
        raise OrgConnectionError(msg)
    return result


def connect_org(target_org: str | None, config: dict[str, Any]) -> OrgConnection:
    """Build an authenticated connection for the target org."""
    api_version = str(config["org"]["api_version"])
    token = os.environ.get(ACCESS_TOKEN_ENV)
    instance_url = os.environ.get(INSTANCE_URL_ENV)

    if token and instance_url:
        logger.info("Using session from %s/%s", ACCESS_TOKEN_ENV, INSTANCE_URL_ENV)
    else:
        alias = resolve_target_org(target_org, config)
        info = display_org(alias, config["org"]["sf_executable"])
        token = info["accessToken"]
        instance_url = info["instanceUrl"]

    sf = Salesforce(instance_url=instance_url, session_id=token, version=api_version)
    return OrgConnection(sf, instance_url=instance_url)
