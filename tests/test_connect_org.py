"""Tests for building a connection from stored CLI authentication."""

import json
import subprocess
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from meta_open.connect_org import connect_org, display_org, resolve_target_org
from meta_open.errors import InvalidInputError, OrgConnectionError
from meta_open.load_config import DEFAULT_CONFIG


def completed(stdout: str, returncode: int = 0) -> subprocess.CompletedProcess:
    """Create a finished sf process result."""
    return subprocess.CompletedProcess(
        args=["sf"], returncode=returncode, stdout=stdout, stderr=""
    )


def config_with(target_org: str | None = None) -> dict[str, Any]:
    """Return the default config with a target org."""
    return {**DEFAULT_CONFIG, "org": {**DEFAULT_CONFIG["org"], "target_org": target_org}}


def test_resolve_target_org_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify flag, then config, then environment."""
    monkeypatch.setenv("SF_TARGET_ORG", "env-org")
    assert resolve_target_org("flag-org", config_with("cfg-org")) == "flag-org"
    assert resolve_target_org(None, config_with("cfg-org")) == "cfg-org"
    assert resolve_target_org(None, config_with()) == "env-org"


def test_resolve_target_org_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that no target org at all is an input error."""
    monkeypatch.delenv("SF_TARGET_ORG", raising=False)
    with pytest.raises(InvalidInputError, match="No target org"):
        resolve_target_org(None, config_with())


def test_display_org_success() -> None:
    """Verify that the token and instance URL are read from the JSON result."""
    payload = {
        "status": 0,
        "result": {"accessToken": "00D!tok", "instanceUrl": "https://acme.my.salesforce.com"},
    }
    with patch("subprocess.run", return_value=completed(json.dumps(payload))) as run:
        info = display_org("dev")
    assert info["accessToken"] == "00D!tok"
    assert run.call_args.args[0] == [
        "sf", "org", "display", "--json", "--target-org", "dev"
    ]


def test_display_org_failure() -> None:
    """Verify that a failed sf call reports the CLI message."""
    payload = {"status": 1, "message": "No authorization information found for dev."}
    with patch("subprocess.run", return_value=completed(json.dumps(payload), 1)):
        with pytest.raises(OrgConnectionError, match="No authorization information"):
            display_org("dev")


def test_display_org_missing_executable() -> None:
    """Verify that a missing sf executable is an org connection error."""
    with patch("subprocess.run", side_effect=FileNotFoundError("sf")):
        with pytest.raises(OrgConnectionError, match="Could not run sf"):
            display_org("dev")


def test_display_org_bad_output() -> None:
    """Verify that unparseable output is reported."""
    with patch("subprocess.run", return_value=completed("not json")):
        with pytest.raises(OrgConnectionError, match="Unreadable output"):
            display_org("dev")


def test_connect_org_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that an exported session skips the sf CLI."""
    monkeypatch.setenv("SF_ACCESS_TOKEN", "tok")
    monkeypatch.setenv("SF_INSTANCE_URL", "https://acme.my.salesforce.com")
    with (
        patch("meta_open.connect_org.Salesforce") as sf_cls,
        patch("subprocess.run") as run,
    ):
        conn = connect_org(None, config_with())
    run.assert_not_called()
    sf_cls.assert_called_once_with(
        instance_url="https://acme.my.salesforce.com", session_id="tok", version="60.0"
    )
    assert conn.sf is sf_cls.return_value
    assert conn.instance_url == "https://acme.my.salesforce.com"


def test_connect_org_from_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that the stored CLI authentication is used."""
    monkeypatch.delenv("SF_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("SF_INSTANCE_URL", raising=False)
    payload = {"status": 0, "result": {"accessToken": "t", "instanceUrl": "https://x"}}
    with (
        patch("meta_open.connect_org.Salesforce") as sf_cls,
        patch("subprocess.run", return_value=completed(json.dumps(payload))),
    ):
        connect_org("dev", config_with())
    sf_cls.assert_called_once_with(instance_url="https://x", session_id="t", version="60.0")


def test_connect_org_uses_configured_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that the sf executable name comes from config."""
    monkeypatch.delenv("SF_ACCESS_TOKEN", raising=False)
    config = config_with("dev")
    config["org"]["sf_executable"] = "/opt/sf/bin/sf"
    payload = {"status": 0, "result": {"accessToken": "t", "instanceUrl": "https://x"}}
    with (
        patch("meta_open.connect_org.Salesforce", MagicMock()),
        patch("subprocess.run", return_value=completed(json.dumps(payload))) as run,
    ):
        connect_org(None, config)
    assert run.call_args.args[0][0] == "/opt/sf/bin/sf"
