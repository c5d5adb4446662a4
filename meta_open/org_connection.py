"""Thin wrapper over an authenticated simple_salesforce session."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import requests
from simple_salesforce import Salesforce
from simple_salesforce.exceptions import SalesforceError

from meta_open.errors import TransportError
from meta_open.soql import build_select

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class OrgConnection:
    """Read-only access to an org's data and tooling (metadata catalog) APIs."""

    def __init__(self, sf: Salesforce, instance_url: str | None = None) -> None:
        """Wrap an already authenticated Salesforce session.

        ``instance_url`` is kept verbatim; without it the base is rebuilt from
        the session host.
        """
        self.sf = sf
        self._instance_url = instance_url

    @property
    def instance_url(self) -> str:
        """Base URL of the org, without a trailing slash."""
        if self._instance_url:
            return self._instance_url.rstrip("/")
        return f"https://{self.sf.sf_instance}".rstrip("/")

    def query(self, soql: str) -> list[Record]:
        """Run a SOQL query against the data API and return its records."""
        logger.debug("query: %s", soql)
        try:
            result = self.sf.query(soql)
        except (SalesforceError, requests.RequestException) as e:
            raise TransportError(str(e)) from e
        return list(result.get("records", []))

    def find(
        self,
        sobject: str,
        filters: Mapping[str, str],
        fields: Iterable[str] = ("Id",),
    ) -> list[Record]:
        """Query the tooling API for ``sobject`` records matching every filter."""
        soql = build_select(sobject, filters, fields)
        logger.debug("tooling query: %s", soql)
        try:
            result = self.sf.toolingexecute("query/", params={"q": soql})
        except (SalesforceError, requests.RequestException) as e:
            raise TransportError(str(e)) from e
        if not isinstance(result, dict):
            msg = f"Unexpected tooling API response for {sobject}: {result!r}"
            raise TransportError(msg)
        return list(result.get("records", []))
