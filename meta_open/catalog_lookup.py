"""Shared single-record lookups against the org's metadata catalog."""

from collections.abc import Iterable, Mapping

from meta_open.errors import NotFoundError
from meta_open.naming_conventions import get_object_field_developer_name
from meta_open.org_connection import OrgConnection, Record


def first_record(records: list[Record], kind: str, name: str) -> Record:
    """Return the first record, or fail naming what was searched for.

    More than one match is not an error; the first one wins.
    """
    if not records:
        raise NotFoundError(kind, name)
    return records[0]


def find_one(
    conn: OrgConnection,
    sobject: str,
    filters: Mapping[str, str],
    kind: str,
    name: str,
    fields: Iterable[str] = ("Id",),
) -> Record:
    """Run a tooling catalog query and return its first record."""
    return first_record(conn.find(sobject, filters, fields), kind, name)


def get_object_id(conn: OrgConnection, object_name: str) -> str:
    """Look up the CustomObject id for an object API name.

    Namespace prefix and suffix are stripped first: ``ns__Invoice__c`` is
    searched as ``Invoice``.
    """
    record = find_one(
        conn,
        "CustomObject",
        {"DeveloperName": get_object_field_developer_name(object_name)},
        "Object",
        object_name,
    )
    return record["Id"]
