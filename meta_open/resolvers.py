"""Per-type resolution of a metadata file into a relative setup URL.

Every resolver takes the classified path and an org connection and returns the
URL fragment that follows the org's base URL. Resolvers only read from the
org; the two-lookup ones run both queries concurrently and fail as soon as
either fails.
"""

from collections.abc import Callable
from functools import partial
from urllib.parse import unquote

from meta_open.catalog_lookup import find_one, first_record, get_object_id
from meta_open.errors import InvalidInputError
from meta_open.fetch_concurrently import fetch_concurrently
from meta_open.naming_conventions import (
    get_object_field_developer_name,
    is_custom_metadata,
    is_platform_event,
    is_standard_field,
)
from meta_open.org_connection import OrgConnection
from meta_open.parsed_path import ParsedPath
from meta_open.soql import escape_soql

Resolver = Callable[[ParsedPath, OrgConnection], str]

OBJECT_MANAGER = "lightning/setup/ObjectManager"


def _setup_page(section: str, record_id: str) -> str:
    return f"lightning/setup/{section}/page?address=%2F{record_id}"


def _split_api_name(parsed: ParsedPath, sep: str) -> tuple[str, str]:
    """Split ``Object<sep>Member`` API names, failing when either half is missing."""
    head, found, tail = parsed.api_name.partition(sep)
    if not found or not head or not tail:
        msg = f"Expected '<object>{sep}<name>' in {parsed.base}"
        raise InvalidInputError(msg)
    return head, tail


def _object_folder(parsed: ParsedPath) -> str:
    """Object API name from ``objects/<Object>/<kind>/<file>`` paths."""
    folder = parsed.parent_folder(2)
    if not folder:
        msg = f"Cannot find the object folder for {parsed.base}"
        raise InvalidInputError(msg)
    return folder


def _lookup_id(
    conn: OrgConnection, sobject: str, key: str, name: str, kind: str | None = None
) -> str:
    """Id of the first ``sobject`` catalog record whose ``key`` equals ``name``."""
    return find_one(conn, sobject, {key: name}, kind or sobject, name)["Id"]


def resolve_flow(parsed: ParsedPath, conn: OrgConnection) -> str:
    flow_id = _lookup_id(
        conn, "FlowDefinition", "DeveloperName", parsed.api_name, kind="Flow"
    )
    return _setup_page("Flows", flow_id)


def resolve_field(parsed: ParsedPath, conn: OrgConnection) -> str:
    """Resolve a field, skipping the catalog entirely for standard fields."""
    object_name = _object_folder(parsed)

    if is_standard_field(parsed.api_name):
        # Lookup fields are addressed without their Id suffix (AccountId -> Account)
        field_name = parsed.api_name
        if field_name.endswith("Id"):
            field_name = field_name[:-2]
        return (
            f"{OBJECT_MANAGER}/{object_name}/FieldsAndRelationships/{field_name}/view"
        )

    developer_name = get_object_field_developer_name(parsed.api_name)
    object_id = get_object_id(conn, object_name)
    field = find_one(
        conn,
        "CustomField",
        {"DeveloperName": developer_name, "TableEnumOrId": object_id},
        "Field",
        developer_name,
    )

    if is_custom_metadata(object_name):
        return (
            f"lightning/setup/CustomMetadata/page?address=%2F{field['Id']}"
            "%3Fsetupid%3DCustomMetadata"
        )
    if is_platform_event(object_name):
        return (
            f"lightning/setup/EventObjects/page?address=%2F{field['Id']}"
            "%3Fsetupid%3DEventObjects"
        )
    return f"{OBJECT_MANAGER}/{object_id}/FieldsAndRelationships/{field['Id']}/view"


def resolve_validation_rule(parsed: ParsedPath, conn: OrgConnection) -> str:
    """The owning object's id comes from the rule record itself."""
    record = find_one(
        conn,
        "ValidationRule",
        {"ValidationName": parsed.api_name},
        "ValidationRule",
        parsed.api_name,
        fields=("Id", "EntityDefinitionId"),
    )
    return (
        f"{OBJECT_MANAGER}/{record['EntityDefinitionId']}"
        f"/ValidationRules/{record['Id']}/view"
    )


def resolve_flexipage(parsed: ParsedPath, conn: OrgConnection) -> str:
    page_id = _lookup_id(conn, "FlexiPage", "DeveloperName", parsed.api_name)
    return f"visualEditor/appBuilder.app?id={page_id}"


def resolve_profile(parsed: ParsedPath, conn: OrgConnection) -> str:
    return _setup_page(
        "EnhancedProfiles", _lookup_id(conn, "Profile", "Name", parsed.api_name)
    )


def resolve_permission_set(parsed: ParsedPath, conn: OrgConnection) -> str:
    return _setup_page(
        "PermSets", _lookup_id(conn, "PermissionSet", "Name", parsed.api_name)
    )


def resolve_permission_set_group(parsed: ParsedPath, conn: OrgConnection) -> str:
    group_id = _lookup_id(conn, "PermissionSetGroup", "DeveloperName", parsed.api_name)
    return _setup_page("PermSetGroups", group_id)


def resolve_apex_class(parsed: ParsedPath, conn: OrgConnection) -> str:
    return _setup_page(
        "ApexClasses", _lookup_id(conn, "ApexClass", "Name", parsed.api_name)
    )


def resolve_apex_trigger(parsed: ParsedPath, conn: OrgConnection) -> str:
    return _setup_page(
        "ApexTriggers", _lookup_id(conn, "ApexTrigger", "Name", parsed.api_name)
    )


def resolve_record_type(parsed: ParsedPath, conn: OrgConnection) -> str:
    object_name = _object_folder(parsed)
    soql = (
        "SELECT Id, DeveloperName FROM RecordType "
        f"WHERE DeveloperName = '{escape_soql(parsed.api_name)}'"
    )
    object_id, records = fetch_concurrently(
        partial(get_object_id, conn, object_name),
        partial(conn.query, soql),
    )
    record = first_record(records, "RecordType", parsed.api_name)
    return f"{OBJECT_MANAGER}/{object_id}/RecordTypes/{record['Id']}/view"


def resolve_layout(parsed: ParsedPath, conn: OrgConnection) -> str:
    """Layout files are named ``<Object>-<URL-encoded layout name>``."""
    object_name, encoded_layout = _split_api_name(parsed, "-")
    layout_name = unquote(encoded_layout)
    object_id, records = fetch_concurrently(
        partial(get_object_id, conn, object_name),
        partial(conn.find, "Layout", {"Name": layout_name}),
    )
    record = first_record(records, "Layout", encoded_layout)
    return f"{OBJECT_MANAGER}/{object_id}/PageLayouts/{record['Id']}/view"


def resolve_sobject(parsed: ParsedPath, conn: OrgConnection) -> str:
    object_id = get_object_id(conn, parsed.api_name)
    if is_custom_metadata(parsed.api_name):
        return (
            f"lightning/setup/CustomMetadata/page?address=%2F{object_id}"
            "%3Fsetupid%3DCustomMetadata"
        )
    if is_platform_event(parsed.api_name):
        return (
            f"lightning/setup/EventObjects/page?address=%2F{object_id}"
            "%3Fsetupid%3DEventObjects"
        )
    return f"{OBJECT_MANAGER}/{object_id}/Details/view"


def resolve_global_value_set(parsed: ParsedPath, conn: OrgConnection) -> str:
    value_set_id = _lookup_id(conn, "GlobalValueSet", "DeveloperName", parsed.api_name)
    return _setup_page("Picklists", value_set_id)


def resolve_quick_action(parsed: ParsedPath, conn: OrgConnection) -> str:
    """Quick action files are named ``<Object>.<ActionName>``."""
    object_name, action_name = _split_api_name(parsed, ".")
    object_id, records = fetch_concurrently(
        partial(get_object_id, conn, object_name),
        partial(conn.find, "QuickActionDefinition", {"DeveloperName": action_name}),
    )
    record = first_record(records, "QuickAction", action_name)
    return f"{OBJECT_MANAGER}/{object_id}/ButtonsLinksActions/{record['Id']}/view"


def resolve_approval_process(parsed: ParsedPath, conn: OrgConnection) -> str:
    """Approval process files are named ``<Object>.<DeveloperName>``."""
    _, developer_name = _split_api_name(parsed, ".")
    soql = (
        "SELECT Id FROM ProcessDefinition "
        f"WHERE DeveloperName = '{escape_soql(developer_name)}' AND Type = 'Approval'"
    )
    record = first_record(conn.query(soql), "Approval process", parsed.api_name)
    return _setup_page("ApprovalProcesses", record["Id"])
