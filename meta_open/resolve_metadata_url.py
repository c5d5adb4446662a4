"""Dispatch from a metadata type token to its resolver."""

import logging

from meta_open import resolvers
from meta_open.errors import InvalidInputError
from meta_open.metadata_type import MetadataType
from meta_open.org_connection import OrgConnection
from meta_open.parsed_path import ParsedPath
from meta_open.resolvers import Resolver

logger = logging.getLogger(__name__)

RESOLVERS: dict[MetadataType, Resolver] = {
    MetadataType.FLOW: resolvers.resolve_flow,
    MetadataType.FIELD: resolvers.resolve_field,
    MetadataType.VALIDATION_RULE: resolvers.resolve_validation_rule,
    MetadataType.FLEXIPAGE: resolvers.resolve_flexipage,
    MetadataType.PROFILE: resolvers.resolve_profile,
    MetadataType.PERMISSION_SET: resolvers.resolve_permission_set,
    MetadataType.PERMISSION_SET_GROUP: resolvers.resolve_permission_set_group,
    MetadataType.APEX_CLASS: resolvers.resolve_apex_class,
    MetadataType.APEX_TRIGGER: resolvers.resolve_apex_trigger,
    MetadataType.RECORD_TYPE: resolvers.resolve_record_type,
    MetadataType.LAYOUT: resolvers.resolve_layout,
    MetadataType.SOBJECT: resolvers.resolve_sobject,
    MetadataType.GLOBAL_VALUE_SET: resolvers.resolve_global_value_set,
    MetadataType.QUICK_ACTION: resolvers.resolve_quick_action,
    MetadataType.APPROVAL_PROCESS: resolvers.resolve_approval_process,
}

_unmapped = set(MetadataType) - RESOLVERS.keys()
if _unmapped:
    msg = f"No resolver registered for: {sorted(t.value for t in _unmapped)}"
    raise RuntimeError(msg)


def resolver_for(extension: str) -> Resolver:
    """Return the resolver for a type token; unknown tokens are rejected."""
    return RESOLVERS[MetadataType.from_token(extension)]


def resolve_metadata_url(
    conn: OrgConnection | None, extension: str, parsed: ParsedPath | None
) -> str:
    """Resolve a classified metadata path into a URL relative to the org."""
    if not conn or not extension or not parsed:
        msg = "Invalid parameters"
        raise InvalidInputError(msg)
    resolver = resolver_for(extension)
    logger.debug("Resolving %s with %s", parsed.base, resolver.__name__)
    return resolver(parsed, conn)
