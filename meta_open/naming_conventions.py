"""Predicates over Salesforce API-name suffix conventions."""

CUSTOM_SUFFIX = "__c"
CUSTOM_METADATA_SUFFIX = "__mdt"
PLATFORM_EVENT_SUFFIX = "__e"
NAMESPACE_SEPARATOR = "__"


def is_standard_field(api_name: str) -> bool:
    """Check if the field name lacks the custom-field suffix."""
    return not api_name.endswith(CUSTOM_SUFFIX)


def is_custom_metadata(api_name: str) -> bool:
    """Check if the name is a custom metadata type."""
    return api_name.endswith(CUSTOM_METADATA_SUFFIX)


def is_platform_event(api_name: str) -> bool:
    """Check if the name is a platform event."""
    return api_name.endswith(PLATFORM_EVENT_SUFFIX)


def is_standard_object(api_name: str) -> bool:
    """Check if the object carries none of the custom suffixes."""
    return not (
        api_name.endswith(CUSTOM_SUFFIX)
        or is_custom_metadata(api_name)
        or is_platform_event(api_name)
    )


def get_object_field_developer_name(file_name: str) -> str:
    """Return the developer name of a possibly namespaced API name.

    ``NS__Field__c`` -> ``Field`` (managed package prefix dropped),
    ``Field__c`` -> ``Field``.
    """
    parts = file_name.split(NAMESPACE_SEPARATOR)
    if len(parts) > 2:
        return parts[1]
    return parts[0]
