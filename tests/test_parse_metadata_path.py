"""Tests for metadata path classification."""

import pytest

from meta_open.errors import InvalidInputError
from meta_open.get_extension import get_extension
from meta_open.parse_metadata_path import parse_metadata_path


def test_get_extension() -> None:
    """Verify compound and simple type tokens."""
    assert get_extension("MyFlow.flow-meta.xml") == "flow-meta.xml"
    assert get_extension("Account.field-meta.xml") == "field-meta.xml"
    assert get_extension("MyClass.cls") == "cls"
    assert get_extension("Account.MyAction.quickAction-meta.xml") == (
        "quickAction-meta.xml"
    )


def test_parse_compound_extension() -> None:
    """Verify that the API name is the base without the token."""
    parsed = parse_metadata_path("Account.field-meta.xml")
    assert parsed.extension == "field-meta.xml"
    assert parsed.api_name == "Account"
    assert parsed.dir == ""


def test_parse_simple_extension() -> None:
    """Verify that single-segment extensions are stripped."""
    parsed = parse_metadata_path("force-app/main/default/classes/MyClass.cls")
    assert parsed.extension == "cls"
    assert parsed.api_name == "MyClass"
    assert parsed.base == "MyClass.cls"
    assert parsed.dir == "force-app/main/default/classes"


def test_parse_dotted_api_name() -> None:
    """Verify that dots inside the API name are kept."""
    parsed = parse_metadata_path("quickActions/Account.Call.quickAction-meta.xml")
    assert parsed.extension == "quickAction-meta.xml"
    assert parsed.api_name == "Account.Call"


def test_parse_windows_separators() -> None:
    """Verify that backslashes are treated as directory separators."""
    parsed = parse_metadata_path(
        "force-app\\main\\default\\objects\\Account\\fields\\Rating__c.field-meta.xml"
    )
    assert parsed.api_name == "Rating__c"
    assert parsed.parent_folder(2) == "Account"


def test_parent_folder() -> None:
    """Verify lookup of enclosing folders."""
    parsed = parse_metadata_path("objects/Invoice__c/recordTypes/B2B.recordType-meta.xml")
    assert parsed.segments == ["objects", "Invoice__c", "recordTypes"]
    assert parsed.parent_folder(1) == "recordTypes"
    assert parsed.parent_folder(2) == "Invoice__c"
    assert parsed.parent_folder(5) == ""


@pytest.mark.parametrize(
    "path", ["", "   ", "classes/", "classes/README", "classes/.cls"]
)
def test_parse_invalid(path: str) -> None:
    """Verify that empty or malformed paths are rejected."""
    with pytest.raises(InvalidInputError):
        parse_metadata_path(path)


def test_parsed_path_is_immutable() -> None:
    """Verify that a parsed path cannot be modified."""
    parsed = parse_metadata_path("MyClass.cls")
    with pytest.raises(AttributeError):
        parsed.api_name = "Other"  # type: ignore[misc]
