"""The closed set of metadata file types that can be opened."""

from enum import Enum

from meta_open.errors import UnsupportedMetadataTypeError


class MetadataType(str, Enum):
    """Metadata type tokens as they appear at the end of source file names."""

    FLOW = "flow-meta.xml"
    FIELD = "field-meta.xml"
    VALIDATION_RULE = "validationRule-meta.xml"
    FLEXIPAGE = "flexipage-meta.xml"
    PROFILE = "profile-meta.xml"
    PERMISSION_SET = "permissionset-meta.xml"
    PERMISSION_SET_GROUP = "permissionsetgroup-meta.xml"
    APEX_CLASS = "cls"
    APEX_TRIGGER = "trigger"
    RECORD_TYPE = "recordType-meta.xml"
    LAYOUT = "layout-meta.xml"
    SOBJECT = "object-meta.xml"
    GLOBAL_VALUE_SET = "globalValueSet-meta.xml"
    QUICK_ACTION = "quickAction-meta.xml"
    APPROVAL_PROCESS = "approvalProcess-meta.xml"

    @classmethod
    def from_token(cls, token: str) -> "MetadataType":
        """Return the member for a token, failing on anything outside the set."""
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedMetadataTypeError(token) from None
