"""Data model for a classified metadata file path."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedPath:
    """A metadata file path split into the parts the resolvers need."""

    dir: str  # normalized to forward slashes
    base: str  # file name with extension, e.g. MyField__c.field-meta.xml
    extension: str  # metadata type token, e.g. field-meta.xml
    api_name: str  # base without ".<extension>", e.g. MyField__c

    @property
    def segments(self) -> list[str]:
        """Directory segments from the root to the enclosing folder."""
        return self.dir.split("/") if self.dir else []

    def parent_folder(self, depth: int = 2) -> str:
        """Return the directory segment ``depth`` levels up from the file.

        ``objects/Account/fields/X.field-meta.xml`` with depth 2 -> ``Account``.
        """
        segments = self.segments
        if len(segments) < depth:
            return ""
        return segments[-depth]
