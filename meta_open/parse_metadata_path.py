"""Classification of a raw metadata path into a ParsedPath."""

from meta_open.errors import InvalidInputError
from meta_open.get_extension import get_extension
from meta_open.parsed_path import ParsedPath


def parse_metadata_path(path_string: str) -> ParsedPath:
    """Split a metadata file path into directory, base name, token and API name."""
    if not path_string or not path_string.strip():
        msg = "Metadata path is empty"
        raise InvalidInputError(msg)

    normalized = path_string.strip().replace("\\", "/")
    directory, _, base = normalized.rpartition("/")
    if not base:
        msg = f"Metadata path has no file name: {path_string}"
        raise InvalidInputError(msg)
    if "." not in base:
        msg = f"Metadata path has no extension: {path_string}"
        raise InvalidInputError(msg)

    extension = get_extension(base)
    api_name = base[: len(base) - (len(extension) + 1)]
    if not api_name:
        msg = f"Metadata path has no API name: {path_string}"
        raise InvalidInputError(msg)

    return ParsedPath(
        dir=directory,
        base=base,
        extension=extension,
        api_name=api_name,
    )
