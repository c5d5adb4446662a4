"""Derivation of the metadata type token from a file name."""


def get_extension(base: str) -> str:
    """Return the metadata type token of a file name.

    Names with more than two dot segments use the last two joined by a dot
    (``Foo.flow-meta.xml`` -> ``flow-meta.xml``); otherwise the last segment
    alone (``Foo.cls`` -> ``cls``).
    """
    parts = base.split(".")
    if len(parts) > 2:
        return f"{parts[-2]}.{parts[-1]}"
    return parts[-1]
