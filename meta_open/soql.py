"""Helpers for building SOQL catalog queries."""

from collections.abc import Iterable, Mapping


def escape_soql(value: str) -> str:
    """Escape a literal for use inside single quotes in a SOQL filter."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_select(
    sobject: str, filters: Mapping[str, str], fields: Iterable[str] = ("Id",)
) -> str:
    """Build ``SELECT <fields> FROM <sobject> WHERE k = 'v' AND ...``."""
    soql = f"SELECT {', '.join(fields)} FROM {sobject}"
    if filters:
        clauses = [f"{key} = '{escape_soql(value)}'" for key, value in filters.items()]
        soql += " WHERE " + " AND ".join(clauses)
    return soql
