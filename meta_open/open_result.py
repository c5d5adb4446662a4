"""Structured outcome of a single open invocation."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class OpenResult:
    """Whether the metadata was opened, and the URL or error message."""

    is_success: bool
    url: str | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return the result as a JSON-ready dict without empty fields."""
        return {k: v for k, v in asdict(self).items() if v is not None}
