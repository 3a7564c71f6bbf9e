"""Parameter checks shared by the service wrappers."""

from typing import Any, Iterable

from bfl_flux.utils.errors import InvalidArgumentError


def require_fields(params: dict[str, Any], fields: Iterable[str]) -> None:
    """Raise InvalidArgumentError for the first field that is missing or None."""
    for field in fields:
        if params.get(field) is None:
            raise InvalidArgumentError(f"Required field '{field}' is missing")


def require_id(value: str, label: str) -> None:
    if not value:
        raise InvalidArgumentError(f"{label} cannot be empty")
