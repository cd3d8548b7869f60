"""Shared pydantic base for option forms."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from mediaconv.domain.enums import MediaKind
from mediaconv.domain.models import JobOperation
from mediaconv.errors import InvalidInputError


class FormModel(BaseModel):
    """Base for forms that accept raw values typed by a user.

    Values may arrive as strings or numbers. Blank strings mean the field
    was left empty and are treated as not supplied.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty or whitespace-only strings as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_options(self, media_kind: MediaKind) -> JobOperation:
        """Build the typed option payload for the given media kind."""
        raise NotImplementedError


def validation_error_to_invalid_input(error: ValidationError) -> InvalidInputError:
    """Convert the first pydantic error into an InvalidInputError."""
    details = error.errors()
    if not details:
        return InvalidInputError(str(error))
    first = details[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    message = first.get("msg", "Invalid value")
    if field:
        return InvalidInputError(f"Invalid value for {field}: {message}", field=field)
    return InvalidInputError(message)


def check_range(
    value: int | None,
    field: str,
    minimum: int,
    maximum: int | None = None,
) -> None:
    """Raise InvalidInputError if value falls outside [minimum, maximum]."""
    if value is None:
        return
    if value < minimum or (maximum is not None and value > maximum):
        if maximum is None:
            bounds = f"at least {minimum}"
        else:
            bounds = f"between {minimum} and {maximum}"
        raise InvalidInputError(f"{field} must be {bounds}, got {value}", field=field)


def reject_for_kind(field: str, kind_name: str, applies_to: str) -> InvalidInputError:
    """Build the error for an option that does not apply to this media kind."""
    return InvalidInputError(
        f"{field} applies to {applies_to} files only, not {kind_name}", field=field
    )
