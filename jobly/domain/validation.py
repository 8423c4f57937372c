"""Request payload validation against statically declared company shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

HANDLE_MAX_LENGTH = 25
# Largest value an INTEGER column holds on PostgreSQL
NUM_EMPLOYEES_MAX = 2**31 - 1
URL_PATTERN = r"^https?://[^\s/$.?#][^\s]*$"


class CompanyFields(BaseModel):
    """Attributes shared by the create and update shapes."""

    # strict: no "5" -> 5 coercion and no booleans where integers are expected
    model_config = ConfigDict(strict=True, extra="forbid")

    name: str = Field(..., min_length=1)
    num_employees: int | None = Field(None, ge=0, le=NUM_EMPLOYEES_MAX)
    description: str | None = None
    logo_url: str | None = Field(None, pattern=URL_PATTERN)


class CompanyCreate(CompanyFields):
    handle: str = Field(..., min_length=1, max_length=HANDLE_MAX_LENGTH)


class CompanyUpdate(CompanyFields):
    pass


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a schema check. ``errors`` keeps the order the rules were evaluated in."""

    errors: tuple[str, ...] = ()
    data: dict[str, Any] | None = None

    @property
    def valid(self) -> bool:
        return not self.errors


def _format_error(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error["loc"]) or "payload"
    return f"{location}: {error['msg']}"


def validate_payload(payload: Any, schema: type[BaseModel]) -> ValidationResult:
    """Check ``payload`` against ``schema``.

    Never raises for bad input. On success ``data`` holds only the fields the
    caller actually sent, so partial updates leave the other columns alone.
    """
    try:
        model = schema.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(errors=tuple(_format_error(err) for err in exc.errors()))
    return ValidationResult(data=model.model_dump(exclude_unset=True))


def validate_company_create(payload: Any) -> ValidationResult:
    return validate_payload(payload, CompanyCreate)


def validate_company_update(payload: Any) -> ValidationResult:
    """Validate an update body. The handle comes from the path, so a ``handle`` key in the body is dropped."""
    if isinstance(payload, dict):
        payload = {key: value for key, value in payload.items() if key != "handle"}
    return validate_payload(payload, CompanyUpdate)
