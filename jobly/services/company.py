"""Company resource handlers.

Each handler takes its data-access collaborator as an argument, runs the
schema check before any storage call, and ends in exactly one of two ways:
it returns the result, or it raises one ``APIError`` whose status code is
fixed by the route policy below.
"""

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import status

from jobly.core.config import settings
from jobly.db.models.company import Company as CompanyModel
from jobly.domain.result import Failure
from jobly.domain.validation import (
    ValidationResult,
    validate_company_create,
    validate_company_update,
)
from jobly.errors import APIError, classify_failure, classify_validation
from jobly.repositories.company import CompanyRepository
from jobly.schemas.company import CompanySearch

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RoutePolicy:
    """Status codes a route answers with when its validation or its storage call fails."""

    execution_status: int

    @property
    def validation_status(self) -> int:
        return settings.validation_error_status


LIST_POLICY = RoutePolicy(execution_status=status.HTTP_400_BAD_REQUEST)
CREATE_POLICY = RoutePolicy(execution_status=status.HTTP_409_CONFLICT)
FETCH_POLICY = RoutePolicy(execution_status=status.HTTP_404_NOT_FOUND)
UPDATE_POLICY = RoutePolicy(execution_status=status.HTTP_404_NOT_FOUND)
DELETE_POLICY = RoutePolicy(execution_status=status.HTTP_404_NOT_FOUND)


def _fail(failure: Failure, policy: RoutePolicy, operation: str) -> APIError:
    logger.warning(
        f"{operation} failed ({failure.kind.value}): {failure.message}; "
        f"responding {policy.execution_status}"
    )
    return classify_failure(failure, policy.execution_status)


def _reject(checked: ValidationResult, policy: RoutePolicy, operation: str) -> APIError:
    logger.warning(
        f"{operation} rejected ({len(checked.errors)} validation errors); "
        f"responding {policy.validation_status}"
    )
    return classify_validation(checked, policy.validation_status)


def list_companies(repo: CompanyRepository, search: CompanySearch) -> list[CompanyModel]:
    """List companies matching the optional filters. Any failure is a bad request."""
    result = repo.list(search)
    if isinstance(result, Failure):
        raise _fail(result, LIST_POLICY, "List companies")
    return result.value


def create_company(repo: CompanyRepository, payload: Any) -> CompanyModel:
    """
    Validate a create body and persist the new company.

    Raises:
        APIError: validation failure (configured validation status) or
            duplicate handle / storage failure (409)
    """
    checked = validate_company_create(payload)
    if not checked.valid:
        raise _reject(checked, CREATE_POLICY, "Create company")

    result = repo.create(checked.data)
    if isinstance(result, Failure):
        raise _fail(result, CREATE_POLICY, "Create company")

    logger.info(f"Created company {result.value.handle}")
    return result.value


def get_company(repo: CompanyRepository, handle: str) -> CompanyModel:
    result = repo.get_by_handle(handle)
    if isinstance(result, Failure):
        raise _fail(result, FETCH_POLICY, "Fetch company")
    return result.value


def update_company(repo: CompanyRepository, handle: str, payload: Any) -> CompanyModel:
    """
    Validate an update body and apply it to the company at ``handle``.

    Only fields present in the body change. The handle itself is never
    updated or revalidated.

    Raises:
        APIError: validation failure (configured validation status) or
            missing company / storage failure (404)
    """
    checked = validate_company_update(payload)
    if not checked.valid:
        raise _reject(checked, UPDATE_POLICY, "Update company")

    result = repo.update(handle, checked.data)
    if isinstance(result, Failure):
        raise _fail(result, UPDATE_POLICY, "Update company")

    logger.info(f"Updated company {handle}")
    return result.value


def delete_company(repo: CompanyRepository, handle: str) -> None:
    result = repo.delete(handle)
    if isinstance(result, Failure):
        raise _fail(result, DELETE_POLICY, "Delete company")
    logger.info(f"Deleted company {handle}")
