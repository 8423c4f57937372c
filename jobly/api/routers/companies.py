from typing import Any

from fastapi import APIRouter, Depends, Query, status

from jobly.api.deps import (
    get_company_repository,
    read_json_payload,
    require_admin,
    require_logged_in,
)
from jobly.db.models.user import User
from jobly.domain.validation import NUM_EMPLOYEES_MAX
from jobly.repositories.company import CompanyRepository
from jobly.schemas.company import (
    Company,
    CompanyListResponse,
    CompanyResponse,
    CompanySearch,
    CompanySummary,
    MessageResponse,
)
from jobly.services.company import (
    create_company,
    delete_company,
    get_company,
    list_companies,
    update_company,
)

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=CompanyListResponse)
def get_all_companies(
    current_user: User = Depends(require_logged_in),
    name: str | None = Query(None, description="Filter by name (case-insensitive partial match)"),
    handle: str | None = Query(None, description="Filter by handle (case-insensitive partial match)"),
    min_employees: int | None = Query(None, ge=0, le=NUM_EMPLOYEES_MAX),
    max_employees: int | None = Query(None, ge=0, le=NUM_EMPLOYEES_MAX),
    repo: CompanyRepository = Depends(get_company_repository),
):
    """
    List companies, as handles and names, ordered by name. Any logged-in user.

    Without filters every company is returned.
    """
    search = CompanySearch(
        name=name,
        handle=handle,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    companies = list_companies(repo, search)
    return CompanyListResponse(companies=[CompanySummary.model_validate(c) for c in companies])


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_new_company(
    current_user: User = Depends(require_admin),
    # after the gate: the body is only read for authorized callers
    payload: Any = Depends(read_json_payload),
    repo: CompanyRepository = Depends(get_company_repository),
):
    """
    Create a company. Only admin users can create companies.

    The body is checked against the company schema before anything is stored.
    """
    company = create_company(repo, payload)
    return CompanyResponse(company=Company.model_validate(company))


@router.get("/{handle}", response_model=CompanyResponse)
def get_company_by_handle(
    handle: str,
    current_user: User = Depends(require_logged_in),
    repo: CompanyRepository = Depends(get_company_repository),
):
    company = get_company(repo, handle)
    return CompanyResponse(company=Company.model_validate(company))


@router.patch("/{handle}", response_model=CompanyResponse)
def update_company_by_handle(
    handle: str,
    current_user: User = Depends(require_admin),
    # after the gate: the body is only read for authorized callers
    payload: Any = Depends(read_json_payload),
    repo: CompanyRepository = Depends(get_company_repository),
):
    """
    Update a company. Only admin users can update companies.

    The handle is taken from the path; only fields present in the body change.
    """
    company = update_company(repo, handle, payload)
    return CompanyResponse(company=Company.model_validate(company))


@router.delete("/{handle}", response_model=MessageResponse)
def delete_company_by_handle(
    handle: str,
    current_user: User = Depends(require_admin),
    repo: CompanyRepository = Depends(get_company_repository),
):
    """Delete a company. Only admin users can delete companies."""
    delete_company(repo, handle)
    return MessageResponse(message="Company deleted")
