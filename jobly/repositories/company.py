from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import FlushError

from jobly.db.models.company import Company as CompanyModel
from jobly.domain.result import Failure, Ok, Result
from jobly.schemas.company import CompanySearch

logger = logging.getLogger(__name__)


def _contains_pattern(term: str) -> str:
    """LIKE pattern matching ``term`` anywhere, with wildcards in the term taken literally."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class CompanyRepository:
    """Data access for companies.

    Every method returns a ``Result``; storage errors are reported as
    ``Failure`` values instead of being raised. Handle and name uniqueness
    are left to the database constraints.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_by_handle(self, handle: str) -> Result[CompanyModel]:
        try:
            company = self._find(handle)
        except SQLAlchemyError:
            logger.exception(f"Failed to load company {handle}")
            return Failure.execution("Could not load company")
        if company is None:
            return Failure.not_found(f"No company found with handle: {handle}")
        return Ok(company)

    def list(self, search: CompanySearch) -> Result[list[CompanyModel]]:
        """List companies ordered by name, narrowed by the optional search filters."""
        if (
            search.min_employees is not None
            and search.max_employees is not None
            and search.min_employees > search.max_employees
        ):
            return Failure.execution("min_employees cannot be greater than max_employees")

        query = self.db.query(CompanyModel)
        if search.name:
            query = query.filter(CompanyModel.name.ilike(_contains_pattern(search.name), escape="\\"))
        if search.handle:
            query = query.filter(
                CompanyModel.handle.ilike(_contains_pattern(search.handle), escape="\\")
            )
        if search.min_employees is not None:
            query = query.filter(CompanyModel.num_employees >= search.min_employees)
        if search.max_employees is not None:
            query = query.filter(CompanyModel.num_employees <= search.max_employees)

        try:
            return Ok(query.order_by(CompanyModel.name).all())
        except SQLAlchemyError:
            logger.exception("Failed to list companies")
            return Failure.execution("Could not list companies")

    def create(self, fields: dict[str, Any]) -> Result[CompanyModel]:
        """Insert a new company. Pure data access - the payload is expected to be validated."""
        company = CompanyModel(**fields)
        self.db.add(company)
        try:
            self.db.commit()
        except (IntegrityError, FlushError):
            # FlushError: the handle is already loaded in this session
            self.db.rollback()
            return Failure.conflict(f"Duplicate company: {fields.get('handle')}")
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to create company {fields.get('handle')}")
            return Failure.execution("Could not create company")
        self.db.refresh(company)
        return Ok(company)

    def update(self, handle: str, fields: dict[str, Any]) -> Result[CompanyModel]:
        """Update the given fields of a company. Fields not present are left unchanged."""
        found = self.get_by_handle(handle)
        if isinstance(found, Failure):
            return found
        company = found.value

        for key, value in fields.items():
            setattr(company, key, value)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return Failure.conflict(f"Another company already uses name: {fields.get('name')}")
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to update company {handle}")
            return Failure.execution("Could not update company")
        self.db.refresh(company)
        return Ok(company)

    def delete(self, handle: str) -> Result[str]:
        found = self.get_by_handle(handle)
        if isinstance(found, Failure):
            return found

        self.db.delete(found.value)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to delete company {handle}")
            return Failure.execution("Could not delete company")
        return Ok(handle)

    def _find(self, handle: str) -> CompanyModel | None:
        return self.db.query(CompanyModel).filter(CompanyModel.handle == handle).first()
