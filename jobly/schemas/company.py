from pydantic import BaseModel, ConfigDict, Field


class Company(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    handle: str
    name: str
    num_employees: int | None = None
    description: str | None = None
    logo_url: str | None = None


class CompanySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    handle: str
    name: str


class CompanySearch(BaseModel):
    """Optional list filters taken from the query string."""

    name: str | None = Field(None, description="Case-insensitive substring of the company name")
    handle: str | None = Field(None, description="Case-insensitive substring of the company handle")
    min_employees: int | None = Field(None, ge=0)
    max_employees: int | None = Field(None, ge=0)


class CompanyResponse(BaseModel):
    company: Company


class CompanyListResponse(BaseModel):
    companies: list[CompanySummary]


class MessageResponse(BaseModel):
    message: str
