"""Listing parameters for companies and employees."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class CompanyParameters:
    """Filters, ordering and paging for a company listing.

    ``company_name`` matches exactly; ``search_term`` matches a substring of
    the name or the introduction. Both are trimmed before use.
    """

    company_name: str | None = None
    search_term: str | None = None
    page_number: int = 1
    page_size: int | None = None
    order_by: str | None = "companyName"


@dataclasses.dataclass
class EmployeeParameters:
    """Filters, ordering and paging for the employees of one company.

    ``gender`` is a :class:`~routine.domain.Gender` member name; ``q`` matches
    a substring of the employee number, first name or last name.
    """

    gender: str | None = None
    q: str | None = None
    page_number: int = 1
    page_size: int | None = None
    order_by: str | None = "name"


__all__ = ["CompanyParameters", "EmployeeParameters"]
