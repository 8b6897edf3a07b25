"""Repository port for companies and their employees."""
from __future__ import annotations

import abc
import uuid
from typing import Iterable

from routine.application.pagination import PagedList
from routine.application.parameters import CompanyParameters, EmployeeParameters
from routine.domain import Company, Employee


class CompanyRepository(abc.ABC):
    """Port: persistence of companies and employees.

    Write operations stage changes; :meth:`save` commits them.
    """

    @abc.abstractmethod
    async def get_companies(self, parameters: CompanyParameters) -> PagedList[Company]: ...

    @abc.abstractmethod
    async def get_companies_by_ids(self, company_ids: Iterable[uuid.UUID]) -> list[Company]: ...

    @abc.abstractmethod
    async def get_company(self, company_id: uuid.UUID) -> Company | None: ...

    @abc.abstractmethod
    async def company_exists(self, company_id: uuid.UUID) -> bool: ...

    @abc.abstractmethod
    async def add_company(self, company: Company) -> None: ...

    @abc.abstractmethod
    async def update_company(self, company: Company) -> None: ...

    @abc.abstractmethod
    async def delete_company(self, company: Company) -> None: ...

    @abc.abstractmethod
    async def get_employees(
        self, company_id: uuid.UUID, parameters: EmployeeParameters
    ) -> PagedList[Employee]: ...

    @abc.abstractmethod
    async def get_employee(self, company_id: uuid.UUID, employee_id: uuid.UUID) -> Employee | None: ...

    @abc.abstractmethod
    async def add_employee(self, company_id: uuid.UUID, employee: Employee) -> None: ...

    @abc.abstractmethod
    async def update_employee(self, employee: Employee) -> None: ...

    @abc.abstractmethod
    async def delete_employee(self, employee: Employee) -> None: ...

    @abc.abstractmethod
    async def save(self) -> bool: ...


__all__ = ["CompanyRepository"]
