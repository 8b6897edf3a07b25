"""SQLAlchemy adapter – SqlAlchemyCompanyRepository."""
from __future__ import annotations

import uuid
from typing import Any, Iterable

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from routine.adapters.sqlalchemy.paging import SqlAlchemyPageSource
from routine.adapters.sqlalchemy.sorting import apply_sort
from routine.application.mapping import PropertyMappingService
from routine.application.pagination import PagedList
from routine.application.parameters import CompanyParameters, EmployeeParameters
from routine.application.repository import CompanyRepository
from routine.config.settings import PagingSettings
from routine.domain import Company, Employee, Gender, Shape
from routine.kernel.errors import InvalidArgumentError
from routine.observability.logging import get_logger

logger = get_logger(__name__)

_NIL_UUID = uuid.UUID(int=0)


def _require(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(name)


def _require_id(value: uuid.UUID | None, name: str) -> None:
    if value is None or value == _NIL_UUID:
        raise InvalidArgumentError(name)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


class SqlAlchemyCompanyRepository(CompanyRepository):
    """Company/Employee repository over an :class:`AsyncSession`.

    Listing queries are sorted through the property mapping tables and
    paged with :meth:`PagedList.create`; page number and size are clamped by
    *settings* first.
    """

    def __init__(
        self,
        session: AsyncSession,
        property_mapping_service: PropertyMappingService,
        settings: PagingSettings | None = None,
    ) -> None:
        _require(session, "session")
        _require(property_mapping_service, "property_mapping_service")
        self._session = session
        self._mappings = property_mapping_service
        self._settings = settings or PagingSettings()

    async def _page(self, statement: Select[Any], page_number: int, page_size: int | None) -> PagedList[Any]:
        return await PagedList.create(
            SqlAlchemyPageSource(self._session, statement),
            self._settings.clamp_page_number(page_number),
            self._settings.clamp_page_size(page_size),
        )

    # ------------------------------------------------------------------
    # Companies
    # ------------------------------------------------------------------

    async def get_companies(self, parameters: CompanyParameters) -> PagedList[Company]:
        _require(parameters, "parameters")
        statement = select(Company)

        company_name = _clean(parameters.company_name)
        if company_name is not None:
            statement = statement.where(Company.name == company_name)

        search_term = _clean(parameters.search_term)
        if search_term is not None:
            statement = statement.where(
                or_(Company.name.contains(search_term), Company.introduction.contains(search_term))
            )

        mapping = self._mappings.get_property_mapping(Shape.COMPANY, Company)
        statement = apply_sort(statement, parameters.order_by, mapping, Company)

        logger.debug(
            "list_companies",
            company_name=company_name,
            search_term=search_term,
            order_by=parameters.order_by,
            page_number=parameters.page_number,
            page_size=parameters.page_size,
        )
        return await self._page(statement, parameters.page_number, parameters.page_size)

    async def get_companies_by_ids(self, company_ids: Iterable[uuid.UUID]) -> list[Company]:
        _require(company_ids, "company_ids")
        ids = list(company_ids)
        if not ids:
            return []
        result = await self._session.execute(
            select(Company).where(Company.id.in_(ids)).order_by(Company.name)
        )
        return list(result.scalars().all())

    async def get_company(self, company_id: uuid.UUID) -> Company | None:
        _require_id(company_id, "company_id")
        return await self._session.get(Company, company_id)

    async def company_exists(self, company_id: uuid.UUID) -> bool:
        _require_id(company_id, "company_id")
        result = await self._session.execute(
            select(Company.id).where(Company.id == company_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def add_company(self, company: Company) -> None:
        _require(company, "company")
        company.id = uuid.uuid4()
        for employee in company.employees:
            employee.id = uuid.uuid4()
        self._session.add(company)

    async def update_company(self, company: Company) -> None:
        _require(company, "company")
        self._session.add(company)

    async def delete_company(self, company: Company) -> None:
        _require(company, "company")
        await self._session.delete(company)

    # ------------------------------------------------------------------
    # Employees
    # ------------------------------------------------------------------

    async def get_employees(
        self, company_id: uuid.UUID, parameters: EmployeeParameters
    ) -> PagedList[Employee]:
        _require_id(company_id, "company_id")
        _require(parameters, "parameters")
        statement = select(Employee).where(Employee.company_id == company_id)

        gender = _clean(parameters.gender)
        if gender is not None:
            statement = statement.where(Employee.gender == Gender.parse(gender))

        q = _clean(parameters.q)
        if q is not None:
            statement = statement.where(
                or_(
                    Employee.employee_no.contains(q),
                    Employee.first_name.contains(q),
                    Employee.last_name.contains(q),
                )
            )

        mapping = self._mappings.get_property_mapping(Shape.EMPLOYEE, Employee)
        statement = apply_sort(statement, parameters.order_by, mapping, Employee)

        logger.debug(
            "list_employees",
            company_id=str(company_id),
            gender=gender,
            q=q,
            order_by=parameters.order_by,
            page_number=parameters.page_number,
            page_size=parameters.page_size,
        )
        return await self._page(statement, parameters.page_number, parameters.page_size)

    async def get_employee(self, company_id: uuid.UUID, employee_id: uuid.UUID) -> Employee | None:
        _require_id(company_id, "company_id")
        _require_id(employee_id, "employee_id")
        result = await self._session.execute(
            select(Employee).where(Employee.company_id == company_id, Employee.id == employee_id)
        )
        return result.scalars().first()

    async def add_employee(self, company_id: uuid.UUID, employee: Employee) -> None:
        _require_id(company_id, "company_id")
        _require(employee, "employee")
        employee.company_id = company_id
        if employee.id is None:
            employee.id = uuid.uuid4()
        self._session.add(employee)

    async def update_employee(self, employee: Employee) -> None:
        # loaded instances are tracked by the session; this only re-attaches detached ones
        _require(employee, "employee")
        self._session.add(employee)

    async def delete_employee(self, employee: Employee) -> None:
        _require(employee, "employee")
        await self._session.delete(employee)

    async def save(self) -> bool:
        await self._session.commit()
        return True


__all__ = ["SqlAlchemyCompanyRepository"]
