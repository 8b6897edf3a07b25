"""Standard mapping tables for the Company and Employee shapes."""
from __future__ import annotations

from routine.application.mapping.property_mapping import PropertyMapping, PropertyMappingValue
from routine.application.mapping.service import PropertyMappingService
from routine.domain import Company, Employee, Shape

COMPANY_PROPERTY_MAPPING = PropertyMapping({
    "id": PropertyMappingValue.of("id"),
    "companyName": PropertyMappingValue.of("name"),
    "name": PropertyMappingValue.of("name"),
    "introduction": PropertyMappingValue.of("introduction"),
})

EMPLOYEE_PROPERTY_MAPPING = PropertyMapping({
    "id": PropertyMappingValue.of("id"),
    "companyId": PropertyMappingValue.of("company_id"),
    "employeeNo": PropertyMappingValue.of("employee_no"),
    "name": PropertyMappingValue.of("first_name", "last_name"),
    "genderDisplay": PropertyMappingValue.of("gender"),
    "age": PropertyMappingValue.of("date_of_birth", invert=True),
})


def default_property_mapping_service() -> PropertyMappingService:
    """Service holding the Company and Employee tables."""
    return PropertyMappingService([
        (Shape.COMPANY, Company, COMPANY_PROPERTY_MAPPING),
        (Shape.EMPLOYEE, Employee, EMPLOYEE_PROPERTY_MAPPING),
    ])


__all__ = [
    "COMPANY_PROPERTY_MAPPING",
    "EMPLOYEE_PROPERTY_MAPPING",
    "default_property_mapping_service",
]
