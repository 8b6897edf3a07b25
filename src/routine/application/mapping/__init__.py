"""Application mapping – external sort keys to entity fields."""
from routine.application.mapping.defaults import (
    COMPANY_PROPERTY_MAPPING,
    EMPLOYEE_PROPERTY_MAPPING,
    default_property_mapping_service,
)
from routine.application.mapping.errors import PropertyMappingNotFoundError
from routine.application.mapping.property_mapping import (
    MappedField,
    PropertyMapping,
    PropertyMappingValue,
)
from routine.application.mapping.service import PropertyMappingService

__all__ = [
    "COMPANY_PROPERTY_MAPPING",
    "EMPLOYEE_PROPERTY_MAPPING",
    "MappedField",
    "PropertyMapping",
    "PropertyMappingNotFoundError",
    "PropertyMappingService",
    "PropertyMappingValue",
    "default_property_mapping_service",
]
