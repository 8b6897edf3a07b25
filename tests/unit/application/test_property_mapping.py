"""Unit tests for property mapping tables and the mapping service."""

from __future__ import annotations

import pytest

from routine.application.mapping import (
    COMPANY_PROPERTY_MAPPING,
    EMPLOYEE_PROPERTY_MAPPING,
    MappedField,
    PropertyMapping,
    PropertyMappingNotFoundError,
    PropertyMappingService,
    PropertyMappingValue,
    default_property_mapping_service,
)
from routine.config.validation import ConfigError
from routine.domain import Company, Employee, Shape


class Unmapped:
    pass


# ---------------------------------------------------------------------------
# PropertyMappingValue / PropertyMapping
# ---------------------------------------------------------------------------


class TestPropertyMappingValue:
    def test_of_shares_invert_flag(self) -> None:
        value = PropertyMappingValue.of("first_name", "last_name")
        assert value.fields == (MappedField("first_name"), MappedField("last_name"))

    def test_of_with_invert(self) -> None:
        value = PropertyMappingValue.of("date_of_birth", invert=True)
        assert value.fields == (MappedField("date_of_birth", True),)

    def test_per_field_invert(self) -> None:
        value = PropertyMappingValue((MappedField("a"), MappedField("b", invert=True)))
        assert [f.invert for f in value.fields] == [False, True]

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            PropertyMappingValue(())


class TestPropertyMapping:
    def test_lookup_is_case_insensitive(self) -> None:
        table = PropertyMapping({"employeeNo": PropertyMappingValue.of("employee_no")})
        assert table["employeeno"] is table["EMPLOYEENO"]
        assert " EmployeeNo " in table

    def test_iterates_original_keys(self) -> None:
        table = PropertyMapping({"Name": PropertyMappingValue.of("name"), "id": PropertyMappingValue.of("id")})
        assert list(table) == ["Name", "id"]
        assert len(table) == 2

    def test_missing_key(self) -> None:
        table = PropertyMapping({"id": PropertyMappingValue.of("id")})
        assert "bogus" not in table
        assert 3 not in table
        with pytest.raises(KeyError):
            table["bogus"]

    def test_keys_differing_only_by_case_rejected(self) -> None:
        with pytest.raises(ValueError):
            PropertyMapping({"name": PropertyMappingValue.of("a"), "NAME": PropertyMappingValue.of("b")})

    def test_blank_key_rejected(self) -> None:
        with pytest.raises(ValueError):
            PropertyMapping({"  ": PropertyMappingValue.of("a")})

    def test_immutable(self) -> None:
        table = PropertyMapping({"id": PropertyMappingValue.of("id")})
        with pytest.raises(TypeError):
            table["x"] = PropertyMappingValue.of("x")  # type: ignore[index]


# ---------------------------------------------------------------------------
# PropertyMappingService
# ---------------------------------------------------------------------------


class TestPropertyMappingService:
    def test_returns_registered_tables(self) -> None:
        service = default_property_mapping_service()
        assert service.get_property_mapping(Shape.COMPANY, Company) is COMPANY_PROPERTY_MAPPING
        assert service.get_property_mapping(Shape.EMPLOYEE, Employee) is EMPLOYEE_PROPERTY_MAPPING

    def test_unregistered_pair_raises(self) -> None:
        service = default_property_mapping_service()
        with pytest.raises(PropertyMappingNotFoundError) as exc_info:
            service.get_property_mapping(Shape.COMPANY, Employee)
        assert exc_info.value.entity is Employee
        assert isinstance(exc_info.value, ConfigError)

    def test_unknown_entity_raises(self) -> None:
        with pytest.raises(PropertyMappingNotFoundError):
            default_property_mapping_service().get_property_mapping(Shape.EMPLOYEE, Unmapped)

    def test_empty_service_never_returns_empty_table(self) -> None:
        with pytest.raises(PropertyMappingNotFoundError):
            PropertyMappingService().get_property_mapping(Shape.COMPANY, Company)

    def test_duplicate_registration_rejected(self) -> None:
        with pytest.raises(ConfigError):
            PropertyMappingService([
                (Shape.COMPANY, Company, COMPANY_PROPERTY_MAPPING),
                (Shape.COMPANY, Company, COMPANY_PROPERTY_MAPPING),
            ])

    def test_default_registry_is_complete(self) -> None:
        service = default_property_mapping_service()
        assert service.registered_pairs == {(Shape.COMPANY, Company), (Shape.EMPLOYEE, Employee)}

    @pytest.mark.parametrize(
        ("shape", "entity"),
        [(Shape.COMPANY, Company), (Shape.EMPLOYEE, Employee)],
    )
    def test_default_tables_target_real_columns(self, shape: Shape, entity: type) -> None:
        columns = set(entity.__table__.columns.keys())
        table = default_property_mapping_service().get_property_mapping(shape, entity)
        for key in table:
            for field in table[key].fields:
                assert field.name in columns, f"{key} -> {field.name}"

    @pytest.mark.parametrize(
        ("order_by", "expected"),
        [
            (None, True),
            ("", True),
            ("name", True),
            ("NAME desc, age", True),
            ("employeeNo asc,genderDisplay", True),
            ("bogus", False),
            ("name, bogus desc", False),
        ],
    )
    def test_valid_mapping_exists_for(self, order_by: str | None, expected: bool) -> None:
        service = default_property_mapping_service()
        assert service.valid_mapping_exists_for(Shape.EMPLOYEE, Employee, order_by) is expected

    def test_valid_mapping_exists_for_unregistered_pair_raises(self) -> None:
        with pytest.raises(PropertyMappingNotFoundError):
            default_property_mapping_service().valid_mapping_exists_for(Shape.EMPLOYEE, Company, "name")


class TestDefaultTables:
    def test_employee_name_expands_to_two_fields(self) -> None:
        names = [f.name for f in EMPLOYEE_PROPERTY_MAPPING["name"].fields]
        assert names == ["first_name", "last_name"]

    def test_employee_age_is_inverted_birth_date(self) -> None:
        assert EMPLOYEE_PROPERTY_MAPPING["age"].fields == (MappedField("date_of_birth", invert=True),)

    def test_company_name_aliases(self) -> None:
        assert COMPANY_PROPERTY_MAPPING["companyName"] == COMPANY_PROPERTY_MAPPING["name"]
