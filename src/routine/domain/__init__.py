"""Domain – entities, enums and exposed shapes."""
from routine.domain.gender import Gender
from routine.domain.models import Base, Company, Employee
from routine.domain.shapes import Shape

__all__ = ["Base", "Company", "Employee", "Gender", "Shape"]
