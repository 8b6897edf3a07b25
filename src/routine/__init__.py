"""
routine – Company/Employee data-access layer.

Import path convention::

    from routine.kernel.errors import InvalidArgumentError
    from routine.application.pagination import PagedList
    from routine.application.mapping import default_property_mapping_service
    from routine.adapters.sqlalchemy import SqlAlchemyCompanyRepository
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
