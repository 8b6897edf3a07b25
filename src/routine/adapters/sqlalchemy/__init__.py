"""SQLAlchemy adapter – session factory, sorting, paging and repository."""
from routine.adapters.sqlalchemy.paging import SqlAlchemyPageSource
from routine.adapters.sqlalchemy.repository import SqlAlchemyCompanyRepository
from routine.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from routine.adapters.sqlalchemy.sorting import apply_sort, order_by_columns

__all__ = [
    "SqlAlchemyCompanyRepository",
    "SqlAlchemyPageSource",
    "SqlAlchemySessionFactory",
    "apply_sort",
    "order_by_columns",
]
