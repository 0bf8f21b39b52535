"""SQLAlchemy declarative base for booklists_auth models."""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for booklists_auth models.

    Separate from the application's Base; ``init_db`` creates and drops
    both metadata collections together.
    """
