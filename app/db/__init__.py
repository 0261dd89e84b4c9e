"""Database package — async SQLAlchemy engine, session factory, Base, transactions."""
from app.db.base import (
    Base,
    async_session_factory,
    build_engine,
    build_session_factory,
    create_tables,
    engine,
    get_session_factory,
)
from app.db.transaction import transaction

__all__ = [
    "Base",
    "async_session_factory",
    "build_engine",
    "build_session_factory",
    "create_tables",
    "engine",
    "get_session_factory",
    "transaction",
]
