# autopark/database.py
"""
Database engine, session factory and table creation for the sql store
backend. Uses SQLAlchemy; any URL it understands works (PostgreSQL in
production, SQLite for local runs and tests). All models are imported in
create_tables() so one call creates every table.
"""

from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def make_engine(database_url: str, echo: bool = False):
    """Create an engine with pool settings suited to the driver."""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty DB
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    return create_engine(
        database_url,
        pool_pre_ping=True,          # Auto-reconnect if DB connection drops
        pool_size=10,
        max_overflow=20,
        echo=echo,                   # Set True to log all SQL queries (debug only)
    )


def make_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def create_tables(engine):
    """
    Creates all DB tables. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from autopark.models.vehicle import VehicleRow                  # noqa
    from autopark.models.driver import DriverRow                    # noqa
    from autopark.models.user import UserRow                        # noqa
    from autopark.models.trip import TripRow                        # noqa
    from autopark.models.dispatch_request import DispatchRequestRow  # noqa

    Base.metadata.create_all(bind=engine)
