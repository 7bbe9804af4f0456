# products_api/db.py

"""
Database engine and session management for the Products API.
"""
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Base class for the ORM models
Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database.
    pool_pre_ping=True helps maintain healthy connections in a pool.
    """
    if database_url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a thread pool
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every checkout gets an empty database
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    # autocommit=False ensures transactions must be committed explicitly.
    # autoflush=False means changes aren't flushed to DB until commit or explicit flush.
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """
    Dependency to provide a new database session for FastAPI endpoints.
    A session is created for each request and automatically closed after use.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
