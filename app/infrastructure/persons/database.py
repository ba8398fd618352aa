"""
Database schema and engine factory for the persons context.

The schema is declared with SQLAlchemy Core. Tables are created on
application startup; there is no migration tooling.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from app.domain.persons.entities import ADDRESS_MAX_LEN, BUSINESS_KEY_LEN, NAME_MAX_LEN

logger = logging.getLogger(__name__)

COLOR_MAX_LEN = 32

metadata = MetaData()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


persons_table = Table(
    "persons",
    metadata,
    # SQLite only autoincrements a column declared INTEGER
    Column(
        "id",
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    ),
    Column("first_name", String(NAME_MAX_LEN), nullable=False),
    Column("last_name", String(NAME_MAX_LEN), nullable=False),
    Column("address", String(ADDRESS_MAX_LEN), nullable=False, default=""),
    Column("color", String(COLOR_MAX_LEN), nullable=False, index=True),
    # sha256 of the normalised first name, last name and address
    Column("business_key", String(BUSINESS_KEY_LEN), nullable=False, unique=True),
    Column("created_at", DateTime(timezone=True), nullable=False, default=_utcnow),
)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for ``database_url``.

    SQLite URLs get ``check_same_thread`` disabled, since FastAPI runs
    sync routes in a threadpool. In-memory SQLite shares one connection
    so every session sees the same database.
    """
    kwargs: dict = {"echo": echo, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_tables(engine: Engine) -> None:
    """Create the persons schema if it does not exist yet."""
    metadata.create_all(engine)
    logger.info("Database schema ready (%s)", engine.url.render_as_string(hide_password=True))
