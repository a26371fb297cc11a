from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def build_engine(database_url: str, echo: bool = False):
    """Create an engine; in-memory SQLite shares one connection across sessions"""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        options = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **options)

    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def build_session_factory(engine):
    # Rows handed back to callers stay readable after the session closes
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
