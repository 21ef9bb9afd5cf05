from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from shared.core.config import PROPERTY_DATABASE_URL, settings

Base = declarative_base()

POOL_SIZE = 2
MAX_OVERFLOW = 2


def build_engine(url: str, echo: bool = False):
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # in-memory databases live on a single shared connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **options)

    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=POOL_SIZE,          # max idle connections
        max_overflow=MAX_OVERFLOW,    # max temporary extra connections
        pool_timeout=30               # wait time before failing
    )


property_engine = build_engine(PROPERTY_DATABASE_URL, echo=settings.SQL_ECHO)
PropertySessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=property_engine)


# Dependency
def get_property_db():
    db = PropertySessionLocal()
    try:
        yield db
    finally:
        db.close()
