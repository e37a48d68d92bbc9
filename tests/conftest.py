"""Test fixtures and configuration."""

import logging
import os
import sys

# Settings are read at import time; these must be in place before cinelog loads
os.environ["SECRET_KEY"] = "cinelog-test-secret-key-not-for-production-use"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "testing"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
import structlog  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from cinelog import database  # noqa: E402
from cinelog.database import Base, engine_options  # noqa: E402
from cinelog.logger import get_logger  # noqa: E402
from cinelog.models import Movie  # noqa: E402

logger = get_logger(__name__)

TEST_DATABASE_URL = os.environ["DATABASE_URL"]


# --- Structlog Configuration for Tests ---
@pytest.fixture(autouse=True, scope="session")
def configure_structlog_for_tests():
    """Configure structlog for proper capsys capture in tests."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=False),
        foreign_pre_chain=processors[:-1],
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)

    yield

    structlog.reset_defaults()


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """In-memory SQLite engine with a fresh schema per test.

    StaticPool keeps the single connection alive, so the test session and
    the sessions opened by request handlers see the same database.
    """
    engine = create_async_engine(TEST_DATABASE_URL, **engine_options(TEST_DATABASE_URL))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function", autouse=True)
async def patch_database_connection(db_engine):
    """Override global database session maker to use the test engine."""
    test_maker = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    database.set_test_session_maker(test_maker)
    yield
    database.set_test_session_maker(None)


@pytest_asyncio.fixture(scope="function")
async def db(db_engine):
    """Session bound to the test engine for arranging and asserting state."""
    async with AsyncSession(db_engine, expire_on_commit=False) as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def public_client(db_engine):
    """Async test client without credentials."""
    from cinelog.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def seeded_movies(db: AsyncSession) -> list[Movie]:
    """A small catalog covering several genres."""
    movies = [
        Movie(
            tmdb_id=603,
            title="The Matrix",
            overview="A hacker learns the truth about his reality.",
            release_date="1999-03-31",
            poster_path="/matrix.jpg",
            rating=8.2,
            genres=["Action", "Science Fiction"],
        ),
        Movie(
            tmdb_id=604,
            title="The Matrix Reloaded",
            release_date="2003-05-15",
            poster_path="/reloaded.jpg",
            rating=7.0,
            genres=["Action", "Science Fiction"],
        ),
        Movie(
            tmdb_id=13,
            title="Forrest Gump",
            release_date="1994-07-06",
            poster_path="/gump.jpg",
            rating=8.5,
            genres=["Comedy", "Drama", "Romance"],
        ),
        Movie(
            tmdb_id=4951,
            title="10 Things I Hate About You",
            release_date="1999-03-31",
            rating=7.6,
            genres=["Comedy", "Romance"],
        ),
    ]
    db.add_all(movies)
    await db.commit()
    return movies
