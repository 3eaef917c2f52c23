"""Pytest configuration and fixtures."""

import os

# Point settings at SQLite before anything imports advocates.db.session
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from advocates.core import limiter
from advocates.db.models import Advocate, AdvocateSpecialty
from advocates.db.session import Base
from advocates.dependencies import get_db
from advocates.main import app

SAMPLE_ADVOCATES = [
    ("Sarah", "Johnson", "New York", "MD", ["Cardiology", "Internal Medicine"], 12, 2125551234),
    ("Michael", "Chen", "Boston", "JD", ["Family Law"], 3, 6175551234),
    ("Emily", "Rodriguez", "Chicago", "PhD", ["Trauma & PTSD", "Life coaching"], 2, 3125551234),
    ("David", "Thompson", "Houston", "MSW", ["Substance use/abuse"], 20, 7135551234),
    ("Lisa", "Williams", "New York City", "PhD", ["Eating disorders", "Weight loss & nutrition"], 21, 2155551234),
    ("James", "Brown", "Newark", "md", ["Pediatrics"], 0, 9735551234),
    ("Maria", "Garcia", "San Antonio", "MSW", ["Women's issues", "Family Law"], 16, 2105551234),
    ("Robert", "Davis", "Yorktown", "MD", ["ADHD", "Sliding scale 50% off"], 6, 9145551234),
    ("Jessica", "Miller", "Dallas", "JD", ["Corporate Law", "Mergers & Acquisitions"], 15, 2145551234),
    ("Christopher", "Wilson", "San Jose", "PhD", ["Sleep_issues"], 11, 4085551234),
    ("Amanda", "Taylor", "Boston", "MSW", [], 5, 6175552345),
    ("Daniel", "Anderson", "Los Angeles", "MD", ["Chronic pain", "ADHD testing"], 10, 3105552345),
]


def make_advocate(first, last, city, degree, specialties, years, phone) -> Advocate:
    advocate = Advocate(
        first_name=first,
        last_name=last,
        city=city,
        degree=degree,
        years_of_experience=years,
        phone_number=phone,
    )
    advocate.specialty_rows = [
        AdvocateSpecialty(position=i, name=name) for i, name in enumerate(specialties)
    ]
    return advocate


@pytest.fixture(autouse=True)
def disable_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
async def engine():
    """Temporary in-memory SQLite database shared across connections of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db(engine):
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded_db(db):
    db.add_all([make_advocate(*row) for row in SAMPLE_ADVOCATES])
    await db.commit()
    return db


@pytest.fixture
def override_db():
    """Route the app's get_db dependency to a given session; cleared after the test."""

    def _override(session):
        async def _get_db():
            yield session

        app.dependency_overrides[get_db] = _get_db

    yield _override
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
async def api_client(seeded_db, override_db):
    override_db(seeded_db)
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
