"""Shared fixtures: a throwaway SQLite database per test and an ASGI client."""

import os

# Must be set before anything imports app.core.config
os.environ["ENVIRONMENT"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.database import Base, get_db
from app.core.security import create_access_token, hash_password
from app.main import app
from app.models.course import Course
from app.models.skill import Skill
from app.models.user import User, ROLE_INSTRUCTOR, ROLE_USER
from app.schemas.auth import CurrentActor


@pytest.fixture
async def engine(tmp_path):
    """File-backed SQLite engine with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'skillhub.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    """Session for arranging data and calling services directly."""
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    """AsyncClient with the DB dependency pointed at the test database."""

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_user(db):
    """Create a user and return it as a CurrentActor."""

    async def _make_user(email: str, role: str = ROLE_USER, password: str = "password123"):
        user = User(email=email, password_hash=hash_password(password), role=role)
        db.add(user)
        await db.commit()
        return CurrentActor(user_id=user.id, role=user.role)

    return _make_user


@pytest.fixture
def make_course(db):
    """Create a course owned by an instructor actor and return its id."""

    async def _make_course(instructor: CurrentActor, title: str = "Intro to Web Development"):
        course = Course(title=title, instructor_id=instructor.user_id)
        db.add(course)
        await db.commit()
        return course.id

    return _make_course


@pytest.fixture
def make_skill(db):
    """Create a skill and return its id."""

    async def _make_skill(name: str):
        skill = Skill(name=name)
        db.add(skill)
        await db.commit()
        return skill.id

    return _make_skill


@pytest.fixture
async def instructor(make_user):
    return await make_user("instructor@skillhub.dev", ROLE_INSTRUCTOR)


@pytest.fixture
async def student(make_user):
    return await make_user("student@skillhub.dev", ROLE_USER)


@pytest.fixture
def auth_headers():
    """Build the bearer header an actor would get from logging in."""

    def _auth_headers(actor: CurrentActor) -> dict:
        token = create_access_token({"sub": str(actor.user_id), "role": actor.role})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
