"""
Seed script - populates the database with sample data for development.

Usage:
    python -m scripts.seed

Creates one instructor, one student, a course owned by the instructor,
a pending session request from the student, a few skill tags, and a skill
the instructor offers for mentoring.

This script is IDEMPOTENT - running it twice won't create duplicates.
It checks for existing data before inserting.
"""
import asyncio
import os
import sys

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select

from app.core.database import async_session_maker, init_db
from app.core.security import hash_password
from app.models.course import Course
from app.models.course_skill import CourseSkill
from app.models.request_status import STATUS_PENDING
from app.models.session_request import SessionRequest
from app.models.user import User, ROLE_INSTRUCTOR, ROLE_USER
from app.models.user_skill import UserSkill, LEVEL_ADVANCED
from app.repositories.skill_repository import SkillRepository


# ─── Accounts ─────────────────────────────────────────────────

INSTRUCTOR = {
    "email": "instructor@skillhub.dev",
    "password": "password123",
    "role": ROLE_INSTRUCTOR,
}

STUDENT = {
    "email": "student@skillhub.dev",
    "password": "password123",
    "role": ROLE_USER,
}

COURSE_TITLE = "Intro to Web Development"

# Skills the sample course teaches
COURSE_SKILLS = ["HTML", "CSS", "JavaScript"]

# (skill name, description) the instructor offers for peer mentoring
INSTRUCTOR_SKILL = ("CSS", "Layouts, flexbox and grid")


async def _get_or_create_user(db, account: dict) -> User:
    user = (await db.execute(
        select(User).where(User.email == account["email"])
    )).scalar_one_or_none()
    if user:
        print(f"  User {account['email']} already exists, skipping...")
        return user

    user = User(
        email=account["email"],
        password_hash=hash_password(account["password"]),
        role=account["role"],
    )
    db.add(user)
    await db.flush()
    print(f"  Created {account['role']}: {account['email']}")
    return user


async def seed():
    """Run the seed process."""
    print("Seeding database...")

    # Initialize tables
    await init_db()
    print("  Tables created")

    skill_repo = SkillRepository()

    async with async_session_maker() as db:

        # ── Users ──────────────────────────────────────────
        instructor = await _get_or_create_user(db, INSTRUCTOR)
        student = await _get_or_create_user(db, STUDENT)

        # ── Course ─────────────────────────────────────────
        course = (await db.execute(
            select(Course).where(
                Course.title == COURSE_TITLE,
                Course.instructor_id == instructor.id,
            )
        )).scalar_one_or_none()
        if course:
            print("  Course already exists, skipping...")
        else:
            course = Course(title=COURSE_TITLE, instructor_id=instructor.id)
            db.add(course)
            await db.flush()
            print(f"  Created course: {COURSE_TITLE}")

        # ── Skills & course tags ───────────────────────────
        # ensure() is insert-ignore, so existing skills are reused
        skills = {name: await skill_repo.ensure(db, name) for name in COURSE_SKILLS}

        existing = await db.execute(
            select(CourseSkill).where(CourseSkill.course_id == course.id).limit(1)
        )
        if existing.scalar_one_or_none():
            print("  Course skills already exist, skipping...")
        else:
            for skill in skills.values():
                db.add(CourseSkill(course_id=course.id, skill_id=skill.id))
            await db.flush()
            print(f"  Tagged course with {len(skills)} skills")

        # ── Instructor mentoring skill ─────────────────────
        existing = await db.execute(
            select(UserSkill).where(UserSkill.user_id == instructor.id).limit(1)
        )
        if existing.scalar_one_or_none():
            print("  User skills already exist, skipping...")
        else:
            name, description = INSTRUCTOR_SKILL
            db.add(UserSkill(
                user_id=instructor.id,
                skill_id=skills[name].id,
                level=LEVEL_ADVANCED,
                description=description,
            ))
            await db.flush()
            print(f"  Instructor now offers mentoring in {name}")

        # ── Pending session request ────────────────────────
        existing = await db.execute(
            select(SessionRequest).where(SessionRequest.user_id == student.id).limit(1)
        )
        if existing.scalar_one_or_none():
            print("  Session requests already exist, skipping...")
        else:
            db.add(SessionRequest(
                user_id=student.id,
                course_id=course.id,
                status=STATUS_PENDING,
            ))
            await db.flush()
            print("  Created a pending session request")

        # Commit everything
        await db.commit()
        print()
        print("Seed complete!")
        print(f"  Instructor: {INSTRUCTOR['email']} / {INSTRUCTOR['password']}")
        print(f"  Student:    {STUDENT['email']} / {STUDENT['password']}")


if __name__ == "__main__":
    asyncio.run(seed())
