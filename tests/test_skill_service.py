"""Tests for the skill catalog, user skills and course skill tags."""

import pytest

from app.core.exceptions import (
    ConflictException,
    ForbiddenException,
    NotFoundException,
    UnauthorizedException,
    UserSkillNotFoundException,
)
from app.models.user import ROLE_INSTRUCTOR
from app.services.skill_service import SkillService


@pytest.fixture
def service():
    return SkillService()


class TestSkillCatalog:
    async def test_ensure_is_idempotent(self, db, service):
        first = await service.ensure_skill(db, "Python")
        second = await service.ensure_skill(db, "Python")

        assert first.id == second.id
        assert [s.name for s in await service.list_skills(db)] == ["Python"]

    async def test_names_are_case_sensitive(self, db, service):
        lower = await service.ensure_skill(db, "python")
        upper = await service.ensure_skill(db, "Python")

        assert lower.id != upper.id
        assert len(await service.list_skills(db)) == 2


class TestUserSkills:
    async def test_add_and_list(self, db, service, student):
        created = await service.add_user_skill(
            db, student, name="CSS", level="Advanced", description="Grid layouts"
        )

        assert created.name == "CSS"
        assert created.level == "Advanced"

        skills = await service.list_user_skills(db, student)
        assert [(s.id, s.name, s.description) for s in skills] == [
            (created.id, "CSS", "Grid layouts")
        ]

    async def test_same_skill_twice_gives_two_rows(self, db, service, student):
        await service.add_user_skill(db, student, name="CSS", level="Beginner")
        await service.add_user_skill(db, student, name="CSS", level="Advanced")

        skills = await service.list_user_skills(db, student)

        assert [s.level for s in skills] == ["Beginner", "Advanced"]
        # Both rows point at the one catalog entry
        assert len(await service.list_skills(db)) == 1

    async def test_anonymous_is_rejected(self, db, service):
        with pytest.raises(UnauthorizedException):
            await service.add_user_skill(db, None, name="CSS", level="Beginner")

    async def test_partial_update_keeps_omitted_fields(self, db, service, student):
        created = await service.add_user_skill(
            db, student, name="SQL", level="Beginner", description="Joins"
        )

        result = await service.update_user_skill(db, student, created.id, level="Intermediate")

        assert result.updated == 1
        skills = await service.list_user_skills(db, student)
        assert skills[0].level == "Intermediate"
        assert skills[0].description == "Joins"

    async def test_update_other_users_skill_is_not_found(
        self, db, service, student, make_user
    ):
        created = await service.add_user_skill(db, student, name="SQL", level="Beginner")
        other = await make_user("other@skillhub.dev")

        with pytest.raises(UserSkillNotFoundException):
            await service.update_user_skill(db, other, created.id, level="Advanced")

    async def test_delete_is_scoped_to_owner(self, db, service, student, make_user):
        created = await service.add_user_skill(db, student, name="SQL", level="Beginner")
        other = await make_user("other@skillhub.dev")

        assert (await service.delete_user_skill(db, other, created.id)).deleted == 0
        assert len(await service.list_user_skills(db, student)) == 1

        assert (await service.delete_user_skill(db, student, created.id)).deleted == 1
        assert await service.list_user_skills(db, student) == []

    async def test_browse_orders_by_skill_then_email(self, db, service, make_user):
        zoe = await make_user("zoe@skillhub.dev")
        adam = await make_user("adam@skillhub.dev")
        await service.add_user_skill(db, zoe, name="Python", level="Advanced")
        await service.add_user_skill(db, adam, name="Python", level="Beginner")
        await service.add_user_skill(db, zoe, name="CSS", level="Intermediate")

        rows = await service.browse(db)

        assert [(r.name, r.email) for r in rows] == [
            ("CSS", "zoe@skillhub.dev"),
            ("Python", "adam@skillhub.dev"),
            ("Python", "zoe@skillhub.dev"),
        ]
        assert rows[1].user_id == adam.user_id


class TestCourseSkills:
    async def test_owner_tags_course(self, db, service, instructor, make_course, make_skill):
        course_id = await make_course(instructor)
        skill_id = await make_skill("HTML")

        tag = await service.add_course_skill(db, instructor, course_id, skill_id)

        assert tag.skill_id == skill_id
        assert tag.name == "HTML"
        skills = await service.list_course_skills(db, course_id)
        assert [s.name for s in skills] == ["HTML"]

    async def test_other_instructor_is_forbidden(
        self, db, service, instructor, make_user, make_course, make_skill
    ):
        course_id = await make_course(instructor)
        skill_id = await make_skill("HTML")
        other = await make_user("other@skillhub.dev", ROLE_INSTRUCTOR)

        with pytest.raises(ForbiddenException):
            await service.add_course_skill(db, other, course_id, skill_id)
        with pytest.raises(ForbiddenException):
            await service.remove_course_skill(db, other, course_id, skill_id)

    async def test_missing_course_is_forbidden(self, db, service, instructor, make_skill):
        skill_id = await make_skill("HTML")

        with pytest.raises(ForbiddenException):
            await service.add_course_skill(db, instructor, 999, skill_id)

    async def test_unknown_skill(self, db, service, instructor, make_course):
        course_id = await make_course(instructor)

        with pytest.raises(NotFoundException):
            await service.add_course_skill(db, instructor, course_id, 999)

    async def test_duplicate_tag_conflicts(
        self, db, service, instructor, make_course, make_skill
    ):
        course_id = await make_course(instructor)
        skill_id = await make_skill("HTML")
        await service.add_course_skill(db, instructor, course_id, skill_id)

        with pytest.raises(ConflictException):
            await service.add_course_skill(db, instructor, course_id, skill_id)

        assert len(await service.list_course_skills(db, course_id)) == 1

    async def test_remove_is_idempotent(
        self, db, service, instructor, make_course, make_skill
    ):
        course_id = await make_course(instructor)
        skill_id = await make_skill("HTML")
        await service.add_course_skill(db, instructor, course_id, skill_id)

        assert (await service.remove_course_skill(db, instructor, course_id, skill_id)).deleted == 1
        assert (await service.remove_course_skill(db, instructor, course_id, skill_id)).deleted == 0
        assert await service.list_course_skills(db, course_id) == []
