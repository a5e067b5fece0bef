"""add skill vocabulary, skill tags and skill_requests

Revision ID: 002_skills
Revises: 001_core_tables
Create Date: 2026-10-19

Adds the peer-mentoring side:
  • skills (name unique, exact match)
  • user_skills - skills a user offers, level CHECK Beginner|Intermediate|Advanced
  • course_skills - unique per (course_id, skill_id)
  • skill_requests - unique per (learner_id, mentor_id, skill_id),
    learner_id <> mentor_id, same status machine as session_requests
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers
revision = "002_skills"
down_revision = "001_core_tables"
branch_labels = None
depends_on = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
        *_timestamps(),
    )

    op.create_table(
        "user_skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("skill_id", sa.Integer(), sa.ForeignKey("skills.id"), nullable=False),
        sa.Column("level", sa.String(length=20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        *_timestamps(),
        sa.CheckConstraint(
            "level IN ('Beginner', 'Intermediate', 'Advanced')",
            name="ck_user_skills_level",
        ),
    )
    op.create_index("ix_user_skills_user_id", "user_skills", ["user_id"])
    op.create_index("ix_user_skills_skill_id", "user_skills", ["skill_id"])

    op.create_table(
        "course_skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("skill_id", sa.Integer(), sa.ForeignKey("skills.id"), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("course_id", "skill_id", name="uq_course_skill"),
    )
    op.create_index("ix_course_skills_course_id", "course_skills", ["course_id"])

    op.create_table(
        "skill_requests",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("learner_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("mentor_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("skill_id", sa.Integer(), sa.ForeignKey("skills.id"), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
        *_timestamps(),
        sa.UniqueConstraint("learner_id", "mentor_id", "skill_id", name="uq_skill_request"),
        sa.CheckConstraint("learner_id <> mentor_id", name="ck_skill_requests_not_self"),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="ck_skill_requests_status",
        ),
    )
    op.create_index("ix_skill_requests_learner_id", "skill_requests", ["learner_id"])
    op.create_index("ix_skill_requests_mentor_id", "skill_requests", ["mentor_id"])


def downgrade() -> None:
    op.drop_index("ix_skill_requests_mentor_id", table_name="skill_requests")
    op.drop_index("ix_skill_requests_learner_id", table_name="skill_requests")
    op.drop_table("skill_requests")
    op.drop_index("ix_course_skills_course_id", table_name="course_skills")
    op.drop_table("course_skills")
    op.drop_index("ix_user_skills_skill_id", table_name="user_skills")
    op.drop_index("ix_user_skills_user_id", table_name="user_skills")
    op.drop_table("user_skills")
    op.drop_table("skills")
