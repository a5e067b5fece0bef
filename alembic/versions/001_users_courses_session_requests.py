"""create users, courses and session_requests

Revision ID: 001_core_tables
Revises:
Create Date: 2026-10-19

The course-session side of the platform:
  • users (email unique, role CHECK user|instructor)
  • courses (owned by an instructor)
  • session_requests - state machine: pending → accepted / rejected
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers
revision = "001_core_tables"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="user"),
        *_timestamps(),
        sa.CheckConstraint("role IN ('user', 'instructor')", name="ck_users_role"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "courses",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("instructor_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_courses_instructor_id", "courses", ["instructor_id"])

    op.create_table(
        "session_requests",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="ck_session_requests_status",
        ),
    )
    op.create_index("ix_session_requests_user_id", "session_requests", ["user_id"])
    op.create_index("ix_session_requests_course_id", "session_requests", ["course_id"])


def downgrade() -> None:
    op.drop_index("ix_session_requests_course_id", table_name="session_requests")
    op.drop_index("ix_session_requests_user_id", table_name="session_requests")
    op.drop_table("session_requests")
    op.drop_index("ix_courses_instructor_id", table_name="courses")
    op.drop_table("courses")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
