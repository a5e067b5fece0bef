"""
User model - represents a student or an instructor.
"""
from typing import TYPE_CHECKING, List
from sqlalchemy import String, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel

if TYPE_CHECKING:
    from app.models.course import Course
    from app.models.user_skill import UserSkill

# Valid role values
ROLE_USER = "user"
ROLE_INSTRUCTOR = "instructor"
USER_ROLES = (ROLE_USER, ROLE_INSTRUCTOR)


class User(BaseModel):
    """
    User entity.

    Created on registration and never deleted. Only the password hash may change.
    """

    __tablename__ = "users"

    __table_args__ = (
        CheckConstraint("role IN ('user', 'instructor')", name="ck_users_role"),
    )

    # Authentication
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=ROLE_USER,
        server_default=ROLE_USER,
    )

    # Relationships
    courses: Mapped[List["Course"]] = relationship(
        "Course",
        back_populates="instructor",
    )
    skills: Mapped[List["UserSkill"]] = relationship(
        "UserSkill",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    @property
    def is_instructor(self) -> bool:
        return self.role == ROLE_INSTRUCTOR

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"
