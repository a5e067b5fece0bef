"""
Course model - a course offered by an instructor.
"""
from typing import TYPE_CHECKING, List
from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.course_skill import CourseSkill
    from app.models.session_request import SessionRequest


class Course(BaseModel):
    """
    Course entity.

    Owned by exactly one instructor, who alone decides on session requests
    and edits the course's skill tags.
    """

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    instructor_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    instructor: Mapped["User"] = relationship("User", back_populates="courses")
    skills: Mapped[List["CourseSkill"]] = relationship(
        "CourseSkill",
        back_populates="course",
        cascade="all, delete-orphan",
    )
    session_requests: Mapped[List["SessionRequest"]] = relationship(
        "SessionRequest",
        back_populates="course",
    )

    def __repr__(self) -> str:
        return f"<Course {self.title}>"
