"""
SessionRequest model - a student's request for a session of a course.
"""
from typing import TYPE_CHECKING
from sqlalchemy import String, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel
from app.models.request_status import STATUS_PENDING, STATUS_CHECK_SQL

if TYPE_CHECKING:
    from app.models.course import Course
    from app.models.user import User


class SessionRequest(BaseModel):
    """
    Course session request entity.

    Created by a student. Only the instructor owning the course may move it
    out of pending. Students may file several requests for the same course.
    """

    __tablename__ = "session_requests"

    __table_args__ = (
        CheckConstraint(STATUS_CHECK_SQL, name="ck_session_requests_status"),
    )

    # Foreign Keys
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    course_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("courses.id"),
        nullable=False,
        index=True,
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=STATUS_PENDING,
        server_default=STATUS_PENDING,
    )

    # Relationships
    student: Mapped["User"] = relationship("User")
    course: Mapped["Course"] = relationship("Course", back_populates="session_requests")

    def __repr__(self) -> str:
        return f"<SessionRequest {self.id} course_id={self.course_id} {self.status}>"
