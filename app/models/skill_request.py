"""
SkillRequest model - a peer mentoring request from a learner to a mentor.
"""
from typing import TYPE_CHECKING
from sqlalchemy import String, Integer, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel
from app.models.request_status import STATUS_PENDING, STATUS_CHECK_SQL

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.skill import Skill


class SkillRequest(BaseModel):
    """
    Skill mentoring request entity.

    At most one request per (learner, mentor, skill), whatever its status.
    Only the mentor may accept or reject it.
    """

    __tablename__ = "skill_requests"

    __table_args__ = (
        UniqueConstraint("learner_id", "mentor_id", "skill_id", name="uq_skill_request"),
        CheckConstraint("learner_id <> mentor_id", name="ck_skill_requests_not_self"),
        CheckConstraint(STATUS_CHECK_SQL, name="ck_skill_requests_status"),
    )

    # Foreign Keys
    learner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    mentor_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    skill_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("skills.id"),
        nullable=False,
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=STATUS_PENDING,
        server_default=STATUS_PENDING,
    )

    # Relationships
    learner: Mapped["User"] = relationship("User", foreign_keys=[learner_id])
    mentor: Mapped["User"] = relationship("User", foreign_keys=[mentor_id])
    skill: Mapped["Skill"] = relationship("Skill")

    def __repr__(self) -> str:
        return (
            f"<SkillRequest {self.id} learner_id={self.learner_id} "
            f"mentor_id={self.mentor_id} {self.status}>"
        )
