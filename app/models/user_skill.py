"""
UserSkill model - a skill a user declares they can teach.
"""
from typing import TYPE_CHECKING
from sqlalchemy import String, Integer, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.skill import Skill

# Valid proficiency levels
LEVEL_BEGINNER = "Beginner"
LEVEL_INTERMEDIATE = "Intermediate"
LEVEL_ADVANCED = "Advanced"
SKILL_LEVELS = (LEVEL_BEGINNER, LEVEL_INTERMEDIATE, LEVEL_ADVANCED)


class UserSkill(BaseModel):
    """
    User skill entity.

    Self-declared and owned by one user. A user may declare the same skill
    more than once; there is no uniqueness on (user_id, skill_id).
    """

    __tablename__ = "user_skills"

    __table_args__ = (
        CheckConstraint(
            "level IN ('Beginner', 'Intermediate', 'Advanced')",
            name="ck_user_skills_level",
        ),
    )

    # Foreign Keys
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    skill_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("skills.id"),
        nullable=False,
        index=True,
    )

    level: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="skills")
    skill: Mapped["Skill"] = relationship("Skill")

    def __repr__(self) -> str:
        return f"<UserSkill skill_id={self.skill_id} for user_id={self.user_id}>"
