"""
Skill model - the shared, deduplicated skill vocabulary.
"""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Skill(BaseModel):
    """
    Skill tag.

    Names are matched exactly: no trimming, no case folding.
    """

    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Skill {self.name}>"
