"""
Pydantic schemas for API validation and serialization.
"""
from app.schemas.base import (
    BaseSchema,
    IDSchema,
    MessageResponse,
    UpdatedResponse,
    DeletedResponse,
)
from app.schemas.user import UserResponse
from app.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    CurrentActor,
)
from app.schemas.course import (
    CourseCreate,
    CourseResponse,
    CourseSkillCreate,
    CourseSkillResponse,
)
from app.schemas.skill import (
    SkillLevel,
    SkillCreate,
    SkillResponse,
    UserSkillCreate,
    UserSkillUpdate,
    UserSkillResponse,
    BrowseSkillItem,
)
from app.schemas.request import (
    SessionRequestCreate,
    SessionRequestResponse,
    StudentSessionItem,
    InstructorRequestItem,
    SkillRequestCreate,
    SkillRequestResponse,
    SkillRequestReceivedItem,
    SkillRequestSentItem,
)

__all__ = [
    # Base
    "BaseSchema",
    "IDSchema",
    "MessageResponse",
    "UpdatedResponse",
    "DeletedResponse",
    # User
    "UserResponse",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "RegisterResponse",
    "TokenResponse",
    "CurrentActor",
    # Course
    "CourseCreate",
    "CourseResponse",
    "CourseSkillCreate",
    "CourseSkillResponse",
    # Skill
    "SkillLevel",
    "SkillCreate",
    "SkillResponse",
    "UserSkillCreate",
    "UserSkillUpdate",
    "UserSkillResponse",
    "BrowseSkillItem",
    # Requests
    "SessionRequestCreate",
    "SessionRequestResponse",
    "StudentSessionItem",
    "InstructorRequestItem",
    "SkillRequestCreate",
    "SkillRequestResponse",
    "SkillRequestReceivedItem",
    "SkillRequestSentItem",
]
