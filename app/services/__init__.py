"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories, and enforce who may do what.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from app.services.auth_service import AuthService
from app.services.user_service import UserService
from app.services.course_service import CourseService
from app.services.skill_service import SkillService
from app.services.request_workflow import RequestWorkflowService

__all__ = [
    "AuthService",
    "UserService",
    "CourseService",
    "SkillService",
    "RequestWorkflowService",
]
