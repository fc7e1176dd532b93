from quizportal.application.services.user_service import UserService

__all__ = ["UserService"]
