from .user_service import UserDomainService

__all__ = ["UserDomainService"]
