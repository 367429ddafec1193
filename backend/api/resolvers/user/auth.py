"""Context accessors shared by the user resolvers."""

from strawberry.types import Info

from api.errors import AuthenticationRequiredError
from domain.user.core.value_objects.user_id import UserId
from domain.user.services.user_service import UserDomainService
from infrastructure.security.jwt_service import JwtService


def user_service(info: Info) -> UserDomainService:
    service = info.context.get("user_service")
    if not service:
        raise RuntimeError("user_service not found in context")
    return service


def jwt_service(info: Info) -> JwtService:
    service = info.context.get("jwt_service")
    if not service:
        raise RuntimeError("jwt_service not found in context")
    return service


def require_user_id(info: Info) -> UserId:
    """Id of the authenticated caller.

    Raises:
        AuthenticationRequiredError: If the request carried no valid token
    """
    user_id = info.context.get("current_user_id")
    if user_id is None:
        raise AuthenticationRequiredError()
    return user_id
