"""Authentication types and utilities."""

from dataclasses import dataclass, field

from litestar import Request
from litestar.exceptions import NotAuthorizedException


APPROVER_CAPABILITY = "contacts:approve"


@dataclass
class AuthenticatedUser:
    """Represents an authenticated user in the request scope."""

    id: str
    username: str
    full_name: str | None
    capabilities: set[str] = field(default_factory=set)

    @property
    def is_approver(self) -> bool:
        return APPROVER_CAPABILITY in self.capabilities


class ChallengeException(NotAuthorizedException):
    """401 instructing the client to (re-)authenticate.

    Used for anonymous requests and for policy denials alike, so a denied
    request looks the same as a missing session.
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(
            detail=detail,
            headers={"WWW-Authenticate": 'Session realm="contacts", login="/api/auth/login"'},
        )


async def provide_current_user(request: Request) -> AuthenticatedUser:
    """Dependency provider that returns the authenticated user from the request scope."""
    user = request.scope.get("user")
    if not user:
        raise ChallengeException(detail="Not authenticated")
    return user
