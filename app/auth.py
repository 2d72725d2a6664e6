import logging
from enum import Enum
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .database import get_db
from .models import User
from .security_utils import verify_jwt_token
from .shared.errors import AuthenticationError, ForbiddenError

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


class Capability(str, Enum):
    """What an authenticated user may do, resolved once per request"""

    CUSTOMER = "customer"
    ADMINISTRATOR = "administrator"


def resolve_capability(user: User) -> Capability:
    """Map a user's stored role onto the closed capability set.

    Unknown or missing roles resolve to CUSTOMER.
    """
    if (user.role or "").strip().lower() == "admin":
        return Capability.ADMINISTRATOR
    return Capability.CUSTOMER


def is_admin(user: User) -> bool:
    return resolve_capability(user) is Capability.ADMINISTRATOR


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Get current user from the bearer token"""

    if not credentials or not credentials.credentials:
        logger.warning("⚠️ Request without bearer token")
        raise AuthenticationError("No token, authorization denied")

    token = credentials.credentials

    # Basic token format validation before processing
    if len(token.split(".")) != 3:
        logger.warning(f"⚠️ Malformed token received, token length: {len(token)}")
        raise AuthenticationError("Token is not valid")

    payload = verify_jwt_token(token)
    if not payload:
        raise AuthenticationError("Token is not valid")

    subject = payload.get("sub") or payload.get("userId")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        logger.warning(f"⚠️ Token missing usable subject claim. Claims: {list(payload.keys())}")
        raise AuthenticationError("Token is not valid") from None

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.warning(f"⚠️ Token subject {user_id} does not match any user")
        raise AuthenticationError("User not found")

    logger.debug(f"✅ User authenticated: {user.email}")
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Dependency for administrator-only routes"""
    if not is_admin(user):
        logger.warning(f"⚠️ User {user.id} attempted an administrator action")
        raise ForbiddenError("Access denied. Admin role required.")
    return user
