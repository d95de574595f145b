# storefront/api/deps.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.errors import Forbidden, Unauthorized
from storefront.services.auth_service import AuthService, Identity
from storefront.services.lock_service import LockService

bearer = HTTPBearer(auto_error=False)


def get_lock_service() -> LockService:
    return LockService()


def get_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    db: Session = Depends(get_db),
) -> Identity:
    """Bramka auth: Bearer token -> user albo admin przypiety do requestu."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise Unauthorized("No token, not authorized")

    return AuthService(db).authenticate(credentials.credentials)


def require_user(identity: Identity = Depends(get_identity)) -> Identity:
    if identity.kind != "user":
        raise Forbidden("User account required")
    return identity


def require_admin(identity: Identity = Depends(get_identity)) -> Identity:
    if not identity.is_admin:
        raise Forbidden("Admin access only")
    return identity
