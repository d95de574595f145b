# storefront/services/auth_service.py
import re
from dataclasses import dataclass
from typing import Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.admin import AdminModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import Conflict, Unauthorized, ValidationError
from storefront.repos.user_repo import AdminRepo, UserRepo
from storefront.utils.logging import get_logger
from storefront.utils.security import create_token, decode_token, hash_password, verify_password

logger = get_logger(__name__)

_ADMIN_PASSWORD_RE = re.compile(r"^(?=.*[A-Za-z])(?=.*\d).{8,}$")
USER_MIN_PASSWORD = 6


@dataclass
class Identity:
    """Tozsamosc przypieta do requestu przez bramke auth."""

    kind: str  # "user" albo "admin"
    record: Union[UserModel, AdminModel]

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def is_admin(self) -> bool:
        return self.kind == "admin"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class AuthService:
    """
    Rejestracja i logowanie userow i adminow oraz weryfikacja tokenu.
    Token niesie tylko id - rekord szukamy najpierw wsrod userow, potem adminow.
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepo(db)
        self.admins = AdminRepo(db)

    #commands
    def register_user(self, name: str, email: str, password: str) -> dict:
        email = normalize_email(email)
        if not name or not name.strip():
            raise ValidationError("All fields are required")
        if len(password or "") < USER_MIN_PASSWORD:
            raise ValidationError(f"Password must be at least {USER_MIN_PASSWORD} characters")

        if self.users.get_user_by_email(email):
            logger.warning(f"Registration rejected, email {email} already taken")
            raise Conflict("User already exists")

        user = UserModel(
            name=name.strip(),
            email=email,
            password_hash=hash_password(password),
            is_admin=False,
        )
        try:
            self.users.create_user(user)
            self.db.commit()
        except IntegrityError:
            # rownolegla rejestracja z tym samym mailem - unique constraint
            self.db.rollback()
            raise Conflict("User already exists")

        logger.info(f"Registered user {user.id}")
        return {"user": user, "token": create_token(user.id, "user")}

    def register_admin(self, name: str, email: str, password: str, role: str | None = None) -> dict:
        email = normalize_email(email)
        if not name or not name.strip():
            raise ValidationError("All fields are required.")
        if not _ADMIN_PASSWORD_RE.match(password or ""):
            raise ValidationError(
                "Password must be at least 8 characters long and include "
                "at least one letter and one number."
            )

        if self.admins.get_admin_by_email(email):
            logger.warning(f"Admin registration rejected, email {email} already taken")
            raise Conflict("Admin already exists.")

        admin = AdminModel(
            name=name.strip(),
            email=email,
            password_hash=hash_password(password),
            role=role or "admin",
        )
        try:
            self.admins.create_admin(admin)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise Conflict("Admin already exists.")

        logger.info(f"Registered admin {admin.id}")
        return {"admin": admin, "token": create_token(admin.id, admin.role)}

    def login_user(self, email: str, password: str) -> dict:
        user = self.users.get_user_by_email(normalize_email(email))
        if not user or not verify_password(user.password_hash, password):
            logger.warning("User login failed")
            raise Unauthorized("Invalid credentials")

        logger.info(f"User {user.id} logged in")
        return {"user": user, "token": create_token(user.id, "user")}

    def login_admin(self, email: str, password: str) -> dict:
        admin = self.admins.get_admin_by_email(normalize_email(email))
        if not admin or not verify_password(admin.password_hash, password):
            logger.warning("Admin login failed")
            raise Unauthorized("Invalid credentials.")

        logger.info(f"Admin {admin.id} logged in")
        return {"admin": admin, "token": create_token(admin.id, admin.role)}

    #query
    def authenticate(self, token: str) -> Identity:
        payload = decode_token(token)
        subject_id = payload.get("id")
        if not subject_id:
            raise Unauthorized("Invalid token payload")

        user = self.users.get_user(subject_id)
        if user:
            return Identity(kind="user", record=user)

        admin = self.admins.get_admin(subject_id)
        if admin:
            return Identity(kind="admin", record=admin)

        raise Unauthorized("Account not found")
