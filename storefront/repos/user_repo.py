from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.data.models.admin import AdminModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.flush()
        return user


class AdminRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_admin(self, admin_id: str) -> AdminModel | None:
        return self.db.get(AdminModel, admin_id)

    def get_admin_by_email(self, email: str) -> AdminModel | None:
        return self.db.execute(
            select(AdminModel).where(AdminModel.email == email)
        ).scalar_one_or_none()

    def create_admin(self, admin: AdminModel) -> AdminModel:
        self.db.add(admin)
        self.db.flush()
        return admin
