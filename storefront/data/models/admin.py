from sqlalchemy import Column, String, DateTime

from storefront.data.database import Base, new_id, utcnow


class AdminModel(Base):
    __tablename__ = "admins"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default="admin")

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
