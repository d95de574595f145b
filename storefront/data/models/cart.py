#storefront/data/models/cart.py
from sqlalchemy import Column, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship

from storefront.data.database import Base, new_id, utcnow


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(String(36), primary_key=True, default=new_id)
    # jeden koszyk na uzytkownika
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, unique=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
    )
