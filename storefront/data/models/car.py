from sqlalchemy import Column, String, Text, DateTime, Numeric, JSON

from storefront.data.database import Base, new_id, utcnow


class CarModel(Base):
    __tablename__ = "cars"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    brand = Column(String, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    description = Column(Text, nullable=False, default="")
    images = Column(JSON, nullable=False, default=list)

    contact_type = Column(String, nullable=False, default="whatsapp")  # whatsapp, instagram
    contact_link = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
