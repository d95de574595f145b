from sqlalchemy import Column, String

from storefront.data.database import Base, new_id


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False, unique=True)
    label = Column(String, nullable=True)


class BrandModel(Base):
    __tablename__ = "brands"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False, unique=True)
    label = Column(String, nullable=True)
