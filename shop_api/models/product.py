"""
Product model
"""
from sqlalchemy import Column, Integer, String, Boolean, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from shop_api.database import Base


class Product(Base):
    __tablename__ = "products"

    # Assigned by the caller on create, never generated
    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=False, default="")
    sku = Column(String, nullable=False, default="", index=True)
    price = Column(Numeric(10, 2), nullable=False)
    is_available = Column(Boolean, nullable=False, default=False)

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    category = relationship("Category", back_populates="products")
