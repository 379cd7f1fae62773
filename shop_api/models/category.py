"""
Category model
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from shop_api.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, default="")

    # Derived from Product.category_id, never stored on the category row
    products = relationship("Product", back_populates="category", order_by="Product.id")
