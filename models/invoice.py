from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from models.base import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=True)
    image_url = Column(String(2048), nullable=True)
    amount = Column(Numeric(18, 2), nullable=False, default=0)

    products = relationship(
        "Product",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="Product.id",
    )


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(10), nullable=True)
    price = Column(Numeric(18, 2), nullable=False, default=0)

    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), index=True, nullable=False)

    invoice = relationship("Invoice", back_populates="products")
