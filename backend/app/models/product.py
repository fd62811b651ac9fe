from sqlalchemy import Column, Integer, String, Numeric
from app.core.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(String(1024), nullable=False)
    category = Column(String(255), nullable=False)
    # asdecimal=False returns floats so responses serialize as JSON numbers
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    quantity = Column(Integer, nullable=False)
