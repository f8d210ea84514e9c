from sqlalchemy import Column, Integer, String, Numeric
from app.db import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    discount = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    review_count = Column(Integer, nullable=True)
    image_url = Column(String(1024), nullable=True)

    def __repr__(self):
        return f"<Product id={self.id} name={self.name}>"
