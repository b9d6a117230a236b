from sqlalchemy import Column, Integer, String, Numeric

from app.data.database import Base


class ProductModel(Base):
    __tablename__ = "productos"

    id = Column(Integer, primary_key=True)

    nombre = Column(String, nullable=False)
    descripcion = Column(String, nullable=True)
    precio = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    categoria = Column(String, nullable=False)
