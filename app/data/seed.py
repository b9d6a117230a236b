# app/data/seed.py
from app.data.database import SessionLocal
from app.data.models.product import ProductModel
from app.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {"nombre": "Laptop Dell", "descripcion": "Laptop Dell Inspiron 15 con 8GB RAM", "precio": 799.99, "categoria": "Electrónicos"},
    {"nombre": "Mouse Logitech", "descripcion": "Mouse inalámbrico", "precio": 29.90, "categoria": "Accesorios"},
    {"nombre": "Monitor LG", "descripcion": None, "precio": 189.00, "categoria": "Electrónicos"},
]


def seed(session_factory=SessionLocal) -> int:
    db = session_factory()
    try:
        # tylko gdy tabela pusta
        if db.query(ProductModel).first():
            return 0
        db.add_all([ProductModel(**p) for p in PRODUCTS])
        db.commit()
        logger.info(f"Seed: dodano {len(PRODUCTS)} produktow")
        return len(PRODUCTS)
    finally:
        db.close()
