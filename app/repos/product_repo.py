# app/repos/product_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> list[ProductModel]:
        return list(
            self.db.execute(select(ProductModel).order_by(ProductModel.id)).scalars().all()
        )

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def exists(self, product_id: int) -> bool:
        return self.get_product(product_id) is not None

    def save(self, product: ProductModel) -> ProductModel:
        #upsert po id: bez id INSERT, z istniejacym id UPDATE wszystkich pol
        if product.id is None:
            self.db.add(product)
        else:
            product = self.db.merge(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_by_id(self, product_id: int) -> None:
        #brak wiersza to nie blad
        self.db.execute(delete(ProductModel).where(ProductModel.id == product_id))
        self.db.commit()
