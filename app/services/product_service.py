# app/services/product_service.py
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.schemas import ProductoIn, ProductoConStockOut
from app.repos.product_repo import ProductRepo
from app.services.inventory_client import InventoryClient
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Use case'y dla domeny produktu.
    Query z stockiem lacza dane z lokalnej bazy z inventory-service,
    commands (create, update, delete) dzialaja tylko na bazie.
    """

    def __init__(
        self,
        db: Session,
        inventory_client: InventoryClient,
        repo: ProductRepo | None = None,
    ):
        self.repo = repo or ProductRepo(db)
        self.inventory_client = inventory_client

    #query - odczyt
    def list_products(self) -> list[ProductModel]:
        return self.repo.list_products()

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.repo.get_product(product_id)

    def get_product_with_stock(self, product_id: int) -> ProductoConStockOut | None:
        product = self.get_product(product_id)
        if not product:
            return None

        stock = self.inventory_client.get_stock(product_id)
        return self._with_stock(product, stock)

    def list_products_with_stock(self) -> list[ProductoConStockOut]:
        #jedno zapytanie do inventory na produkt, po kolei, w kolejnosci z bazy
        return [
            self._with_stock(p, self.inventory_client.get_stock(p.id))
            for p in self.list_products()
        ]

    #commands
    def create_product(self, payload: ProductoIn) -> ProductModel:
        #id nadaje baza
        product = ProductModel(**payload.model_dump(exclude={"id"}))
        created = self.repo.save(product)

        logger.info(f"Utworzono produkt {created.id}")
        return created

    def update_product(self, product_id: int, payload: ProductoIn) -> ProductModel | None:
        if not self.repo.exists(product_id):
            return None

        #id z path, nie z body
        product = ProductModel(id=product_id, **payload.model_dump(exclude={"id"}))
        updated = self.repo.save(product)

        logger.info(f"Zaktualizowano produkt {product_id}")
        return updated

    def delete_product(self, product_id: int) -> None:
        self.repo.delete_by_id(product_id)
        logger.info(f"Usunieto produkt {product_id}")

    @staticmethod
    def _with_stock(product: ProductModel, stock: int) -> ProductoConStockOut:
        return ProductoConStockOut(
            id=product.id,
            nombre=product.nombre,
            descripcion=product.descripcion,
            precio=product.precio,
            categoria=product.categoria,
            stock=stock,
        )
