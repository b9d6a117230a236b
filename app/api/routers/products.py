# app/api/routers/products.py
from functools import lru_cache
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.schemas import ProductoIn, ProductoOut, ProductoConStockOut
from app.services.product_service import ProductService
from app.services.inventory_client import InventoryClient

router = APIRouter(prefix="/api/productos", tags=["productos"])


@lru_cache
def get_inventory_client() -> InventoryClient:
    #jeden klient (i jedna requests.Session) na proces, pula polaczen wspoldzielona
    return InventoryClient()


def get_service(db: Session, inventory_client: InventoryClient):
    return ProductService(db=db, inventory_client=inventory_client)


@router.get("", response_model=List[ProductoConStockOut])
def list_products(
    db: Session = Depends(get_db),
    inventory_client: InventoryClient = Depends(get_inventory_client),
):
    """
    Lista wszystkich produktow ze stockiem z inventory-service.
    """
    svc = get_service(db, inventory_client)
    return svc.list_products_with_stock()


@router.post("", response_model=ProductoOut, status_code=201)
def create_product(
    payload: ProductoIn,
    db: Session = Depends(get_db),
    inventory_client: InventoryClient = Depends(get_inventory_client),
):
    svc = get_service(db, inventory_client)
    return svc.create_product(payload)


@router.get("/{product_id}", response_model=ProductoConStockOut)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
    inventory_client: InventoryClient = Depends(get_inventory_client),
):
    """
    Produkt po ID ze stockiem. Przy awarii inventory-service stock = 0.
    """
    svc = get_service(db, inventory_client)
    product = svc.get_product_with_stock(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Produkt nie znaleziony")
    return product


@router.put("/{product_id}", response_model=ProductoOut)
def update_product(
    product_id: int,
    payload: ProductoIn,
    db: Session = Depends(get_db),
    inventory_client: InventoryClient = Depends(get_inventory_client),
):
    svc = get_service(db, inventory_client)
    product = svc.update_product(product_id, payload)
    if not product:
        raise HTTPException(status_code=404, detail="Produkt nie znaleziony")
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    inventory_client: InventoryClient = Depends(get_inventory_client),
):
    svc = get_service(db, inventory_client)
    svc.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
