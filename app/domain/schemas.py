# app/domain/schemas.py
from decimal import Decimal

from pydantic import BaseModel, Field, ConfigDict, field_validator


class ProductoIn(BaseModel):
    """Schema dla tworzenia i aktualizacji produktu."""

    id: int | None = Field(None, description="Ignorowane przy tworzeniu, nadpisywane przy aktualizacji")
    nombre: str = Field(..., description="Nazwa produktu", examples=["Laptop Dell"])
    descripcion: str | None = Field(None, description="Opis produktu (opcjonalny)")
    #te same granice co kolumna Numeric(10, 2), bez inf/nan
    precio: Decimal = Field(
        ..., gt=0, max_digits=10, decimal_places=2,
        description="Cena produktu (musi być > 0)", examples=["799.99"],
    )
    categoria: str = Field(..., description="Kategoria produktu", examples=["Electrónicos"])

    @field_validator("nombre", "categoria")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Pole nie może być puste")
        return value


class ProductoOut(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    nombre: str
    descripcion: str | None = None
    precio: float
    categoria: str

    model_config = ConfigDict(from_attributes=True)


class ProductoConStockOut(ProductoOut):
    """Produkt + stan magazynowy z inventory-service (response)."""

    stock: int = Field(0, ge=0)


class InventarioResponse(BaseModel):
    """Odpowiedź inventory-service, GET /inventario/{id}."""

    idProducto: int | None = None
    stockActual: int | None = Field(None, ge=0)
