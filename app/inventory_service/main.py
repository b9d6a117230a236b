# inventory_service/main.py
from fastapi import FastAPI, HTTPException

app = FastAPI(title="Inventory Service (dev mock)")


INVENTARIO = {
    1: {"idProducto": 1, "stockActual": 15},
    2: {"idProducto": 2, "stockActual": 42},
    3: {"idProducto": 3, "stockActual": 0},
    4: {"idProducto": 4},  # brak stockActual, klient traktuje jako 0
}

@app.get("/inventario/{product_id}")
def get_inventario(product_id: int):
    inventario = INVENTARIO.get(product_id)
    if not inventario:
        raise HTTPException(status_code=404, detail="Inventario no encontrado")
    return inventario
