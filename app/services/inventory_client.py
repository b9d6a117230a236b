# app/services/inventory_client.py
from dataclasses import dataclass

import requests

from app.domain.schemas import InventarioResponse
from app.utils.settings import (
    INVENTORY_SERVICE_URL,
    INVENTORY_SERVICE_ENABLED,
    INVENTORY_CONNECT_TIMEOUT_MS,
    INVENTORY_READ_TIMEOUT_MS,
)
from app.utils.logging import get_logger

logger = get_logger(__name__)

FALLBACK_STOCK = 0


@dataclass(frozen=True)
class InventoryConfig:
    base_url: str
    enabled: bool = True
    connect_timeout_ms: int = 3000
    read_timeout_ms: int = 3000

    @classmethod
    def from_settings(cls) -> "InventoryConfig":
        return cls(
            base_url=INVENTORY_SERVICE_URL,
            enabled=INVENTORY_SERVICE_ENABLED,
            connect_timeout_ms=INVENTORY_CONNECT_TIMEOUT_MS,
            read_timeout_ms=INVENTORY_READ_TIMEOUT_MS,
        )

    @property
    def timeout(self) -> tuple[float, float]:
        #requests: (connect, read) w sekundach
        return self.connect_timeout_ms / 1000, self.read_timeout_ms / 1000


class InventoryClient:
    """
    Klient inventory-service.
    get_stock nigdy nie rzuca wyjatku - kazdy blad (timeout, polaczenie,
    status != 2xx, zly JSON) konczy sie logiem i stockiem 0.
    Bez retry i bez stanu miedzy wywolaniami, jedno zapytanie na wywolanie.
    """

    def __init__(self, config: InventoryConfig | None = None, session: requests.Session | None = None):
        self.config = config or InventoryConfig.from_settings()
        self.session = session or requests.Session()

    def stock_url(self, product_id: int) -> str:
        return f"{self.config.base_url.rstrip('/')}/inventario/{product_id}"

    def get_stock(self, product_id: int) -> int:
        if not self.config.enabled:
            logger.info(f"Inventory-service wylaczony, stock 0 dla produktu {product_id}")
            return FALLBACK_STOCK

        url = self.stock_url(product_id)
        try:
            logger.info(f"InventoryClient GET {url}")

            resp = self.session.get(url, timeout=self.config.timeout)
            resp.raise_for_status()
            inventario = InventarioResponse.model_validate(resp.json())

            stock = inventario.stockActual if inventario.stockActual is not None else FALLBACK_STOCK
            logger.info(f"Stock dla produktu {product_id}: {stock}")
            return stock

        except Exception as e:
            logger.error(f"Blad podczas pobierania stocku produktu {product_id}: {e}")
            logger.info(f"Zwracam domyslny stock ({FALLBACK_STOCK}) dla produktu {product_id}")
            return FALLBACK_STOCK
