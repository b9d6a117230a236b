# app/main.py
from app.data.database import Base, engine
from app.api import create_app
from app.data.seed import seed
from app.utils.settings import SEED_ON_STARTUP
from app.utils.logging import configure_logging, get_logger
import uvicorn

configure_logging()
logger = get_logger(__name__)

# import modeli przed create_all
from app.data.models.product import ProductModel  # noqa: E402,F401

logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")

try:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
except Exception as e:
    logger.error(f"Failed to create tables: {e}")
    raise

if SEED_ON_STARTUP:
    seed()


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
