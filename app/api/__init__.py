# app/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.routers import products
from app.api.routers.health import router as health_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Product Service",
        version="1.0.0",
        description="CRUD produktow ze stockiem z inventory-service",
    )
    app.include_router(health_router)
    app.include_router(products.router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        #bez "input" - np. Infinity/NaN z body nie da sie zapisac jako JSON
        errors = [
            {"loc": error["loc"], "msg": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        return JSONResponse(status_code=422, content={"detail": errors})

    return app
